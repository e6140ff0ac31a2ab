"""
Tests para ConsoleLogger.
"""

from bank_barcode.adapters.output.loggers.console_logger import ConsoleLogger
from bank_barcode.domain.exceptions import InvalidCentsError, NoAccountError
from bank_barcode.domain.models import Barcode

CODE = "579440520200360820048831509000000868516259619897100612"


def _barcode() -> Barcode:
    return (
        Barcode.builder()
        .account_number("FI79 4405 2020 0360 82")
        .sum(488315)
        .reference("RF09868516259619897")
        .calendar_due_date(2010, 6, 12)
        .build()
    )


class TestConsoleLogger:
    """Pruebas para ConsoleLogger."""

    def test_resumen_inicial(self):
        assert ConsoleLogger().get_summary() == {
            "codigos_generados": 0,
            "codigos_rechazados": 0,
            "errores": [],
        }

    def test_codigo_generado(self, capsys):
        logger = ConsoleLogger()
        logger.log_barcode_built(_barcode(), CODE)

        salida = capsys.readouterr().out
        assert "FI79 4405 2020 0360 82" in salida
        assert "4 883,15 €" in salida
        assert "RF09868516259619897" in salida
        assert CODE in salida
        assert logger.get_summary()["codigos_generados"] == 1

    def test_codigo_rechazado(self, capsys):
        logger = ConsoleLogger()
        logger.log_barcode_rejected(InvalidCentsError(150))

        assert "InvalidCentsError" in capsys.readouterr().out
        summary = logger.get_summary()
        assert summary["codigos_rechazados"] == 1
        assert summary["errores"][0]["tipo"] == "InvalidCentsError"
        assert "150" in summary["errores"][0]["detalle"]

    def test_lote(self, capsys):
        logger = ConsoleLogger()
        logger.log_batch_start(3)
        logger.log_batch_complete(2, 1)

        salida = capsys.readouterr().out
        assert "3 códigos" in salida
        assert "2 generados, 1 rechazados" in salida

    def test_print_summary(self, capsys):
        logger = ConsoleLogger()
        logger.log_barcode_built(_barcode(), CODE)
        logger.log_barcode_rejected(NoAccountError())
        capsys.readouterr()

        logger.print_summary()

        salida = capsys.readouterr().out
        assert "RESUMEN DE CÓDIGOS DE BARRAS" in salida
        assert "Códigos generados:   1" in salida
        assert "Códigos rechazados:  1" in salida
        assert "NoAccountError" in salida
