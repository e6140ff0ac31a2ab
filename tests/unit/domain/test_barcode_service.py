"""
Tests para bank_barcode.domain.services.barcode_service

Se usa un logger en memoria que implementa BuildLogger para poder
verificar qué eventos se registraron.
"""

import pytest

from bank_barcode.domain.exceptions import (
    AccountNotFinnishError,
    BarcodeBaseError,
    MalformedReferenceError,
    NoAccountError,
)
from bank_barcode.domain.models import Barcode, BarcodeBuilder
from bank_barcode.domain.ports.build_logger import BuildLogger
from bank_barcode.domain.services.barcode_service import BarcodeService
from bank_barcode.infrastructure.registry import LayoutRegistry


class MemoryLogger(BuildLogger):
    """Logger que acumula los eventos en listas."""

    def __init__(self) -> None:
        self.lotes: list[int] = []
        self.generados: list[str] = []
        self.rechazados: list[BarcodeBaseError] = []
        self.completados: list[tuple[int, int]] = []

    def log_batch_start(self, num_items: int) -> None:
        self.lotes.append(num_items)

    def log_barcode_built(self, barcode: Barcode, code: str) -> None:
        self.generados.append(code)

    def log_barcode_rejected(self, error: BarcodeBaseError) -> None:
        self.rechazados.append(error)

    def log_batch_complete(self, num_built: int, num_rejected: int) -> None:
        self.completados.append((num_built, num_rejected))

    def get_summary(self) -> dict:
        return {
            "codigos_generados": len(self.generados),
            "codigos_rechazados": len(self.rechazados),
            "errores": [{"tipo": type(e).__name__, "detalle": str(e)} for e in self.rechazados],
        }


VALID = Barcode.builder().account_number("FI73 3131 3001 0000 58")
VALID_CODE = "5" + "7331313001000058" + "000000" + "00" + "00" + "0" * 21 + "000000"


@pytest.fixture
def logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def service(logger) -> BarcodeService:
    return BarcodeService(logger=logger)


class TestRender:
    """Pruebas para BarcodeService.render y build."""

    def test_render_valido(self, service, logger):
        assert service.render(VALID) == VALID_CODE
        assert logger.generados == [VALID_CODE]
        assert logger.rechazados == []

    def test_render_invalido_devuelve_none(self, service, logger):
        assert service.render(BarcodeBuilder()) is None
        assert len(logger.rechazados) == 1
        assert isinstance(logger.rechazados[0], NoAccountError)

    def test_build_valido(self, service, logger):
        barcode = service.build(VALID)
        assert isinstance(barcode, Barcode)
        assert logger.generados == [VALID_CODE]

    def test_build_invalido(self, service, logger):
        assert service.build(VALID.reference("12345")) is None
        assert isinstance(logger.rechazados[0], MalformedReferenceError)

    def test_errores_que_no_son_de_dominio_se_propagan(self, logger):
        """Un registro sin layouts es un bug de configuración, no un rechazo."""
        service = BarcodeService(logger=logger, layout_registry=LayoutRegistry())
        with pytest.raises(AssertionError):
            service.render(VALID)


class TestLotes:
    """Pruebas para render_many y build_many."""

    def _lote(self) -> list[BarcodeBuilder]:
        return [
            VALID,
            Barcode.builder().account_number("DE89 3704 0044 0532 0130 00"),
            VALID.sum(488315),
            VALID.cents(100),
        ]

    def test_render_many_conserva_solo_los_exitosos(self, service, logger):
        codes = service.render_many(self._lote())
        assert codes == [
            VALID_CODE,
            "5" + "7331313001000058" + "004883" + "15" + "00" + "0" * 21 + "000000",
        ]
        assert logger.lotes == [4]
        assert logger.completados == [(2, 2)]

    def test_el_lote_continua_despues_de_un_error(self, service, logger):
        service.render_many(self._lote())
        assert isinstance(logger.rechazados[0], AccountNotFinnishError)
        assert len(logger.generados) == 2

    def test_build_many(self, service):
        barcodes = service.build_many(self._lote())
        assert [b.total_cents for b in barcodes] == [0, 488315]

    def test_acepta_generadores(self, service):
        codes = service.render_many(b for b in [VALID, VALID])
        assert codes == [VALID_CODE, VALID_CODE]

    def test_lote_vacio(self, service, logger):
        assert service.render_many([]) == []
        assert logger.completados == [(0, 0)]

    def test_resumen(self, service, logger):
        service.render_many(self._lote())
        summary = logger.get_summary()
        assert summary["codigos_generados"] == 2
        assert summary["codigos_rechazados"] == 2
        assert [e["tipo"] for e in summary["errores"]] == [
            "AccountNotFinnishError",
            "InvalidCentsError",
        ]
