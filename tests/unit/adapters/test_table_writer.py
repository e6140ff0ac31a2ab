"""
Tests para BarcodeTableWriter.
"""

from decimal import Decimal

from bank_barcode.adapters.output.writers.table_writer import COLUMNS, BarcodeTableWriter
from bank_barcode.domain.models import Barcode, BarcodeBuilder


def _barcodes() -> list[Barcode]:
    return [
        BarcodeBuilder.v4()
        .account_number("FI79 4405 2020 0360 82")
        .euros(4883)
        .cents(15)
        .reference("868516259619897")
        .calendar_due_date(2010, 6, 12)
        .build(),
        BarcodeBuilder.v5().account_number("FI73 3131 3001 0000 58").build(),
    ]


class TestBarcodeTableWriter:
    """Pruebas para BarcodeTableWriter.to_frame."""

    def test_columnas(self):
        df = BarcodeTableWriter().to_frame(_barcodes())
        assert list(df.columns) == COLUMNS
        assert len(df) == 2

    def test_fila_v4(self):
        fila = BarcodeTableWriter().to_frame(_barcodes()).iloc[0]
        assert fila["Versión"] == "V4"
        assert fila["Cuenta"] == "FI79 4405 2020 0360 82"
        assert fila["Importe"] == Decimal("4883.15")
        assert isinstance(fila["Importe"], Decimal)
        assert fila["Referencia"] == "868516259619897"
        assert fila["Vencimiento"] == "12.6.2010"
        assert fila["Código"] == (
            "4" + "7944052020036082" + "004883" + "15" + "000"
            + "00000868516259619897" + "100612"
        )

    def test_fila_v5_sin_vencimiento(self):
        fila = BarcodeTableWriter().to_frame(_barcodes()).iloc[1]
        assert fila["Referencia"] == "RF00"
        assert fila["Vencimiento"] == ""
        assert fila["Importe"] == Decimal("0.00")

    def test_codigo_conserva_ceros_a_la_izquierda(self):
        df = BarcodeTableWriter().to_frame(_barcodes())
        assert all(len(code) == 54 for code in df["Código"])
        assert df["Código"].iloc[1].endswith("000000")

    def test_sin_codigos(self):
        df = BarcodeTableWriter().to_frame([])
        assert list(df.columns) == COLUMNS
        assert df.empty

    def test_importe_exacto_sin_redondeo_de_float(self):
        """0,10 € + 0,20 € suma exactamente 0,30 € en la columna Importe."""
        base = BarcodeBuilder.v5().account_number("FI73 3131 3001 0000 58")
        df = BarcodeTableWriter().to_frame([base.sum(10).build(), base.sum(20).build()])
        assert sum(df["Importe"], Decimal("0")) == Decimal("0.30")
