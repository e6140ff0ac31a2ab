"""
Adaptador de salida: Layout del código de barras versión 4.

    "4" + cuenta(16) + euros(6) + céntimos(2) + "000" + referencia(20) + AAMMDD

La referencia nacional se alinea a la derecha y se rellena con ceros a
la izquierda hasta 20 dígitos. Los 3 ceros fijos ocupan el lugar que
en V5 usa la referencia RF más larga.

Ejemplo (cuenta FI79 4405 2020 0360 82, 4 883,15 €, ref 868516259619897,
vencimiento 12.6.2010):

    4 7944052020036082 004883 15 000 00000868516259619897 100612
"""

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.ports.barcode_layout import BarcodeLayout

_RESERVED = "000"
_REFERENCE_WIDTH = 20


class V4Layout(BarcodeLayout):
    """Layout de la versión 4 (referencia nacional)."""

    @property
    def version(self) -> BarcodeVersion:
        return BarcodeVersion.V4

    def render(self, barcode: Barcode) -> str:
        return (
            self.version.digit
            + self.account_segment(barcode)
            + self.amount_segment(barcode)
            + _RESERVED
            + barcode.reference.rjust(_REFERENCE_WIDTH, "0")
            + self.date_segment(barcode)
        )
