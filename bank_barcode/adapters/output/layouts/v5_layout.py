"""
Adaptador de salida: Layout del código de barras versión 5.

    "5" + cuenta(16) + euros(6) + céntimos(2) + tipo(2) + resto(21) + AAMMDD

La referencia RF se guarda sin el prefijo 'RF'. Sus 2 primeros dígitos
(los dígitos de control RF) van al campo "tipo" y el resto se rellena
con ceros a la izquierda hasta 21 dígitos. Una referencia de un solo
dígito se completa con un cero a la DERECHA: "RF5" → tipo "50".

Ejemplo (cuenta FI79 4405 2020 0360 82, 4 883,15 €,
ref RF09868516259619897, vencimiento 12.6.2010):

    5 7944052020036082 004883 15 09 000000868516259619897 100612
"""

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.ports.barcode_layout import BarcodeLayout
from bank_barcode.domain.shared.reference import split_rf_reference

_REMAINDER_WIDTH = 21


class V5Layout(BarcodeLayout):
    """Layout de la versión 5 (referencia internacional RF)."""

    @property
    def version(self) -> BarcodeVersion:
        return BarcodeVersion.V5

    def render(self, barcode: Barcode) -> str:
        tipo, resto = split_rf_reference(barcode.reference)
        return (
            self.version.digit
            + self.account_segment(barcode)
            + self.amount_segment(barcode)
            + tipo
            + resto.rjust(_REMAINDER_WIDTH, "0")
            + self.date_segment(barcode)
        )
