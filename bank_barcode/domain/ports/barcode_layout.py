"""
Puerto de salida: Layout posicional del código de barras.

Cada versión del código de barras tiene su propio layout de 54 dígitos.
Todas comparten los mismos segmentos de cuenta, importe y fecha; solo
cambia la forma de escribir la referencia. Los segmentos comunes se
implementan aquí y cada layout concreto arma la cadena en su orden.

    posición  campo
    1         versión ('4' o '5')
    2-17      cuenta (IBAN sin las letras del país)
    18-23     euros (6 dígitos)
    24-25     céntimos (2 dígitos)
    26-48     referencia (23 caracteres, depende de la versión)
    49-54     vencimiento AAMMDD o "000000"
"""

from abc import ABC, abstractmethod

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.shared.calendar_date import NO_DUE_DATE, format_yymmdd

BARCODE_LENGTH = 54


class BarcodeLayout(ABC):
    """Interfaz para renderizar un Barcode validado como cadena de dígitos."""

    @property
    @abstractmethod
    def version(self) -> BarcodeVersion:
        """Versión que este layout sabe renderizar."""
        ...

    @abstractmethod
    def render(self, barcode: Barcode) -> str:
        """Devuelve la cadena de 54 dígitos del código de barras.

        Args:
            barcode: Código de barras validado de la misma versión que el layout.

        Returns:
            Cadena de exactamente BARCODE_LENGTH dígitos decimales.
        """
        ...

    # --- Segmentos comunes a todas las versiones ---

    @staticmethod
    def account_segment(barcode: Barcode) -> str:
        """IBAN compacto sin las 2 letras del país (conserva los dígitos de
        control): 'FI7331313001000058' → '7331313001000058'."""
        return barcode.account_number.electronic[2:]

    @staticmethod
    def amount_segment(barcode: Barcode) -> str:
        """Euros con 6 dígitos seguidos de céntimos con 2 dígitos."""
        return f"{barcode.euros:06d}{barcode.cents:02d}"

    @staticmethod
    def date_segment(barcode: Barcode) -> str:
        if barcode.due_date is None:
            return NO_DUE_DATE
        return format_yymmdd(barcode.due_date)
