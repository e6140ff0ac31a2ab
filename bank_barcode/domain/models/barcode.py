"""
Modelo de dominio: Código de barras bancario (pankkiviivakoodi) validado.

Un Barcode solo se obtiene con BarcodeBuilder.build(), que aplica todas
las validaciones. Una vez creado es inmutable y su representación como
texto (str(barcode)) es la cadena de 54 dígitos que se imprime como
código de barras en la factura.

Uso:
    barcode = Barcode.builder().account_number("FI73 3131 3001 0000 58").build()
    str(barcode)  # '573313130010000580000000000000000000000000000000000000'
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.shared.iban import Iban
from bank_barcode.domain.shared.money import CENTS_PER_EURO, MAX_EUROS, to_decimal
from bank_barcode.domain.shared.reference import is_digit_string


@dataclass(frozen=True)
class Barcode:
    """Código de barras bancario finlandés validado.

    Invariantes (verificadas en __post_init__; el validador las revisa
    antes con excepciones de dominio):
    - account_number es un IBAN 'FI'.
    - 0 <= euros < 999 999 y 0 <= cents <= 99.
    - reference son solo dígitos: máx. 20 en V4, máx. 23 en V5 (sin 'RF').
    - due_date, si existe, es una fecha real.
    """

    version: BarcodeVersion

    account_number: Iban

    euros: int

    cents: int

    reference: str
    """Referencia normalizada. En V5 se guarda SIN el prefijo 'RF':
    "RF09868516259619897" → "09868516259619897"."""

    due_date: date | None = None

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia.

        BarcodeBuilder.build() nunca llega aquí con valores inválidos. Estas
        revisiones cubren los Barcode creados directamente, para que
        str(barcode) siempre produzca un código de 54 dígitos.
        """
        if not isinstance(self.account_number, Iban):
            raise TypeError(
                f"account_number espera Iban, recibió {type(self.account_number).__name__}"
            )
        if self.account_number.country_code != "FI":
            raise ValueError(
                f"La cuenta debe ser finlandesa (FI): {self.account_number.formatted}"
            )
        if not 0 <= self.euros < MAX_EUROS:
            raise ValueError(f"euros fuera de rango (0-{MAX_EUROS - 1}): {self.euros}")
        if not 0 <= self.cents < CENTS_PER_EURO:
            raise ValueError(f"cents fuera de rango (0-{CENTS_PER_EURO - 1}): {self.cents}")
        if not is_digit_string(self.reference):
            raise ValueError(f"La referencia debe tener solo dígitos: '{self.reference}'")
        if len(self.reference) > self.version.reference_max_length:
            raise ValueError(
                f"La referencia '{self.reference}' excede el límite de "
                f"{self.version.reference_max_length} dígitos de {self.version.name}"
            )

    @property
    def amount(self) -> Decimal:
        """Importe total como Decimal exacto. Ejemplo: Decimal('4883.15')."""
        return to_decimal(self.euros, self.cents)

    @property
    def total_cents(self) -> int:
        """Importe total en céntimos. Es el valor que acepta BarcodeBuilder.sum."""
        return self.euros * CENTS_PER_EURO + self.cents

    @property
    def printed_reference(self) -> str:
        """Referencia tal como se imprime en la factura (con 'RF' en V5)."""
        if self.version is BarcodeVersion.V5:
            return "RF" + self.reference
        return self.reference

    @staticmethod
    def builder():
        """Crea un BarcodeBuilder vacío (versión V5, sin cuenta)."""
        from bank_barcode.domain.models.barcode_builder import BarcodeBuilder

        return BarcodeBuilder()

    def __str__(self) -> str:
        from bank_barcode.domain.services.barcode_encoder import encode_barcode

        return encode_barcode(self)
