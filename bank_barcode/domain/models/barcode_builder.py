"""
Modelo de dominio: Builder del código de barras.

Permite indicar los campos en cualquier orden con una cadena de llamadas:

    barcode = (
        BarcodeBuilder.v4()
        .account_number("FI16 8000 1400 0502 67")
        .reference(12345)
        .calendar_due_date(2025, 2, 26)
        .euros(123)
        .cents(45)
        .build()
    )

Cada setter devuelve un builder NUEVO; el original no cambia. Por eso
un builder parcial se puede reutilizar como plantilla:

    base = BarcodeBuilder().account_number("FI73 3131 3001 0000 58")
    factura_1 = base.sum(1000).build()
    factura_2 = base.sum(2500).build()

Los setters no aplican reglas de negocio (céntimos < 100, referencia con
'RF', etc.). Eso lo hace build(). Solo rechazan valores que el campo no
puede representar, como un número negativo en un campo sin signo.
"""

from dataclasses import replace
from datetime import date, datetime

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.models.staged_barcode import StagedBarcode
from bank_barcode.domain.models.staged_inputs import (
    AccountIban,
    AccountText,
    CalendarDueDate,
    DueDateValue,
)
from bank_barcode.domain.shared.iban import Iban
from bank_barcode.domain.shared.money import split_sum


class BarcodeBuilder:
    """Construye un Barcode a partir de campos opcionales.

    Valores por defecto:
    - version: BarcodeVersion.V5
    - euros, cents: 0
    - reference: "0" para V4, "RF00" para V5 (se decide en build())
    - due_date: sin fecha de vencimiento

    El número de cuenta es el único campo obligatorio.
    """

    def __init__(self, staged: StagedBarcode | None = None) -> None:
        self._staged = staged if staged is not None else StagedBarcode()

    @classmethod
    def v4(cls) -> "BarcodeBuilder":
        """Builder con BarcodeVersion.V4."""
        return cls().version(BarcodeVersion.V4)

    @classmethod
    def v5(cls) -> "BarcodeBuilder":
        """Builder con BarcodeVersion.V5 (también es el valor por defecto)."""
        return cls().version(BarcodeVersion.V5)

    @property
    def staged(self) -> StagedBarcode:
        """Valores acumulados hasta ahora, sin validar."""
        return self._staged

    def version(self, version: BarcodeVersion) -> "BarcodeBuilder":
        if not isinstance(version, BarcodeVersion):
            raise TypeError(f"version espera BarcodeVersion, recibió {type(version).__name__}")
        return self._with(version=version)

    def account_number(self, account) -> "BarcodeBuilder":
        """Número de cuenta como texto (se convierte con str()).

        Se parsea como IBAN en build().
        """
        return self._with(account=AccountText(str(account)))

    def account_number_iban(self, account: Iban) -> "BarcodeBuilder":
        """Número de cuenta como Iban ya validado."""
        if not isinstance(account, Iban):
            raise TypeError(f"account_number_iban espera Iban, recibió {type(account).__name__}")
        return self._with(account=AccountIban(account))

    def euros(self, euros: int) -> "BarcodeBuilder":
        return self._with(euros=_unsigned(euros, "euros"))

    def cents(self, cents: int) -> "BarcodeBuilder":
        """Céntimos (0-99 para que build() tenga éxito).

        Para indicar el importe total en céntimos usar sum().
        """
        return self._with(cents=_unsigned(cents, "cents"))

    def sum(self, minor_units: int) -> "BarcodeBuilder":
        """Importe total en céntimos. Sobrescribe euros y cents.

        sum(488315) equivale a euros(4883).cents(15).
        """
        euros, cents = split_sum(_unsigned(minor_units, "sum"))
        return self._with(euros=euros, cents=cents)

    def reference(self, reference) -> "BarcodeBuilder":
        """Número de referencia (se convierte con str()).

        V4: hasta 20 dígitos. V5: "RF" + hasta 23 dígitos.
        """
        return self._with(reference=str(reference))

    def due_date(self, due_date: date) -> "BarcodeBuilder":
        if not isinstance(due_date, date):
            raise TypeError(f"due_date espera date, recibió {type(due_date).__name__}")
        if isinstance(due_date, datetime):
            due_date = due_date.date()
        return self._with(due_date=DueDateValue(due_date))

    def calendar_due_date(self, year: int, month: int, day: int) -> "BarcodeBuilder":
        """Fecha de vencimiento como año, mes y día.

        Si la fecha no existe (31 de febrero), build() lanza InvalidDateError.
        """
        return self._with(
            due_date=CalendarDueDate(
                _integer(year, "year"), _integer(month, "month"), _integer(day, "day")
            )
        )

    def build(self) -> Barcode:
        """Valida los valores y devuelve el Barcode.

        Raises:
            BarcodeBaseError: La subclase que corresponde a la primera
                              validación que falla (ver domain.exceptions).
        """
        from bank_barcode.domain.services.barcode_validator import validate_staged

        return validate_staged(self._staged)

    def _with(self, **changes) -> "BarcodeBuilder":
        return BarcodeBuilder(replace(self._staged, **changes))

    def __repr__(self) -> str:
        return f"BarcodeBuilder({self._staged!r})"


def _integer(value: int, campo: str) -> int:
    # bool es subclase de int pero nunca es un valor válido aquí
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{campo} espera int, recibió {type(value).__name__}")
    return value


def _unsigned(value: int, campo: str) -> int:
    _integer(value, campo)
    if value < 0:
        raise ValueError(f"{campo} no puede ser negativo: {value}")
    return value
