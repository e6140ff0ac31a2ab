"""
Modelo de dominio: Variantes de entrada del builder.

Dos campos del builder aceptan dos representaciones distintas:
- Cuenta: texto sin validar (AccountText) o Iban ya validado (AccountIban).
- Vencimiento: fecha resuelta (DueDateValue) o año/mes/día sin validar
  (CalendarDueDate).

Cada representación es su propia clase para que el validador distinga
el caso con isinstance, sin banderas ni tuplas anónimas.
"""

from dataclasses import dataclass
from datetime import date

from bank_barcode.domain.shared.iban import Iban


@dataclass(frozen=True)
class AccountText:
    """Número de cuenta como texto. Se parsea al validar."""

    text: str


@dataclass(frozen=True)
class AccountIban:
    """Número de cuenta ya validado."""

    iban: Iban


@dataclass(frozen=True)
class DueDateValue:
    """Fecha de vencimiento ya resuelta."""

    value: date


@dataclass(frozen=True)
class CalendarDueDate:
    """Fecha de vencimiento como componentes. Se valida al construir
    el código de barras."""

    year: int
    month: int
    day: int


AccountInput = AccountText | AccountIban
DueDateInput = DueDateValue | CalendarDueDate
