"""
Servicio de dominio: Validador del código de barras.

Convierte un StagedBarcode (valores sueltos, sin validar) en un Barcode
inmutable y correcto. Las reglas se revisan en este orden y la primera
que falla lanza su excepción:

1. Cuenta: falta → NoAccountError; texto no parseable → InvalidAccountError.
2. País de la cuenta distinto de 'FI' → AccountNotFinnishError.
3. Céntimos >= 100 → InvalidCentsError.
4. Euros >= 999 999 → SumTooLargeError.
5. Referencia (depende de la versión) → InvalidReferenceError,
   MalformedReferenceError o ReferenceTooLargeError.
6. Fecha de vencimiento imposible → InvalidDateError.

Nunca se devuelve un Barcode parcial: o pasan todas las reglas o se
lanza exactamente una excepción.
"""

from datetime import date

from bank_barcode.domain.exceptions import (
    AccountNotFinnishError,
    InvalidAccountError,
    InvalidCentsError,
    InvalidDateError,
    InvalidReferenceError,
    MalformedReferenceError,
    NoAccountError,
    ReferenceTooLargeError,
    SumTooLargeError,
)
from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.models.staged_barcode import StagedBarcode
from bank_barcode.domain.models.staged_inputs import (
    AccountIban,
    AccountText,
    CalendarDueDate,
    DueDateValue,
)
from bank_barcode.domain.shared.calendar_date import build_calendar_date
from bank_barcode.domain.shared.iban import Iban, parse_iban
from bank_barcode.domain.shared.money import CENTS_PER_EURO, MAX_EUROS
from bank_barcode.domain.shared.reference import RF_PREFIX, is_digit_string

FINNISH_COUNTRY_CODE = "FI"


def validate_staged(staged: StagedBarcode) -> Barcode:
    """Valida los valores del builder y construye el Barcode.

    Args:
        staged: Valores acumulados por el BarcodeBuilder.

    Returns:
        Barcode inmutable que cumple todas las invariantes.

    Raises:
        BarcodeBaseError: La subclase de la primera regla que falla.
    """
    account_number = _resolve_account(staged)

    if account_number.country_code != FINNISH_COUNTRY_CODE:
        raise AccountNotFinnishError(account_number.country_code)

    if staged.cents >= CENTS_PER_EURO:
        raise InvalidCentsError(staged.cents)

    if staged.euros >= MAX_EUROS:
        raise SumTooLargeError(staged.euros)

    reference = _resolve_reference(staged.version, staged.reference)
    due_date = _resolve_due_date(staged)

    return Barcode(
        version=staged.version,
        account_number=account_number,
        euros=staged.euros,
        cents=staged.cents,
        reference=reference,
        due_date=due_date,
    )


def _resolve_account(staged: StagedBarcode) -> Iban:
    account = staged.account

    if account is None:
        raise NoAccountError()

    if isinstance(account, AccountIban):
        return account.iban

    if isinstance(account, AccountText):
        try:
            return parse_iban(account.text)
        except ValueError as e:
            raise InvalidAccountError(account.text, str(e)) from e

    raise TypeError(f"Tipo de cuenta no soportado: {type(account).__name__}")


def _resolve_reference(version: BarcodeVersion, reference: str | None) -> str:
    """Aplica las reglas de referencia de cada versión.

    V4: la referencia se guarda tal cual (sin rellenar con ceros).
    V5: se quita el prefijo 'RF' y se guarda el resto tal cual.
    """
    if version is BarcodeVersion.V4:
        if reference is not None and not is_digit_string(reference):
            raise InvalidReferenceError(reference)
        stored = reference if reference is not None else version.default_reference
    else:
        reference_rf = reference if reference is not None else version.default_reference
        if not reference_rf.startswith(RF_PREFIX):
            raise MalformedReferenceError(reference_rf)
        stored = reference_rf[len(RF_PREFIX) :]
        if not is_digit_string(stored):
            raise InvalidReferenceError(reference_rf)

    if len(stored) > version.reference_max_length:
        raise ReferenceTooLargeError(stored, version.reference_max_length)

    return stored


def _resolve_due_date(staged: StagedBarcode) -> date | None:
    due_date = staged.due_date

    if due_date is None:
        return None

    if isinstance(due_date, DueDateValue):
        return due_date.value

    if isinstance(due_date, CalendarDueDate):
        try:
            return build_calendar_date(due_date.year, due_date.month, due_date.day)
        except ValueError as e:
            raise InvalidDateError(due_date.year, due_date.month, due_date.day, str(e)) from e

    raise TypeError(f"Tipo de fecha de vencimiento no soportado: {type(due_date).__name__}")
