"""
bank-barcode: código de barras bancario finlandés (pankkiviivakoodi).

Valida cuenta, importe, referencia y vencimiento de una factura y los
convierte en la cadena de 54 dígitos que se imprime como código de barras.

Uso:
    from bank_barcode import Barcode, BarcodeVersion

    barcode = (
        Barcode.builder()
        .account_number("FI79 4405 2020 0360 82")
        .sum(488315)
        .reference("RF09868516259619897")
        .calendar_due_date(2010, 6, 12)
        .build()
    )
    str(barcode)  # '579440520200360820048831509000000868516259619897100612'
"""

from bank_barcode.domain.exceptions import (
    AccountNotFinnishError,
    BarcodeBaseError,
    InvalidAccountError,
    InvalidCentsError,
    InvalidDateError,
    InvalidReferenceError,
    MalformedReferenceError,
    NoAccountError,
    ReferenceTooLargeError,
    SumTooLargeError,
)
from bank_barcode.domain.models import Barcode, BarcodeBuilder, BarcodeVersion
from bank_barcode.domain.services.barcode_encoder import encode_barcode
from bank_barcode.domain.shared.iban import Iban, parse_iban

__all__ = [
    "AccountNotFinnishError",
    "Barcode",
    "BarcodeBaseError",
    "BarcodeBuilder",
    "BarcodeVersion",
    "Iban",
    "InvalidAccountError",
    "InvalidCentsError",
    "InvalidDateError",
    "InvalidReferenceError",
    "MalformedReferenceError",
    "NoAccountError",
    "ReferenceTooLargeError",
    "SumTooLargeError",
    "encode_barcode",
    "parse_iban",
]
