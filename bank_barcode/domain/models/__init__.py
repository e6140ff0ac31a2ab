"""
Modelos de dominio del proyecto bank-barcode.

Todos los modelos son dataclasses inmutables (frozen=True) o, en el caso
del BarcodeBuilder, objetos cuyos setters devuelven una copia nueva.

Uso:
    from bank_barcode.domain.models import Barcode, BarcodeBuilder, BarcodeVersion
"""

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_builder import BarcodeBuilder
from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.models.staged_barcode import StagedBarcode
from bank_barcode.domain.models.staged_inputs import (
    AccountIban,
    AccountText,
    CalendarDueDate,
    DueDateValue,
)

__all__ = [
    "AccountIban",
    "AccountText",
    "Barcode",
    "BarcodeBuilder",
    "BarcodeVersion",
    "CalendarDueDate",
    "DueDateValue",
    "StagedBarcode",
]
