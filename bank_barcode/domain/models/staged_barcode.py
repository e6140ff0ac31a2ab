"""
Modelo de dominio: Configuración en construcción de un código de barras.

Guarda los valores que el usuario va indicando con el BarcodeBuilder.
Ningún campo se valida aquí: un StagedBarcode puede contener una cuenta
inválida o 150 céntimos. La validación completa ocurre una sola vez, en
validate_staged, al llamar a BarcodeBuilder.build().
"""

from dataclasses import dataclass, field

from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.models.staged_inputs import AccountInput, DueDateInput


@dataclass(frozen=True)
class StagedBarcode:
    """Valores acumulados por el builder.

    frozen=True: cada setter del builder produce un StagedBarcode nuevo
    con dataclasses.replace, así dos builders nunca comparten un estado
    que se pueda modificar.
    """

    version: BarcodeVersion = field(default_factory=BarcodeVersion.default)

    account: AccountInput | None = None
    """None si todavía no se indicó cuenta (el build fallará con NoAccountError)."""

    euros: int = 0

    cents: int = 0

    reference: str | None = None
    """None = usar la referencia por defecto de la versión."""

    due_date: DueDateInput | None = None
    """None = sin fecha de vencimiento ("000000" en el código)."""
