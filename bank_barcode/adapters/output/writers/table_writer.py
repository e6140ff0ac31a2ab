"""
Adaptador de salida: Tabla de códigos de barras.

Arma un DataFrame con una fila por código de barras, listo para que
quien llama lo muestre, lo filtre o lo combine con sus datos de
facturación. No escribe archivos.

Columnas:
    Versión | Cuenta | Importe | Referencia | Vencimiento | Código

Cuenta, Referencia y Código se guardan como texto para no perder los
ceros a la izquierda. Importe se guarda como Decimal exacto (columna de
tipo object), nunca como float.
"""

from collections.abc import Sequence

import pandas as pd

from bank_barcode.domain.models.barcode import Barcode

COLUMNS = ["Versión", "Cuenta", "Importe", "Referencia", "Vencimiento", "Código"]


class BarcodeTableWriter:
    """Convierte códigos de barras validados en un DataFrame."""

    def to_frame(self, barcodes: Sequence[Barcode]) -> pd.DataFrame:
        """Genera la tabla de códigos.

        Args:
            barcodes: Códigos de barras validados.

        Returns:
            DataFrame con las columnas de COLUMNS. Vacío (pero con las
            columnas) si no se recibió ningún código.
        """
        filas = []
        for barcode in barcodes:
            filas.append(
                {
                    "Versión": barcode.version.name,
                    "Cuenta": barcode.account_number.formatted,
                    "Importe": barcode.amount,
                    "Referencia": barcode.printed_reference,
                    "Vencimiento": _finnish_date(barcode),
                    "Código": str(barcode),
                }
            )

        return pd.DataFrame(filas, columns=COLUMNS)


def _finnish_date(barcode: Barcode) -> str:
    """Fecha como se escribe en Finlandia: '12.6.2010'. Vacío si no hay vencimiento."""
    if barcode.due_date is None:
        return ""
    return f"{barcode.due_date.day}.{barcode.due_date.month}.{barcode.due_date.year}"
