"""
Utilidades para números de referencia.

Hay dos formatos según la versión del código de barras:
- V4: referencia nacional finlandesa, solo dígitos (máx. 20).
- V5: referencia internacional RF (ISO 11649): "RF" + dígitos (máx. 23
  dígitos después del prefijo). Los 2 primeros dígitos son los dígitos
  de control de la referencia RF.
"""

import re

RF_PREFIX = "RF"

_DIGITS_PATTERN = re.compile(r"[0-9]+")


def is_digit_string(text: str) -> bool:
    """Indica si el texto es un entero no negativo escrito solo con
    dígitos ASCII.

    No acepta signo, espacios, un salto de línea final ni dígitos
    Unicode ('٣'), porque todo lo que pasa esta validación se copia tal
    cual al código de barras.

    Ejemplos:
        >>> is_digit_string("868516259619897")
        True
        >>> is_digit_string("+12")
        False
        >>> is_digit_string("")
        False
    """
    return _DIGITS_PATTERN.fullmatch(text) is not None


def split_rf_reference(stored: str) -> tuple[str, str]:
    """Divide la referencia V5 (ya sin 'RF') en (tipo, resto).

    - Si tiene menos de 2 caracteres, se rellena con ceros a la DERECHA
      hasta 2 y el resto queda vacío: "5" → ("50", "").
    - Si no, los 2 primeros caracteres son el tipo y el resto es lo demás:
      "09868516259619897" → ("09", "868516259619897").

    Ejemplos:
        >>> split_rf_reference("00")
        ('00', '')
        >>> split_rf_reference("7")
        ('70', '')
    """
    if len(stored) < 2:
        return stored.ljust(2, "0"), ""
    return stored[:2], stored[2:]
