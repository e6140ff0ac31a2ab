"""
Utilidades para manejo de importes del código de barras.

El código de barras guarda el importe en dos campos enteros:
- euros: 6 dígitos (0 a 999 998).
- céntimos: 2 dígitos (0 a 99).

Para cálculos y presentación se usa siempre Decimal, nunca float:
float(4883.15) no es exactamente 4883.15.
"""

from decimal import Decimal

MAX_EUROS = 999999
"""Límite exclusivo para los euros: el campo tiene 6 dígitos."""

CENTS_PER_EURO = 100


def split_sum(minor_units: int) -> tuple[int, int]:
    """Divide un importe total en céntimos en (euros, céntimos).

    Ejemplos:
        >>> split_sum(488315)
        (4883, 15)
        >>> split_sum(2)
        (0, 2)
    """
    return minor_units // CENTS_PER_EURO, minor_units % CENTS_PER_EURO


def to_decimal(euros: int, cents: int) -> Decimal:
    """Convierte euros y céntimos a un Decimal exacto con 2 decimales.

    Ejemplos:
        >>> to_decimal(4883, 15)
        Decimal('4883.15')
        >>> to_decimal(0, 0)
        Decimal('0.00')
    """
    return (Decimal(euros) + Decimal(cents) / CENTS_PER_EURO).quantize(Decimal("0.01"))


def format_euros(amount: Decimal) -> str:
    """Formatea un importe al estilo finlandés: espacio como separador de
    miles, coma decimal y símbolo al final.

    Útil para la bitácora y para la columna de importes de la tabla.

    Ejemplos:
        >>> format_euros(Decimal("4883.15"))
        '4 883,15 €'
        >>> format_euros(Decimal("0"))
        '0,00 €'
    """
    amount = amount.quantize(Decimal("0.01"))
    texto = f"{abs(amount):,.2f}".replace(",", " ").replace(".", ",")
    if amount < 0:
        return f"-{texto} €"
    return f"{texto} €"
