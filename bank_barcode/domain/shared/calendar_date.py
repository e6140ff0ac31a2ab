"""
Construcción y formato de la fecha de vencimiento.

El código de barras reserva los últimos 6 caracteres para la fecha de
vencimiento en formato AAMMDD (año de 2 dígitos). Si no hay fecha de
vencimiento, el campo se llena con "000000".
"""

from datetime import date

NO_DUE_DATE = "000000"


def build_calendar_date(year: int, month: int, day: int) -> date:
    """Construye un objeto date a partir de año, mes y día.

    Args:
        year: Año completo (ej: 2010). Debe estar entre 1 y 9999.
        month: Mes 1-12.
        day: Día 1-31, según el mes y el año.

    Returns:
        Objeto date validado.

    Raises:
        ValueError: Si la combinación no es una fecha real
                    (31 de febrero, mes 13, año 0, etc.).

    Ejemplos:
        >>> build_calendar_date(2010, 6, 12)
        datetime.date(2010, 6, 12)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Fecha inválida: año={year}, mes={month}, día={day} — {e}") from e


def format_yymmdd(value: date) -> str:
    """Formatea una fecha como AAMMDD, con los 2 últimos dígitos del año.

    No se usa strftime("%y") porque su comportamiento con años menores
    a 1000 depende de la plataforma.

    Ejemplos:
        >>> format_yymmdd(date(2010, 6, 12))
        '100612'
        >>> format_yymmdd(date(2099, 12, 24))
        '991224'
    """
    return f"{value.year % 100:02d}{value.month:02d}{value.day:02d}"
