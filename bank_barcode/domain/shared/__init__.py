"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el validador, el encoder y los adaptadores,
y no dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from bank_barcode.domain.shared.iban import Iban, parse_iban
    from bank_barcode.domain.shared.calendar_date import build_calendar_date, format_yymmdd
    from bank_barcode.domain.shared.money import split_sum, to_decimal, format_euros
    from bank_barcode.domain.shared.reference import is_digit_string, split_rf_reference
"""
