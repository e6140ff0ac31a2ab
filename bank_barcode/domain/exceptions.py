"""
Excepciones de dominio del proyecto bank-barcode.

Cada excepción corresponde a UNA regla de validación del código de barras
bancario. El validador se detiene en la primera regla que falla, así que
quien llama recibe siempre una sola excepción que describe el problema.

Jerarquía:
    BarcodeBaseError
    ├── NoAccountError            → No se especificó número de cuenta
    ├── InvalidAccountError       → El número de cuenta no es un IBAN válido
    ├── AccountNotFinnishError    → El IBAN no es finlandés (FI)
    ├── SumTooLargeError          → Euros fuera de rango (>= 999 999)
    ├── InvalidCentsError         → Céntimos fuera de rango (>= 100)
    ├── ReferenceTooLargeError    → Referencia con demasiados dígitos
    ├── InvalidReferenceError     → Referencia no numérica
    ├── MalformedReferenceError   → Referencia V5 sin prefijo 'RF'
    └── InvalidDateError          → Fecha de vencimiento imposible
"""


class BarcodeBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar cualquier error de construcción con un solo
    `except BarcodeBaseError`, como hace BarcodeService.
    """


class NoAccountError(BarcodeBaseError):
    """Se lanza cuando no se especificó ningún número de cuenta.

    El número de cuenta es el único campo obligatorio del builder.
    """

    def __init__(self) -> None:
        super().__init__("No se especificó número de cuenta")


class InvalidAccountError(BarcodeBaseError):
    """Se lanza cuando el texto de la cuenta no se puede parsear como IBAN.

    Esto puede pasar porque:
    - El dígito de control (mod 97) no coincide.
    - La longitud no es la registrada para el país (FI = 18 caracteres).
    - Contiene caracteres no permitidos.
    """

    def __init__(self, cuenta: str, causa: str):
        self.cuenta = cuenta
        self.causa = causa
        super().__init__(f"No se pudo parsear el número de cuenta '{cuenta}': {causa}")


class AccountNotFinnishError(BarcodeBaseError):
    """Se lanza cuando el IBAN es válido pero no es de Finlandia.

    El código de barras bancario solo se puede imprimir para cuentas FI.
    """

    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(
            f"IBAN de país '{country_code}'. El código de barras bancario "
            f"solo se puede imprimir para cuentas IBAN que empiezan con FI"
        )


class SumTooLargeError(BarcodeBaseError):
    """Se lanza cuando la parte entera del importe no cabe en 6 dígitos."""

    def __init__(self, euros: int):
        self.euros = euros
        super().__init__(f"El importe es demasiado grande (máximo 999 998,99): {euros} euros")


class InvalidCentsError(BarcodeBaseError):
    """Se lanza cuando los céntimos no están entre 0 y 99.

    Si se quiere indicar el importe total en céntimos, se debe usar
    BarcodeBuilder.sum en lugar de BarcodeBuilder.cents.
    """

    def __init__(self, cents: int):
        self.cents = cents
        super().__init__(f"Cantidad de céntimos inválida (no está entre 0 y 99): {cents}")


class ReferenceTooLargeError(BarcodeBaseError):
    """Se lanza cuando la referencia excede el límite de dígitos de la versión.

    El límite es 20 dígitos para V4 y 23 dígitos para V5 (sin contar 'RF').
    """

    def __init__(self, reference: str, limit: int):
        self.reference = reference
        self.limit = limit
        super().__init__(
            f"La referencia '{reference}' tiene {len(reference)} dígitos "
            f"(el límite es {limit})"
        )


class InvalidReferenceError(BarcodeBaseError):
    """Se lanza cuando la referencia (o su parte numérica en V5) no es un
    entero no negativo escrito solo con dígitos."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Referencia inválida: '{reference}'")


class MalformedReferenceError(BarcodeBaseError):
    """Se lanza cuando una referencia V5 no empieza con 'RF'."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(
            f"Referencia mal formada: '{reference}'. La referencia de V5 "
            f"tiene que empezar con 'RF'"
        )


class InvalidDateError(BarcodeBaseError):
    """Se lanza cuando año/mes/día no forman una fecha real.

    Ejemplos:
    - 31 de febrero.
    - Mes 13.
    - Año fuera del rango soportado por datetime.date.
    """

    def __init__(self, year: int, month: int, day: int, causa: str):
        self.year = year
        self.month = month
        self.day = day
        self.causa = causa
        super().__init__(
            f"Fecha de vencimiento inválida: año={year}, mes={month}, día={day} — {causa}"
        )
