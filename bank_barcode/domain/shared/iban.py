"""
Parseo y validación de números de cuenta IBAN (ISO 13616).

El código de barras necesita dos cosas del número de cuenta:
1. El código de país (solo se aceptan cuentas 'FI').
2. La forma compacta del IBAN, de la que el encoder quita las dos
   letras del país y conserva los dígitos de control.

Los textos de entrada suelen venir agrupados de 4 en 4 como se imprimen
en las facturas: "FI73 3131 3001 0000 58". Cualquier espacio se elimina
antes de validar.
"""

import re
from dataclasses import dataclass

# Longitud total del IBAN por país, según el registro SWIFT de IBAN
# (todos los países del registro, no solo los de la zona SEPA).
_IBAN_LENGTHS: dict[str, int] = {
    "AD": 24,
    "AE": 23,
    "AL": 28,
    "AT": 20,
    "AZ": 28,
    "BA": 20,
    "BE": 16,
    "BG": 22,
    "BH": 22,
    "BI": 27,
    "BR": 29,
    "BY": 28,
    "CH": 21,
    "CR": 22,
    "CY": 28,
    "CZ": 24,
    "DE": 22,
    "DJ": 27,
    "DK": 18,
    "DO": 28,
    "EE": 20,
    "EG": 29,
    "ES": 24,
    "FI": 18,
    "FK": 18,
    "FO": 18,
    "FR": 27,
    "GB": 22,
    "GE": 22,
    "GI": 23,
    "GL": 18,
    "GR": 27,
    "GT": 28,
    "HN": 28,
    "HR": 21,
    "HU": 28,
    "IE": 22,
    "IL": 23,
    "IQ": 23,
    "IS": 26,
    "IT": 27,
    "JO": 30,
    "KW": 30,
    "KZ": 20,
    "LB": 28,
    "LC": 32,
    "LI": 21,
    "LT": 20,
    "LU": 20,
    "LV": 21,
    "LY": 25,
    "MC": 27,
    "MD": 24,
    "ME": 22,
    "MK": 19,
    "MN": 20,
    "MR": 27,
    "MT": 31,
    "MU": 30,
    "NI": 28,
    "NL": 18,
    "NO": 15,
    "OM": 23,
    "PK": 24,
    "PL": 28,
    "PS": 29,
    "PT": 25,
    "QA": 29,
    "RO": 24,
    "RS": 22,
    "RU": 33,
    "SA": 24,
    "SC": 31,
    "SD": 18,
    "SE": 24,
    "SI": 19,
    "SK": 24,
    "SM": 27,
    "SO": 23,
    "ST": 25,
    "SV": 28,
    "TL": 23,
    "TN": 24,
    "TR": 26,
    "UA": 29,
    "VA": 22,
    "VG": 24,
    "XK": 20,
    "YE": 30,
}

# Países cuyo BBAN es exclusivamente numérico en el registro.
_NUMERIC_BBAN_COUNTRIES: frozenset[str] = frozenset(
    {"AT", "BE", "CZ", "DE", "DK", "EE", "ES", "FI", "HR", "LT", "NO", "PL", "PT", "SE", "SI", "SK"}
)

_IBAN_PATTERN = re.compile(r"^([A-Z]{2})([0-9]{2})([A-Z0-9]+)$")


@dataclass(frozen=True)
class Iban:
    """Número de cuenta IBAN validado.

    Se guarda en forma compacta (sin espacios, en mayúsculas). Crear un
    Iban con un valor inválido lanza ValueError, así que cualquier
    instancia existente es un IBAN correcto.
    """

    electronic: str
    """Forma compacta. Ejemplo: 'FI7331313001000058'."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        match = _IBAN_PATTERN.match(self.electronic)
        if not match:
            raise ValueError(
                f"Formato IBAN inválido: '{self.electronic}'. "
                f"Se esperaba: 2 letras + 2 dígitos de control + BBAN alfanumérico"
            )

        country = match.group(1)
        expected_length = _IBAN_LENGTHS.get(country)
        if expected_length is None:
            raise ValueError(f"País IBAN desconocido: '{country}'")
        if len(self.electronic) != expected_length:
            raise ValueError(
                f"Longitud inválida para IBAN {country}: {len(self.electronic)} "
                f"caracteres (se esperaban {expected_length})"
            )

        if country in _NUMERIC_BBAN_COUNTRIES and not match.group(3).isdigit():
            raise ValueError(f"El BBAN de un IBAN {country} debe ser numérico: '{match.group(3)}'")

        if _mod97(self.electronic) != 1:
            raise ValueError(f"Dígitos de control incorrectos en IBAN '{self.electronic}'")

    @property
    def country_code(self) -> str:
        """Código de país ISO 3166 (las dos primeras letras)."""
        return self.electronic[:2]

    @property
    def check_digits(self) -> str:
        return self.electronic[2:4]

    @property
    def bban(self) -> str:
        """Basic Bank Account Number: todo lo que va después de los
        dígitos de control."""
        return self.electronic[4:]

    @property
    def formatted(self) -> str:
        """Forma impresa, agrupada de 4 en 4: 'FI73 3131 3001 0000 58'."""
        return " ".join(self.electronic[i : i + 4] for i in range(0, len(self.electronic), 4))

    def __str__(self) -> str:
        return self.electronic


def parse_iban(text: str) -> Iban:
    """Convierte el texto de un número de cuenta a Iban.

    Acepta cualquier agrupación con espacios y letras en minúscula:
    "FI73 3131 3001 0000 58", "fi7331313001000058", "FI73 31313001 000058".

    Args:
        text: Número de cuenta tal como lo escribió el usuario.

    Returns:
        Iban validado.

    Raises:
        TypeError: Si text no es str.
        ValueError: Si el texto no es un IBAN válido. El mensaje explica
                    qué regla falló.

    Ejemplos:
        >>> parse_iban("FI73 3131 3001 0000 58").country_code
        'FI'
        >>> str(parse_iban("FI73 3131 3001 0000 58"))
        'FI7331313001000058'
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_iban espera str, recibió {type(text).__name__}")

    compact = re.sub(r"\s+", "", text).upper()
    if not compact:
        raise ValueError("El número de cuenta está vacío")

    return Iban(compact)


def _mod97(compact: str) -> int:
    """Calcula el resto mod 97 según ISO 7064.

    Se mueven los 4 primeros caracteres al final y cada letra se
    sustituye por su valor numérico (A=10 ... Z=35).
    """
    rearranged = compact[4:] + compact[:4]
    numeric = "".join(str(int(char, 36)) for char in rearranged)
    return int(numeric) % 97
