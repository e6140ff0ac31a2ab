"""
Modelo de dominio: Versión del código de barras bancario.

Las dos versiones comparten el mismo layout de 54 dígitos excepto el
campo de referencia:
- V4: referencia nacional de hasta 20 dígitos.
- V5: referencia RF de hasta 23 dígitos (sin contar el prefijo 'RF').
"""

from enum import Enum


class BarcodeVersion(Enum):
    """Versión del código de barras. V5 es la versión por defecto."""

    V4 = 4
    V5 = 5

    @property
    def digit(self) -> str:
        """Primer carácter del código de barras: '4' o '5'."""
        return str(self.value)

    @property
    def reference_max_length(self) -> int:
        """Cantidad máxima de dígitos de la referencia guardada.

        Para V5 se cuenta después de quitar el prefijo 'RF'.
        """
        if self is BarcodeVersion.V4:
            return 20
        return 23

    @property
    def default_reference(self) -> str:
        """Referencia que se usa cuando no se especificó ninguna.

        Se resuelve al validar (no al crear el builder) porque depende
        de la versión, que se puede cambiar en cualquier punto de la cadena.
        """
        if self is BarcodeVersion.V4:
            return "0"
        return "RF00"

    @classmethod
    def default(cls) -> "BarcodeVersion":
        return cls.V5
