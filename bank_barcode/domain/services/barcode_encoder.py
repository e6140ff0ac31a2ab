"""
Servicio de dominio: Encoder del código de barras.

Convierte un Barcode validado en la cadena de 54 dígitos que consumen
los sistemas de impresión de códigos de barras. La cadena debe coincidir
byte por byte, incluyendo los ceros a la izquierda.

El layout concreto (V4 o V5) se obtiene del LayoutRegistry. Con un
Barcode validado el encoder no tiene caso de error: si la cadena
resultante no tiene 54 dígitos es un bug del layout, no un error del
usuario, y se lanza AssertionError.
"""

from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.ports.barcode_layout import BARCODE_LENGTH
from bank_barcode.infrastructure.registry import LayoutRegistry, create_default_registry

_default_registry: LayoutRegistry | None = None


def encode_barcode(barcode: Barcode, registry: LayoutRegistry | None = None) -> str:
    """Renderiza el Barcode como cadena de dígitos.

    Args:
        barcode: Código de barras validado.
        registry: Registro de layouts. Si es None se usa el registro por
                  defecto (V4 y V5).

    Returns:
        Cadena de 54 dígitos decimales.

    Raises:
        AssertionError: Si no hay layout para la versión o el layout
                        produjo una cadena mal formada (bug interno).
    """
    if registry is None:
        registry = _get_default_registry()

    layout = registry.get(barcode.version)
    if layout is None:
        raise AssertionError(
            f"bug: no hay layout registrado para {barcode.version.name}. "
            f"Versiones disponibles: {registry.available_versions}"
        )

    code = layout.render(barcode)

    if len(code) != BARCODE_LENGTH or not code.isascii() or not code.isdigit():
        raise AssertionError(
            f"bug: el layout {type(layout).__name__} produjo un código mal formado "
            f"({len(code)} caracteres): '{code}'"
        )

    return code


def _get_default_registry() -> LayoutRegistry:
    # Solo lectura una vez creado.
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
