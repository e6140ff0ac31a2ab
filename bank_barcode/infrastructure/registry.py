"""
Registro de layouts de código de barras disponibles.

Centraliza la relación versión → layout. Agregar una versión nueva del
código de barras requiere solo 2 pasos:
1. Crear la clase XxLayout que implemente BarcodeLayout.
2. Registrarla aquí en create_default_registry().

El encoder no sabe qué versiones existen: solo pide "dame el layout
para V5" y el registro se lo da.
"""

from bank_barcode.domain.models.barcode_version import BarcodeVersion
from bank_barcode.domain.ports.barcode_layout import BarcodeLayout


class LayoutRegistry:
    """Registro de layouts por versión."""

    def __init__(self) -> None:
        self._layouts: dict[BarcodeVersion, BarcodeLayout] = {}

    def register(self, layout: BarcodeLayout) -> None:
        """Registra un layout. La clave es layout.version.

        Raises:
            ValueError: Si ya existe un layout para esa versión.
        """
        version = layout.version
        if version in self._layouts:
            raise ValueError(
                f"Ya existe un layout registrado para {version.name}: "
                f"{type(self._layouts[version]).__name__}. "
                f"No se puede registrar {type(layout).__name__}."
            )
        self._layouts[version] = layout

    def get(self, version: BarcodeVersion) -> BarcodeLayout | None:
        """Obtiene el layout de una versión, o None si no está registrado."""
        return self._layouts.get(version)

    @property
    def available_versions(self) -> list[str]:
        """Nombres de las versiones con layout disponible."""
        return sorted(version.name for version in self._layouts)

    def __len__(self) -> int:
        return len(self._layouts)


def create_default_registry() -> LayoutRegistry:
    """Crea un registro con los layouts V4 y V5.

    Returns:
        LayoutRegistry con todos los layouts registrados.
    """
    registry = LayoutRegistry()

    from bank_barcode.adapters.output.layouts.v4_layout import V4Layout

    registry.register(V4Layout())

    from bank_barcode.adapters.output.layouts.v5_layout import V5Layout

    registry.register(V5Layout())

    return registry
