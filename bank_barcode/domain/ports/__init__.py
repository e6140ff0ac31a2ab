"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from bank_barcode.domain.ports import BarcodeLayout, BuildLogger
"""

from bank_barcode.domain.ports.barcode_layout import BarcodeLayout
from bank_barcode.domain.ports.build_logger import BuildLogger

__all__ = [
    "BarcodeLayout",
    "BuildLogger",
]
