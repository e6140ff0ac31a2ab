"""
Puerto de salida: Bitácora de construcción de códigos de barras.

Define el contrato para registrar los eventos de negocio de
BarcodeService: qué códigos se generaron y cuáles se rechazaron y por qué.

El núcleo (builder, validador, encoder) no registra nada: son funciones
puras. Solo el servicio que orquesta lotes de facturas usa este puerto.
La implementación puede imprimir a consola, acumular en memoria para
tests, o escribir a un sistema externo, sin cambiar el dominio.
"""

from abc import ABC, abstractmethod

from bank_barcode.domain.exceptions import BarcodeBaseError
from bank_barcode.domain.models.barcode import Barcode


class BuildLogger(ABC):
    """Interfaz para la bitácora de construcción."""

    @abstractmethod
    def log_batch_start(self, num_items: int) -> None:
        """Registra el inicio de un lote de códigos."""
        ...

    @abstractmethod
    def log_barcode_built(self, barcode: Barcode, code: str) -> None:
        """Registra un código generado correctamente.

        Args:
            barcode: Código de barras validado.
            code: Cadena de 54 dígitos generada.
        """
        ...

    @abstractmethod
    def log_barcode_rejected(self, error: BarcodeBaseError) -> None:
        """Registra un código rechazado por el validador."""
        ...

    @abstractmethod
    def log_batch_complete(self, num_built: int, num_rejected: int) -> None:
        """Registra el fin de un lote."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo lo registrado.

        Returns:
            Diccionario con métricas:
            {
                'codigos_generados': int,
                'codigos_rechazados': int,
                'errores': List[dict],  # [{tipo, detalle}]
            }
        """
        ...
