"""
Servicio de dominio: Generación de códigos de barras por lotes.

Orquesta el flujo completo para una o varias facturas:
1. Recibe un BarcodeBuilder por factura.
2. Lo valida (build) y lo renderiza (encode_barcode).
3. Registra el resultado en la bitácora (BuildLogger).

Un error de validación en una factura NO detiene el lote: se registra
y se continúa con la siguiente. Los errores que no son de dominio
(bugs, AssertionError del encoder) sí se propagan.
"""

from collections.abc import Iterable

from bank_barcode.domain.exceptions import BarcodeBaseError
from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.models.barcode_builder import BarcodeBuilder
from bank_barcode.domain.ports.build_logger import BuildLogger
from bank_barcode.domain.services.barcode_encoder import encode_barcode
from bank_barcode.infrastructure.registry import LayoutRegistry


class BarcodeService:
    """Genera códigos de barras y registra cada resultado.

    Recibe sus dependencias por constructor. No sabe qué logger concreto
    se está usando, solo conoce el puerto BuildLogger.
    """

    def __init__(
        self,
        logger: BuildLogger,
        layout_registry: LayoutRegistry | None = None,
    ) -> None:
        """
        Args:
            logger: Bitácora de construcción.
            layout_registry: Registro de layouts. None = registro por defecto.
        """
        self._logger = logger
        self._registry = layout_registry

    def build(self, builder: BarcodeBuilder) -> Barcode | None:
        """Valida un builder y registra el resultado.

        Returns:
            Barcode si la validación fue exitosa.
            None si el validador lo rechazó (el error queda en la bitácora).
        """
        result = self._build_and_encode(builder)
        if result is None:
            return None
        return result[0]

    def render(self, builder: BarcodeBuilder) -> str | None:
        """Valida y renderiza un builder.

        Returns:
            Cadena de 54 dígitos, o None si el validador lo rechazó.
        """
        result = self._build_and_encode(builder)
        if result is None:
            return None
        return result[1]

    def build_many(self, builders: Iterable[BarcodeBuilder]) -> list[Barcode]:
        """Valida un lote de builders.

        Returns:
            Lista de Barcode (solo los exitosos), en el orden de entrada.
        """
        return [barcode for barcode, _ in self._process_batch(builders)]

    def render_many(self, builders: Iterable[BarcodeBuilder]) -> list[str]:
        """Valida y renderiza un lote de builders.

        Returns:
            Lista de cadenas de 54 dígitos (solo las exitosas), en el
            orden de entrada.
        """
        return [code for _, code in self._process_batch(builders)]

    def _process_batch(self, builders: Iterable[BarcodeBuilder]) -> list[tuple[Barcode, str]]:
        builders = list(builders)
        self._logger.log_batch_start(len(builders))

        resultados: list[tuple[Barcode, str]] = []
        for builder in builders:
            result = self._build_and_encode(builder)
            if result is not None:
                resultados.append(result)

        self._logger.log_batch_complete(len(resultados), len(builders) - len(resultados))
        return resultados

    def _build_and_encode(self, builder: BarcodeBuilder) -> tuple[Barcode, str] | None:
        try:
            barcode = builder.build()
        except BarcodeBaseError as e:
            self._logger.log_barcode_rejected(e)
            return None

        code = encode_barcode(barcode, self._registry)
        self._logger.log_barcode_built(barcode, code)
        return barcode, code
