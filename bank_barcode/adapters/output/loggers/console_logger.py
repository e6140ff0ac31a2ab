"""
Adaptador de salida: Logger a consola.

Implementación simple de BuildLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual de lotes de facturas.
"""

from bank_barcode.domain.exceptions import BarcodeBaseError
from bank_barcode.domain.models.barcode import Barcode
from bank_barcode.domain.ports.build_logger import BuildLogger
from bank_barcode.domain.shared.money import format_euros


class ConsoleLogger(BuildLogger):
    """Logger que imprime eventos de construcción a consola."""

    def __init__(self) -> None:
        self._codigos_generados: int = 0
        self._errores: list[dict] = []

    def log_batch_start(self, num_items: int) -> None:
        print(f"\n🧾 Generando {num_items} códigos de barras...")

    def log_barcode_built(self, barcode: Barcode, code: str) -> None:
        self._codigos_generados += 1
        print(
            f"  ✅ {barcode.version.name} {barcode.account_number.formatted} — "
            f"{format_euros(barcode.amount)} — ref {barcode.printed_reference}: {code}"
        )

    def log_barcode_rejected(self, error: BarcodeBaseError) -> None:
        self._errores.append({"tipo": type(error).__name__, "detalle": str(error)})
        print(f"  ❌ Rechazado: {type(error).__name__} — {error}")

    def log_batch_complete(self, num_built: int, num_rejected: int) -> None:
        print(f"  📊 Lote terminado: {num_built} generados, {num_rejected} rechazados")

    def get_summary(self) -> dict:
        return {
            "codigos_generados": self._codigos_generados,
            "codigos_rechazados": len(self._errores),
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final."""
        print("\n" + "=" * 60)
        print("RESUMEN DE CÓDIGOS DE BARRAS")
        print("=" * 60)
        print(f"  Códigos generados:   {self._codigos_generados}")
        print(f"  Códigos rechazados:  {len(self._errores)}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['tipo']}: {err['detalle']}")

        print("=" * 60)
