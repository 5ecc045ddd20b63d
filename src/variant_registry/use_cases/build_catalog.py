"""Use Case: build every product in a catalog through the registry."""

from variant_registry.domain.entities import CatalogBuildResult, CatalogFailure
from variant_registry.domain.errors import RegistryError
from variant_registry.domain.protocols import Product, StrategyRegistryProtocol, TelemetryPort
from variant_registry.domain.registry_types import CatalogEntry


class BuildCatalogUseCase:
    """
    Turn catalog entries into products.

    Strict mode lets the first RegistryError propagate. Lenient mode records
    the failure, reports it through telemetry and carries on.
    """

    def __init__(self, registry: StrategyRegistryProtocol, telemetry: TelemetryPort) -> None:
        self.registry = registry
        self.telemetry = telemetry

    def execute(self, entries: list[CatalogEntry], strict: bool = True) -> CatalogBuildResult:
        products: list[Product] = []
        failures: list[CatalogFailure] = []
        for index, entry in enumerate(entries):
            kind = entry["kind"]
            try:
                products.append(self.registry.create(kind, entry["args"]))
            except RegistryError as exc:
                if strict:
                    raise
                failures.append(CatalogFailure(index=index, kind=kind, message=str(exc)))
                self.telemetry.warning(f"Skipped entry #{index} ({kind}): {exc}")

        self.telemetry.step(
            f"Built {len(products)} product(s), {len(failures)} failure(s)")
        return CatalogBuildResult(products=tuple(products), failures=tuple(failures))
