"""Results of catalog builds. Pure data, no I/O."""

from dataclasses import dataclass

from variant_registry.domain.protocols import Product


@dataclass(frozen=True)
class CatalogFailure:
    """A catalog entry that could not be built."""
    index: int
    kind: str
    message: str


@dataclass(frozen=True)
class CatalogBuildResult:
    """Products built from a catalog, plus the entries that failed in lenient mode."""
    products: tuple[Product, ...] = ()
    failures: tuple[CatalogFailure, ...] = ()

    @property
    def total_price(self) -> float:
        return sum(p.get_price() for p in self.products)

    @property
    def ok(self) -> bool:
        return not self.failures
