"""Protocol for catalog reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from variant_registry.domain.entities import CatalogBuildResult
    from variant_registry.domain.protocols import Product


class CatalogReporter(Protocol):
    """Protocol for reporting registry contents and catalog builds."""

    def report_keys(self, keys: tuple[str, ...]) -> None:
        """List the registered keys."""
        ...

    def report_product(self, key: str, product: "Product") -> None:
        """Show a single product built under key."""
        ...

    def report_catalog(self, result: "CatalogBuildResult") -> None:
        """Show every product of a catalog build, its total and any failures."""
        ...
