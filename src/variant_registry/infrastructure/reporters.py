"""Terminal reporter using rich tables for registry keys and built products."""

from rich.console import Console
from rich.table import Table

from variant_registry.domain.entities import CatalogBuildResult
from variant_registry.domain.protocols import Product
from variant_registry.interface.reporters import CatalogReporter


class TerminalCatalogReporter(CatalogReporter):
    """Renders rich tables on stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report_keys(self, keys: tuple[str, ...]) -> None:
        table = Table(title="Registered kinds")
        table.add_column("Key", style="cyan")
        for key in keys:
            table.add_row(key)
        self.console.print(table)

    def report_product(self, key: str, product: Product) -> None:
        table = Table(title=f"Created '{key}'")
        table.add_column("Name")
        table.add_column("Price", justify="right")
        table.add_row(product.get_name(), TerminalCatalogReporter.format_price(product.get_price()))
        self.console.print(table)

    def report_catalog(self, result: CatalogBuildResult) -> None:
        table = Table(title="Catalog")
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Type", style="cyan")
        table.add_column("Price", justify="right")
        for index, product in enumerate(result.products, start=1):
            table.add_row(
                str(index),
                product.get_name(),
                type(product).__name__,
                TerminalCatalogReporter.format_price(product.get_price()),
            )
        table.add_section()
        table.add_row("", "Total", "", TerminalCatalogReporter.format_price(result.total_price))
        self.console.print(table)

        if result.failures:
            failures = Table(title="Failures", style="red")
            failures.add_column("#", justify="right")
            failures.add_column("Kind")
            failures.add_column("Error")
            for failure in result.failures:
                failures.add_row(str(failure.index), failure.kind, failure.message)
            self.console.print(failures)

    @staticmethod
    def format_price(price: float) -> str:
        return f"{price:,.2f}"
