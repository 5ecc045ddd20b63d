"""Unit tests for TerminalCatalogReporter."""

import io

from rich.console import Console

from variant_registry.domain.entities import CatalogBuildResult, CatalogFailure
from variant_registry.domain.variants import Book, Movie
from variant_registry.infrastructure.reporters import TerminalCatalogReporter


def _reporter() -> tuple[TerminalCatalogReporter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return TerminalCatalogReporter(console=console), buffer


def test_report_keys_lists_every_key():
    reporter, buffer = _reporter()
    reporter.report_keys(("book", "movie"))
    output = buffer.getvalue()
    assert "book" in output
    assert "movie" in output


def test_report_product_shows_name_and_price():
    reporter, buffer = _reporter()
    reporter.report_product("book", Book(name="Dune", price=25, author="Herbert"))
    output = buffer.getvalue()
    assert "Dune" in output
    assert "25.00" in output


def test_report_catalog_includes_total_and_failures():
    reporter, buffer = _reporter()
    result = CatalogBuildResult(
        products=(
            Book(name="Dune", price=25, author="Herbert"),
            Movie(name="Arrival", price=1000.5, director="Villeneuve"),
        ),
        failures=(CatalogFailure(index=2, kind="game", message="Key 'game' is not registered."),),
    )
    reporter.report_catalog(result)
    output = buffer.getvalue()
    assert "Movie" in output
    assert "1,025.50" in output
    assert "Failures" in output
    assert "game" in output


def test_report_catalog_without_failures_has_no_failure_table():
    reporter, buffer = _reporter()
    reporter.report_catalog(CatalogBuildResult())
    assert "Failures" not in buffer.getvalue()


def test_format_price():
    assert TerminalCatalogReporter.format_price(25) == "25.00"
    assert TerminalCatalogReporter.format_price(1234.5) == "1,234.50"
