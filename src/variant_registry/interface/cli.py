"""CLI entry points for the variant registry - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer
import yaml

from variant_registry.domain.config import ConfigurationLoader
from variant_registry.domain.errors import RegistryError
from variant_registry.domain.protocols import (
    CatalogGatewayProtocol,
    StrategyRegistryProtocol,
    TelemetryPort,
)
from variant_registry.interface.reporters import CatalogReporter
from variant_registry.use_cases.build_catalog import BuildCatalogUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    registry: StrategyRegistryProtocol
    catalog_gateway: CatalogGatewayProtocol
    reporter: CatalogReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def parse_construction_args(pairs: list[str]) -> dict[str, object]:
        """Turn ['name=Dune', 'price=25'] into {'name': 'Dune', 'price': 25}. Values are read as YAML scalars."""
        args: dict[str, object] = {}
        for pair in pairs:
            key, sep, raw = pair.partition("=")
            key = key.strip()
            if not sep or not key:
                raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--arg")
            args[key] = CLIAppFactory.coerce_value(raw)
        return args

    @staticmethod
    def coerce_value(raw: str) -> object:
        """Read one value as a YAML scalar: price=25 -> 25, name='1984' -> '1984'."""
        try:
            value = yaml.safe_load(raw)
        except yaml.YAMLError:
            return raw
        # Only numbers and strings are taken; yes/no, null, dates and collections stay text.
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return raw
        return value

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="variant-registry",
            help="Strategy registry: build product variants by key. Run 'variant-registry kinds' to list keys.",
            add_completion=False,
        )

        def _fail(message: str) -> typer.Exit:
            deps.telemetry.error(message)
            return typer.Exit(code=1)

        @app.callback()
        def _session_start() -> None:
            """Strategy registry: build product variants by key."""
            deps.telemetry.handshake()

        @app.command()
        def kinds() -> None:
            """List registered keys."""
            deps.reporter.report_keys(deps.registry.keys())

        @app.command()
        def create(
            kind: str = typer.Argument(..., help="Registered key, e.g. book"),
            arg: list[str] = typer.Option(  # noqa: B008
                [], "--arg", "-a", help="Construction argument as key=value (repeatable)"),
        ) -> None:
            """Build one product through the registry."""
            construction_args = CLIAppFactory.parse_construction_args(arg)
            try:
                product = deps.registry.create(kind, construction_args)
            except RegistryError as exc:
                raise _fail(str(exc)) from exc
            deps.reporter.report_product(kind, product)

        @app.command()
        def catalog(
            path: Path | None = typer.Argument(None, help="YAML catalog (default: default_catalog from config)"),  # noqa: B008
            lenient: bool = typer.Option(
                False, "--lenient", help="Collect failing entries instead of stopping at the first"),
        ) -> None:
            """Build every product listed in a YAML catalog."""
            target = str(path) if path else deps.config_loader.default_catalog
            if not target:
                raise _fail("No catalog given and no default_catalog configured.")
            try:
                entries = deps.catalog_gateway.load(target)
            except (OSError, ValueError) as exc:
                raise _fail(f"Cannot load catalog {target}: {exc}") from exc

            deps.telemetry.step(f"Loaded {len(entries)} catalog entries from {target}")
            use_case = BuildCatalogUseCase(deps.registry, deps.telemetry)
            try:
                result = use_case.execute(entries, strict=not lenient)
            except RegistryError as exc:
                raise _fail(str(exc)) from exc
            deps.reporter.report_catalog(result)
            if not result.ok:
                raise typer.Exit(code=1)

        return app
