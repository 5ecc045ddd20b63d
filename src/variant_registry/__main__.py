"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from variant_registry.domain.errors import RegistryError
from variant_registry.infrastructure.di.container import VariantContainer
from variant_registry.interface.cli import CLIAppFactory, CLIDependencies
from variant_registry.interface.telemetry import ProjectTelemetry
from variant_registry.use_cases.bootstrap_registry import BootstrapRegistryUseCase


def main() -> None:
    """Entry point: wire dependencies at composition root, populate the registry, run."""
    container = VariantContainer.get_instance()
    config_loader = container.get_config_loader()
    telemetry = container.get_telemetry_port()
    ProjectTelemetry.configure_logging(config_loader.log_level)

    registry = container.get_registry()
    try:
        BootstrapRegistryUseCase(registry, config_loader, telemetry).execute()
    except RegistryError as exc:
        telemetry.error(f"Registry bootstrap failed: {exc}")
        raise SystemExit(1) from exc

    deps = CLIDependencies(
        config_loader=config_loader,
        telemetry=telemetry,
        registry=registry,
        catalog_gateway=container.get_catalog_gateway(),
        reporter=container.get_reporter(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
