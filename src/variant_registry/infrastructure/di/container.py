from typing import TYPE_CHECKING, Any, Optional, cast

from variant_registry.domain.config import ConfigurationLoader
from variant_registry.domain.registry import StrategyRegistry
from variant_registry.infrastructure.config_file_loader import ConfigFileLoader
from variant_registry.infrastructure.gateways.catalog_gateway import YamlCatalogGateway
from variant_registry.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from variant_registry.infrastructure.reporters import TerminalCatalogReporter
from variant_registry.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from variant_registry.domain.protocols import (
        CatalogGatewayProtocol,
        FileSystemProtocol,
        StrategyRegistryProtocol,
        TelemetryPort,
    )
    from variant_registry.interface.reporters import CatalogReporter


class VariantContainer:
    """Dependency Injection Container for the variant registry."""

    _instance: Optional["VariantContainer"] = None

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort",
            ProjectTelemetry("VARIANT-REGISTRY", "cyan", "Strategy registry online"),
        )
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("CatalogGateway", YamlCatalogGateway(filesystem))
        # One registry per process; populated by BootstrapRegistryUseCase at the composition root.
        self.register_singleton("StrategyRegistry", StrategyRegistry())
        self.register_singleton("CatalogReporter", TerminalCatalogReporter())

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_catalog_gateway(self) -> "CatalogGatewayProtocol":
        return cast("CatalogGatewayProtocol", self.get("CatalogGateway"))

    def get_registry(self) -> "StrategyRegistryProtocol":
        """Return the process-wide strategy registry."""
        return cast("StrategyRegistryProtocol", self.get("StrategyRegistry"))

    def get_reporter(self) -> "CatalogReporter":
        return cast("CatalogReporter", self.get("CatalogReporter"))

    @classmethod
    def get_instance(cls) -> "VariantContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = VariantContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
