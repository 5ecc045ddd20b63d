"""Use Case: populate the registry with built-in variants and configured aliases."""

from variant_registry.domain.config import ConfigurationLoader
from variant_registry.domain.errors import UnknownKeyError
from variant_registry.domain.protocols import StrategyRegistryProtocol, TelemetryPort
from variant_registry.domain.variants import BUILTIN_FACTORIES


class BootstrapRegistryUseCase:
    """Register enabled built-in kinds, then aliases pointing at them."""

    def __init__(
        self,
        registry: StrategyRegistryProtocol,
        config_loader: ConfigurationLoader,
        telemetry: TelemetryPort,
    ) -> None:
        self.registry = registry
        self.config_loader = config_loader
        self.telemetry = telemetry

    def execute(self) -> tuple[str, ...]:
        """Register everything configured. Returns the registry keys afterwards."""
        overwrite = self.config_loader.allow_overwrite
        enabled = self.config_loader.enabled_kinds
        for kind in enabled:
            self.registry.register(kind, BUILTIN_FACTORIES[kind], overwrite=overwrite)
            self.telemetry.debug(f"Registered built-in kind '{kind}'")

        for alias, target in self.config_loader.aliases.items():
            if target not in enabled:
                raise UnknownKeyError(target, tuple(enabled))
            self.registry.register(alias, BUILTIN_FACTORIES[target], overwrite=overwrite)
            self.telemetry.debug(f"Registered alias '{alias}' -> '{target}'")

        keys = self.registry.keys()
        self.telemetry.step(f"Registry ready: {len(keys)} key(s)")
        return keys
