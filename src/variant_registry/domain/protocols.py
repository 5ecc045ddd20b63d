from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from variant_registry.domain.registry_types import CatalogEntry


@runtime_checkable
class Product(Protocol):
    """Capability interface every registered variant satisfies. Nothing more, nothing optional."""

    def get_name(self) -> str:
        ...

    def get_price(self) -> float:
        ...


VariantFactory = Callable[[Mapping[str, object]], Product]


class StrategyRegistryProtocol(Protocol):
    """Protocol for the key -> factory registry consumed by use cases and the CLI."""

    def register(self, key: str, factory: VariantFactory, overwrite: bool = False) -> None:
        ...

    def create(self, key: str, construction_args: Mapping[str, object] | None = None) -> Product:
        ...

    def has(self, key: str) -> bool:
        ...

    def keys(self) -> tuple[str, ...]:
        ...


class TelemetryPort(Protocol):
    """Port for user-facing status messages. Implemented by ProjectTelemetry in interface."""

    def handshake(self) -> None: ...
    def step(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...


class FileSystemProtocol(Protocol):
    def resolve_path(self, path: str) -> str:
        ...

    def exists(self, path: str) -> bool:
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read a text file. Raises OSError when the file cannot be read."""
        ...


class CatalogGatewayProtocol(Protocol):
    """Protocol for loading catalog entries from storage."""

    def load(self, path: str) -> list["CatalogEntry"]:
        ...
