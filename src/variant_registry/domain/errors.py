"""Registry error hierarchy. Every error names the key it concerns."""


class RegistryError(Exception):
    """Base class for strategy registry failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class DuplicateKeyError(RegistryError):
    """Raised when a key is registered twice without overwrite."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Key '{key}' is already registered.")


class UnknownKeyError(RegistryError):
    """Raised when a lookup names a key with no registered factory."""

    def __init__(self, key: str, known: tuple[str, ...] = ()) -> None:
        message = f"Key '{key}' is not registered."
        if known:
            message += f" Registered keys: {', '.join(known)}."
        super().__init__(key, message)
        self.known = known


class CapabilityViolationError(TypeError):
    """Raised when a factory returns an object that does not implement Product."""

    def __init__(self, obj: object, missing: tuple[str, ...]) -> None:
        super().__init__(
            f"{type(obj).__name__} does not implement Product "
            f"(missing: {', '.join(missing)})."
        )
        self.missing = missing


class FactoryConstructionError(RegistryError):
    """Wraps any failure raised while a factory builds a variant."""

    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(
            key, f"Factory for '{key}' failed: {type(cause).__name__}: {cause}")
        self.cause = cause
