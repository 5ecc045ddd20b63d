"""
Variant Registry: shared constants
"""

from variant_registry.domain.variants import VariantKind

# ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_REGISTRY_ART: str = r"""
 _    _____    ____  _______    _   ________
| |  / /   |  / __ \/  _/   |  / | / /_  __/
| | / / /| | / /_/ // // /| | /  |/ / / /     Strategy Registry
| |/ / ___ |/ _, _// // ___ |/ /|  / / /
|___/_/  |_/_/ |_/___/_/  |_/_/ |_/ /_/
"""
REGISTRY_BANNER = _CYAN + _REGISTRY_ART + _RESET

CONFIG_SECTION: str = "variant-registry"

DEFAULT_ENABLED_KINDS: tuple[str, ...] = tuple(k.value for k in VariantKind)
DEFAULT_LOG_LEVEL: str = "INFO"
VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
