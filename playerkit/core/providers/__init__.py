from .contracts import PlayerProvider, ProviderNotFoundError
from .registry import ProviderInfo, ProviderRegistry, get_registry

__all__ = [
    "PlayerProvider",
    "ProviderInfo",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "get_registry",
]
