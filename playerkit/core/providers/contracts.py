from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Protocol

from playerkit.core.player.models import (
    DimSpec,
    InstanceConfig,
    ParamSpec,
    PatternSpec,
    PlayerContext,
)


class ProviderNotFoundError(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown player provider: {name}")


class PlayerProvider(Protocol):
    """
    Minimal stable plugin contract for player providers.
    Plugin modules must export: PROVIDER (instance implementing this protocol)
    """
    name: str
    version: str
    enabled_by_default: bool
    pref_namespace: str

    params: Mapping[str, ParamSpec]
    dims: Mapping[str, DimSpec]
    patterns: Mapping[str, PatternSpec]
    mime_types: Mapping[str, str]

    def preference_defaults(self) -> Dict[str, str]:
        ...

    def matches(self, play: Optional[str]) -> bool:
        ...

    def get_params(self, config: InstanceConfig, ctx: PlayerContext) -> List[str]:
        ...

    def get_player(
        self,
        config: InstanceConfig,
        ctx: PlayerContext,
        wraptag: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> str:
        ...
