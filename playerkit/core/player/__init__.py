from .markup import (
    format_width,
    mime_type_for,
    mime_type_for_extension,
    render_player,
    wrap_in_tag,
)
from .models import (
    DimSpec,
    FileRecord,
    InstanceConfig,
    ParamSpec,
    PatternSpec,
    PlayerContext,
    SourceDescriptor,
)
from .params import preference_key, resolve_parameters
from .sources import describe_sources, matches, resolve_sources

__all__ = [
    "DimSpec",
    "FileRecord",
    "InstanceConfig",
    "ParamSpec",
    "PatternSpec",
    "PlayerContext",
    "SourceDescriptor",
    "describe_sources",
    "format_width",
    "matches",
    "mime_type_for",
    "mime_type_for_extension",
    "preference_key",
    "render_player",
    "resolve_parameters",
    "resolve_sources",
    "wrap_in_tag",
]
