from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Optional

from playerkit.core.player import (
    DimSpec,
    InstanceConfig,
    ParamSpec,
    PatternSpec,
    PlayerContext,
    SourceDescriptor,
    describe_sources,
    matches,
    mime_type_for_extension,
    preference_key,
    render_player,
    resolve_parameters,
    resolve_sources,
)

log = logging.getLogger("playerkit.render")

_EXTENSIONS = "mp3|ogg|oga|wav|aac|flac"


@dataclass
class AudioProvider:
    """HTML5 <audio> player for uploaded files and external audio URLs."""

    name: str = "audio"
    version: str = "1.0.0"
    enabled_by_default: bool = True
    pref_namespace: str = "playerkit_audio"
    tag: str = "audio"
    glue: str = " "

    patterns = MappingProxyType({
        "filename": PatternSpec(scheme=rf"^((?!(http|https)://(www\.)?)\S+\.({_EXTENSIONS}))$", group=1),
        "url": PatternSpec(scheme=rf"^(((http|https):\/\/(www.)?)\S+\.({_EXTENSIONS}))$", group=1),
    })

    # ogg/oga/wav map to video/* types; kept as published.
    mime_types = MappingProxyType({
        "mp3": "audio/mp3",
        "ogg": "video/ogg",
        "oga": "video/ogg",
        "wav": "video/wave",
        "aac": "audio/aac",
        "flac": "audio/flac",
    })

    dims = MappingProxyType({
        "width": DimSpec(default=""),
    })

    params = MappingProxyType({
        "autoplay": ParamSpec(default="0", valid=("0", "1")),
        "controls": ParamSpec(default="0", valid=("0", "1")),
        "loop": ParamSpec(default="0", valid=("0", "1")),
        "muted": ParamSpec(default="0", valid=("0", "1")),
        "preload": ParamSpec(default="auto", valid=("none", "metadata", "auto")),
        "volume": ParamSpec(default="", valid="number"),
    })

    def mime_type(self, extension: str) -> str:
        return mime_type_for_extension(extension, self.mime_types)

    def preference_defaults(self) -> Dict[str, str]:
        out = {preference_key(self.pref_namespace, k): v.default for k, v in self.params.items()}
        out.update({preference_key(self.pref_namespace, k): v.default for k, v in self.dims.items()})
        return out

    def matches(self, play: Optional[str]) -> bool:
        return matches(play, self.patterns)

    def get_params(self, config: InstanceConfig, ctx: PlayerContext) -> List[str]:
        return resolve_parameters(config, self.params, ctx.preference_lookup, self.pref_namespace)

    def get_size(self, config: InstanceConfig, ctx: PlayerContext) -> Dict[str, str]:
        size: Dict[str, str] = {}
        for dim in self.dims:
            value = config.get(dim) or ""
            size[dim] = value if value != "" else ctx.preference_lookup(preference_key(self.pref_namespace, dim))
        return size

    def get_infos(self, config: InstanceConfig) -> List[SourceDescriptor]:
        return describe_sources(config.get("play"), self.patterns)

    def get_sources(self, config: InstanceConfig, ctx: PlayerContext) -> List[str]:
        return resolve_sources(
            self.get_infos(config),
            file_lookup=ctx.file_lookup,
            url_from_file=ctx.url_from_file,
            now=ctx.now,
        )

    def get_player(
        self,
        config: InstanceConfig,
        ctx: PlayerContext,
        wraptag: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> str:
        sources = self.get_sources(config, ctx)
        if not sources:
            log.info("render provider=%s sources=0 play=%r", self.name, config.get("play"))
            return ""

        size = self.get_size(config, ctx)
        out = render_player(
            sources,
            self.get_params(config, ctx),
            tag=self.tag,
            mime_types=self.mime_types,
            localize=ctx.localize,
            width=size.get("width"),
            wraptag=wraptag,
            class_=class_,
            glue=self.glue,
            wrapper=ctx.wrap_in_tag,
        )
        log.debug("render provider=%s sources=%s bytes=%s", self.name, len(sources), len(out))
        return out


PROVIDER = AudioProvider()
