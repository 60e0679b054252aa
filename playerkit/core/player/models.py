from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict


SourceKind = Literal["url", "id", "filename"]

BOOLEAN_VALID = ("0", "1")


class ParamSpec(BaseModel):
    """One player parameter: its default and what values are valid."""

    model_config = ConfigDict(frozen=True)

    default: str = ""
    # Either a fixed set of allowed values or the "number" constraint.
    valid: Union[tuple[str, ...], Literal["number"], None] = None

    @property
    def is_boolean(self) -> bool:
        return isinstance(self.valid, tuple) and self.valid == BOOLEAN_VALID


class DimSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    default: str = ""


class PatternSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheme: str
    group: int = 1


class SourceDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    kind: SourceKind


class FileRecord(BaseModel):
    id: int
    filename: str
    created: datetime


PreferenceLookup = Callable[[str], str]
FileLookup = Callable[..., Optional[FileRecord]]
UrlFromFile = Callable[[int, str], str]
Localize = Callable[[str, Mapping[str, str]], str]
WrapInTag = Callable[[str, str, Optional[str]], str]
Clock = Callable[[], datetime]

InstanceConfig = Dict[str, str]
ParamTokens = List[str]


@dataclass
class PlayerContext:
    """Collaborators a provider calls into while rendering one player."""

    preference_lookup: PreferenceLookup
    file_lookup: FileLookup
    url_from_file: UrlFromFile
    localize: Localize
    wrap_in_tag: WrapInTag
    now: Clock
