"""
Source reference parsing and resolution.

A player's `play` attribute holds one or more comma separated references.
Each is classified as a stored-file id, a stored filename or an external
URL, then materialized into an absolute URL in the same order.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import List, Mapping, Sequence

from .models import (
    Clock,
    FileLookup,
    PatternSpec,
    SourceDescriptor,
    UrlFromFile,
)

log = logging.getLogger("playerkit.sources")


@lru_cache(maxsize=64)
def _compile(scheme: str) -> re.Pattern[str]:
    return re.compile(scheme, re.IGNORECASE)


def split_play(play: str | None) -> List[str]:
    return [p.strip() for p in (play or "").split(",") if p.strip()]


def describe_source(ref: str, patterns: Mapping[str, PatternSpec]) -> SourceDescriptor | None:
    """Classify a single reference, or None when nothing recognizes it."""
    # ASCII only: superscript and other Unicode digits pass isdigit() but int() rejects them
    if ref.isascii() and ref.isdigit():
        return SourceDescriptor(identifier=ref, kind="id")

    for kind, pattern in patterns.items():
        m = _compile(pattern.scheme).match(ref)
        if m:
            return SourceDescriptor(identifier=m.group(pattern.group), kind=kind)

    return None


def describe_sources(play: str | None, patterns: Mapping[str, PatternSpec]) -> List[SourceDescriptor]:
    out: List[SourceDescriptor] = []
    for ref in split_play(play):
        desc = describe_source(ref, patterns)
        if desc is None:
            log.warning("Unrecognized source reference %r; skipped", ref)
            continue
        out.append(desc)
    return out


def matches(play: str | None, patterns: Mapping[str, PatternSpec]) -> bool:
    refs = split_play(play)
    return bool(refs) and all(describe_source(r, patterns) is not None for r in refs)


def resolve_sources(
    descriptors: Sequence[SourceDescriptor],
    *,
    file_lookup: FileLookup,
    url_from_file: UrlFromFile,
    now: Clock,
) -> List[str]:
    """
    Absolute URLs for `descriptors`, in input order.

    Stored files must have been created at or before the resolution time.
    A lookup miss drops that entry only.
    """
    sources: List[str] = []
    cutoff = now()

    for desc in descriptors:
        identifier, kind = desc.identifier, desc.kind

        if kind == "url":
            sources.append(identifier)
            continue

        if kind == "id":
            record = file_lookup(id=int(identifier), cutoff=cutoff)
        else:
            record = file_lookup(filename=identifier, cutoff=cutoff)

        if record is None:
            log.warning("No stored file for %s=%r at %s; skipped", kind, identifier, cutoff.isoformat())
            continue

        sources.append(url_from_file(record.id, record.filename))

    return sources
