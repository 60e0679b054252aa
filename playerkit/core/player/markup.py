from __future__ import annotations

import html
import posixpath
import re
from typing import Mapping, Optional, Sequence
from urllib.parse import unquote, urlsplit

from .models import Localize, ParamTokens, WrapInTag

NOT_SUPPORTED_KEY = "player_not_supported"

_NUMERIC = re.compile(r"^\d+(\.\d+)?$")


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def url_basename(url: str) -> str:
    path = urlsplit(url).path or url
    return unquote(posixpath.basename(path))


def url_extension(url: str) -> str:
    _, ext = posixpath.splitext(urlsplit(url).path)
    return ext[1:].lower()


def mime_type_for_extension(extension: str, mime_types: Mapping[str, str]) -> str:
    """MIME type for a file extension (any case); '' when it is unknown."""
    return mime_types.get((extension or "").lower(), "")


def mime_type_for(url: str, mime_types: Mapping[str, str]) -> str:
    return mime_type_for_extension(url_extension(url), mime_types)


def format_width(width: Optional[str]) -> str:
    """Append `px` to bare numbers; values carrying a unit are kept as-is."""
    w = (width or "").strip()
    if w and _NUMERIC.match(w):
        return w + "px"
    return w


def wrap_in_tag(content: str, tag: str, class_: Optional[str] = None) -> str:
    cls = f' class="{_attr(class_)}"' if class_ else ""
    return f"<{tag}{cls}>{content}</{tag}>"


def source_element(url: str, mime_types: Mapping[str, str]) -> str:
    mime = mime_type_for(url, mime_types)
    type_attr = f' type="{_attr(mime)}"' if mime else ""
    return f'<source src="{_attr(url)}"{type_attr}>'


def render_player(
    sources: Sequence[str],
    params: ParamTokens,
    *,
    tag: str,
    mime_types: Mapping[str, str],
    localize: Localize,
    width: Optional[str] = None,
    wraptag: Optional[str] = None,
    class_: Optional[str] = None,
    glue: str = " ",
    wrapper: WrapInTag = wrap_in_tag,
) -> str:
    """
    Build the `<audio>`/`<video>` element for already resolved sources.

    The first source becomes the element's `src`; the rest are emitted as
    `<source>` fallbacks followed by the localized "not supported" text.
    Returns '' when there is nothing to play.
    """
    if not sources:
        return ""

    src, rest = sources[0], list(sources[1:])

    w = format_width(width)
    style = f' style="width:{_attr(w)}"' if w else ""
    attrs = f" {glue.join(params)}" if params else ""

    fallback_sources = "".join("\n" + source_element(s, mime_types) for s in rest)

    not_supported = localize(
        NOT_SUPPORTED_KEY,
        {
            "{player}": f"<{tag}>",
            "{src}": src,
            "{file}": url_basename(src),
        },
    )

    player = (
        f'<{tag} src="{_attr(src)}"{style}{attrs}>'
        f"{fallback_sources}"
        f"\n{not_supported}\n"
        f"</{tag}>"
    )

    return wrapper(player, wraptag, class_) if wraptag else player
