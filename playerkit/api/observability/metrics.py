from __future__ import annotations

import re
from prometheus_client import Counter, Histogram


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"

    # ints
    p = re.sub(r"/\d+", "/:id", p)
    # provider names and preference keys
    p = re.sub(r"^(/api/v1/providers)/[^/]+$", r"\1/:name", p)
    p = re.sub(r"^(/api/v1/preferences)/[^/]+$", r"\1/:key", p)

    return p


HTTP_REQUESTS_TOTAL = Counter(
    "playerkit_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "playerkit_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

PLAYER_RENDERS_TOTAL = Counter(
    "playerkit_player_renders_total",
    "Player render calls",
    ["provider", "outcome"],
)
