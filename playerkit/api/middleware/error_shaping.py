from __future__ import annotations

import logging
import traceback
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from playerkit.core.observability.metrics import inc_named
from playerkit.core.providers import ProviderNotFoundError

log = logging.getLogger("playerkit.errors")


def _error_payload(detail: str, rid: Optional[str]) -> dict:
    payload = {"detail": detail}
    if rid:
        payload["request_id"] = rid
    return payload


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns errors raised while rendering players into JSON responses.

    ProviderNotFoundError -> 404 with the provider name in `detail`.
    Anything else         -> 500, traceback logged with the provider being
                             rendered (request.state.player_provider) but
                             never returned to the client.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except ProviderNotFoundError as e:
            rid = self._request_id(request)
            inc_named("provider_not_found")
            log.info("Unknown provider %r rid=%s path=%s", e.name, rid, request.url.path)
            return JSONResponse(status_code=404, content=_error_payload(str(e), rid))
        except Exception as e:
            rid = self._request_id(request)
            provider = getattr(request.state, "player_provider", None)
            inc_named("unhandled_errors")
            log.error(
                "Unhandled error: %s rid=%s path=%s provider=%s\n%s",
                str(e),
                rid,
                request.url.path,
                provider,
                traceback.format_exc(),
            )
            return JSONResponse(status_code=500, content=_error_payload("Internal Server Error", rid))

    @staticmethod
    def _request_id(request: Request) -> Optional[str]:
        return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
