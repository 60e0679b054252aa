from __future__ import annotations

from fastapi import APIRouter

from playerkit.core.services import get_services

router = APIRouter(prefix="/api/v1/providers", tags=["providers"])


@router.get("")
def list_providers():
    reg = get_services().registry
    providers = reg.list_providers()
    return {
        "count": len(providers),
        "fingerprint": reg.fingerprint,
        "providers": [
            {"name": p.name, "version": p.version, "enabled_by_default": p.enabled_by_default}
            for p in providers
        ],
    }


@router.get("/{name}")
def get_provider(name: str):
    p = get_services().registry.get(name)

    return {
        "name": p.name,
        "version": p.version,
        "pref_namespace": p.pref_namespace,
        "params": {k: v.model_dump() for k, v in p.params.items()},
        "dims": {k: v.model_dump() for k, v in p.dims.items()},
        "patterns": {k: v.model_dump() for k, v in p.patterns.items()},
        "mime_types": dict(p.mime_types),
    }
