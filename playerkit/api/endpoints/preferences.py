from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from playerkit.core.services import get_services

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


class PreferenceUpdate(BaseModel):
    value: str


@router.get("")
def list_preferences():
    return {"preferences": get_services().preferences.snapshot()}


@router.put("/{key}")
def set_preference(key: str, body: PreferenceUpdate):
    prefs = get_services().preferences
    if not prefs.known(key):
        raise HTTPException(status_code=404, detail="Preference not found")
    prefs.set(key, body.value)
    return {"key": key, "value": prefs.lookup(key)}


@router.delete("/{key}")
def reset_preference(key: str):
    prefs = get_services().preferences
    if not prefs.known(key):
        raise HTTPException(status_code=404, detail="Preference not found")
    prefs.reset(key)
    return {"key": key, "value": prefs.lookup(key)}
