"""
Site-wide player preferences.

Every provider parameter has a preference named `<namespace>_<param>`
whose default is the parameter's schema default. Sites change them through
an override file:

    PLAYERKIT_PREFS_FILE (YAML or JSON, flat mapping)
    Default search path: <project_root>/player_prefs.yaml

    playerkit_audio_controls: "1"
    playerkit_audio_preload: metadata
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional

from playerkit.core.overrides import load_mapping
from playerkit.core.settings import env_path

_log = logging.getLogger("playerkit.prefs")


def load_preference_overrides(path: Optional[Path] = None) -> Dict[str, str]:
    resolved = path if path is not None else env_path("PLAYERKIT_PREFS_FILE", "player_prefs.yaml")
    return load_mapping(resolved, label="preferences")


class PreferenceStore:
    def __init__(
        self,
        defaults: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ):
        self._defaults: Dict[str, str] = dict(defaults or {})
        self._values: Dict[str, str] = {}
        self._lock = threading.Lock()

        for key, value in (overrides or {}).items():
            if key not in self._defaults:
                _log.warning("Ignoring unknown preference %r", key)
                continue
            self._values[key] = str(value)

    def lookup(self, key: str) -> str:
        """Stored value, else the default, else ''."""
        if key in self._values:
            return self._values[key]
        return self._defaults.get(key, "")

    __call__ = lookup

    def known(self, key: str) -> bool:
        return key in self._defaults

    def set(self, key: str, value: str) -> None:
        if key not in self._defaults:
            raise KeyError(key)
        with self._lock:
            self._values[key] = str(value)
        _log.info("Preference %s set to %r", key, value)

    def reset(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def snapshot(self) -> Dict[str, Dict[str, str]]:
        return {
            key: {"value": self.lookup(key), "default": default}
            for key, default in sorted(self._defaults.items())
        }
