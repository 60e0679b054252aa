from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playerkit.core.files import FileStore, utc_now
from playerkit.core.i18n import Localizer
from playerkit.core.player import PlayerContext, wrap_in_tag
from playerkit.core.preferences import PreferenceStore, load_preference_overrides
from playerkit.core.providers import ProviderRegistry, get_registry


@dataclass
class Services:
    registry: ProviderRegistry
    preferences: PreferenceStore
    files: FileStore
    localizer: Localizer

    def context(self) -> PlayerContext:
        return PlayerContext(
            preference_lookup=self.preferences.lookup,
            file_lookup=self.files.find,
            url_from_file=self.files.download_url,
            localize=self.localizer,
            wrap_in_tag=wrap_in_tag,
            now=utc_now,
        )


def build_services(registry: Optional[ProviderRegistry] = None) -> Services:
    reg = registry or get_registry()
    return Services(
        registry=reg,
        preferences=PreferenceStore(reg.preference_defaults(), load_preference_overrides()),
        files=FileStore.from_env(),
        localizer=Localizer.from_env(),
    )


_SERVICES: Optional[Services] = None


def get_services() -> Services:
    global _SERVICES
    if _SERVICES is None:
        _SERVICES = build_services()
    return _SERVICES


def reset_services() -> None:
    """Test helper: drop the cached services so env changes are picked up."""
    global _SERVICES
    _SERVICES = None
