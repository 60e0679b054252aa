from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .contracts import PlayerProvider, ProviderNotFoundError

log = logging.getLogger("playerkit.providers")

DEFAULT_PROVIDERS_DIR = Path(__file__).resolve().parents[2] / "plugins" / "providers"

_REQUIRED = ("params", "patterns", "mime_types", "get_player", "matches")


@dataclass(frozen=True)
class ProviderInfo:
    name: str
    version: str
    enabled_by_default: bool
    module_path: str


class ProviderRegistry:
    """
    Discovers player providers from:
      playerkit/plugins/providers/*.py

    Each plugin module must expose:
      PROVIDER = <object with name, version, params, dims, patterns, mime_types,
                  get_player(config, ctx, wraptag, class_) and matches(play)>
    """

    def __init__(self, providers_dir: str | Path | None = None):
        self._providers_dir = Path(providers_dir) if providers_dir is not None else DEFAULT_PROVIDERS_DIR
        self._providers: Dict[str, PlayerProvider] = {}
        self._provider_files: Dict[str, Path] = {}
        self._fingerprint: Optional[str] = None

    @property
    def fingerprint(self) -> str:
        if self._fingerprint is None:
            self._fingerprint = self._compute_fingerprint()
        return self._fingerprint

    def reload(self) -> None:
        self._providers.clear()
        self._provider_files.clear()
        self._fingerprint = None
        self.load_all()

    def load_all(self) -> None:
        for py in sorted(self._providers_dir.glob("*.py")):
            if py.name.startswith("_"):
                continue
            provider = self._load_provider_from_file(py)
            if provider.name in self._providers:
                raise ValueError(f"Duplicate provider name: {provider.name} ({py})")
            self._providers[provider.name] = provider
            self._provider_files[provider.name] = py
        log.debug("providers.load count=%s dir=%s", len(self._providers), self._providers_dir)

    def names(self) -> List[str]:
        return sorted(self._providers.keys())

    def list_providers(self) -> List[ProviderInfo]:
        out: List[ProviderInfo] = []
        for name in self.names():
            p = self._providers[name]
            out.append(ProviderInfo(
                name=name,
                version=str(getattr(p, "version", None) or "0.0.0"),
                enabled_by_default=bool(getattr(p, "enabled_by_default", True)),
                module_path=str(self._provider_files[name]),
            ))
        return out

    def get(self, name: str) -> PlayerProvider:
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    def enabled(self) -> List[PlayerProvider]:
        return [
            self._providers[n] for n in self.names()
            if bool(getattr(self._providers[n], "enabled_by_default", True))
        ]

    def detect(self, play: Optional[str]) -> Optional[PlayerProvider]:
        """First enabled provider (by name) recognizing every reference in `play`."""
        for provider in self.enabled():
            if provider.matches(play):
                return provider
        return None

    def preference_defaults(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for provider in self._providers.values():
            out.update(provider.preference_defaults())
        return out

    # --- internals ---

    def _compute_fingerprint(self) -> str:
        h = hashlib.sha256()
        for name in self.names():
            py = self._provider_files[name]
            h.update(py.name.encode("utf-8"))
            h.update(b"\0")
            h.update(py.read_bytes())
            h.update(b"\0")
        return h.hexdigest()[:16]

    def _load_module(self, file_path: Path):
        # module name must be deterministic across interpreter restarts
        path_key = str(file_path.resolve()).replace("\\", "/").lower().encode("utf-8")
        module_name = f"playerkit_provider_{file_path.stem}_{hashlib.sha1(path_key).hexdigest()[:16]}"

        spec = importlib.util.spec_from_file_location(module_name, str(file_path))
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load spec for {module_name} from {file_path}")

        module = importlib.util.module_from_spec(spec)

        # register before exec_module (dataclasses looks the module up)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _load_provider_from_file(self, file_path: Path) -> PlayerProvider:
        module = self._load_module(file_path)

        provider = getattr(module, "PROVIDER", None)
        if provider is None:
            raise AttributeError(f"{file_path.name} must define PROVIDER")

        if not getattr(provider, "name", None):
            raise AttributeError(f"{file_path.name}: PROVIDER must have 'name'")

        missing = [attr for attr in _REQUIRED if not hasattr(provider, attr)]
        if missing:
            raise AttributeError(f"{file_path.name}: PROVIDER is missing {', '.join(missing)}")

        return provider


_REGISTRY: Optional[ProviderRegistry] = None


def get_registry() -> ProviderRegistry:
    global _REGISTRY
    if _REGISTRY is None:
        reg = ProviderRegistry()
        reg.load_all()
        _REGISTRY = reg
    return _REGISTRY
