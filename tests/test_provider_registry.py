import pytest

from playerkit.core.providers import ProviderNotFoundError, ProviderRegistry

PROVIDER_SRC = '''
from dataclasses import dataclass


@dataclass
class Dummy:
    name: str = "{name}"
    version: str = "0.1.0"
    enabled_by_default: bool = True
    params = {{}}
    patterns = {{}}
    mime_types = {{}}

    def preference_defaults(self):
        return {{}}

    def matches(self, play):
        return play == "{name}"

    def get_player(self, config, ctx, wraptag=None, class_=None):
        return ""


PROVIDER = Dummy()
'''


def test_default_registry_loads_audio():
    reg = ProviderRegistry()
    reg.load_all()
    assert "audio" in reg.names()
    info = reg.list_providers()[0]
    assert info.name == "audio"
    assert info.module_path.endswith("audio.py")


def test_unknown_provider_raises():
    reg = ProviderRegistry()
    reg.load_all()
    with pytest.raises(ProviderNotFoundError):
        reg.get("video")


def test_detect_picks_matching_provider():
    reg = ProviderRegistry()
    reg.load_all()
    assert reg.detect("http://x/a.mp3").name == "audio"
    assert reg.detect("http://x/a.mp4") is None


def test_duplicate_provider_names_rejected(tmp_path):
    (tmp_path / "one.py").write_text(PROVIDER_SRC.format(name="dup"), encoding="utf-8")
    (tmp_path / "two.py").write_text(PROVIDER_SRC.format(name="dup"), encoding="utf-8")
    reg = ProviderRegistry(tmp_path)
    with pytest.raises(ValueError):
        reg.load_all()


def test_module_without_provider_symbol_rejected(tmp_path):
    (tmp_path / "broken.py").write_text("X = 1\n", encoding="utf-8")
    reg = ProviderRegistry(tmp_path)
    with pytest.raises(AttributeError):
        reg.load_all()


def test_private_modules_ignored_and_fingerprint_stable(tmp_path):
    (tmp_path / "_helpers.py").write_text("raise RuntimeError('never imported')\n", encoding="utf-8")
    (tmp_path / "alpha.py").write_text(PROVIDER_SRC.format(name="alpha"), encoding="utf-8")

    reg = ProviderRegistry(tmp_path)
    reg.load_all()
    assert reg.names() == ["alpha"]

    fp = reg.fingerprint
    reg.reload()
    assert reg.fingerprint == fp
    assert len(fp) == 16
