from playerkit.core.player import ParamSpec, resolve_parameters


NS = "playerkit_audio"


def _prefs(values=None, schema=None):
    """Preference lookup returning schema defaults unless overridden."""
    values = values or {}
    defaults = {f"{NS}_{k}": v.default for k, v in (schema or {}).items()}

    def lookup(key):
        return values.get(key, defaults.get(key, ""))

    return lookup


def test_empty_config_with_default_prefs_emits_nothing(audio):
    assert resolve_parameters({}, audio.params, _prefs(schema=audio.params), NS) == []


def test_output_follows_schema_order(audio):
    config = {"volume": "0.2", "preload": "none", "muted": "1", "autoplay": "1"}
    out = resolve_parameters(config, audio.params, _prefs(schema=audio.params), NS)
    assert out == ["autoplay", "muted", 'preload="none"', 'volume="0.2"']


def test_volume_rendered_as_valued_attribute_once(audio):
    out = resolve_parameters({"volume": "0.5"}, audio.params, _prefs(schema=audio.params), NS)
    assert out.count('volume="0.5"') == 1
    assert out == ['volume="0.5"']


def test_boolean_params_are_bare_flags(audio):
    config = {"autoplay": "1", "controls": "1", "loop": "1", "muted": "1"}
    out = resolve_parameters(config, audio.params, _prefs(schema=audio.params), NS)
    assert out == ["autoplay", "controls", "loop", "muted"]
    assert not any("=" in token for token in out)


def test_changed_preference_used_when_value_missing(audio):
    prefs = _prefs({f"{NS}_controls": "1", f"{NS}_preload": "metadata"}, schema=audio.params)
    out = resolve_parameters({}, audio.params, prefs, NS)
    assert out == ["controls", 'preload="metadata"']


def test_explicit_value_beats_preference(audio):
    prefs = _prefs({f"{NS}_preload": "metadata"}, schema=audio.params)
    out = resolve_parameters({"preload": "none"}, audio.params, prefs, NS)
    assert out == ['preload="none"']


def test_number_constraint_is_never_boolean():
    schema = {"volume": ParamSpec(default="", valid="number")}
    out = resolve_parameters({"volume": "1"}, schema, lambda key: "", NS)
    assert out == ['volume="1"']
    assert not schema["volume"].is_boolean


def test_preference_key_uses_namespace():
    seen = []

    def lookup(key):
        seen.append(key)
        return ""

    schema = {"loop": ParamSpec(default="0", valid=("0", "1"))}
    resolve_parameters({}, schema, lookup, "site_player")
    assert seen == ["site_player_loop"]


def test_values_are_attribute_escaped():
    schema = {"preload": ParamSpec(default="auto", valid=("none", "metadata", "auto"))}
    out = resolve_parameters({"preload": 'x" onload="y'}, schema, lambda key: "auto", NS)
    assert out == ['preload="x&quot; onload=&quot;y"']


def test_malformed_values_pass_through(audio):
    out = resolve_parameters({"volume": "loud"}, audio.params, _prefs(schema=audio.params), NS)
    assert out == ['volume="loud"']
