from __future__ import annotations

import html
from typing import Mapping

from .models import InstanceConfig, ParamSpec, ParamTokens, PreferenceLookup


def preference_key(namespace: str, name: str) -> str:
    return f"{namespace}_{name}"


def _token(name: str, spec: ParamSpec, value: str) -> str:
    if spec.is_boolean:
        return name
    return f'{name}="{html.escape(value, quote=True)}"'


def resolve_parameters(
    config: InstanceConfig,
    schema: Mapping[str, ParamSpec],
    preference_lookup: PreferenceLookup,
    namespace: str,
) -> ParamTokens:
    """
    Player attribute tokens, in schema order.

    An explicit instance value always wins. Without one, the site preference
    is used only when it differs from the schema default, so untouched
    parameters add nothing to the markup.
    """
    params: ParamTokens = []

    for name, spec in schema.items():
        value = config.get(name) or ""
        pref = preference_lookup(preference_key(namespace, name))

        if value == "" and pref != spec.default:
            params.append(_token(name, spec, pref))
        elif value != "":
            params.append(_token(name, spec, value))

    return params
