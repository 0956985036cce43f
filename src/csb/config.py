"""Builder configuration, optionally loaded from YAML."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

import yaml


@dataclass(frozen=True)
class BuilderConfig:
    # False keeps combine() output bit-exact: " " as a combinator gives three spaces.
    normalize_whitespace: bool = False
    strict_combinators: bool = False


def config_from_dict(d: Dict[str, Any] | None) -> BuilderConfig:
    if not d:
        return BuilderConfig()
    known = {f.name for f in dataclasses.fields(BuilderConfig)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    for key, value in d.items():
        if not isinstance(value, bool):
            raise ValueError(f"Config key {key!r} must be a boolean, got {value!r}")
    return BuilderConfig(**d)


def config_from_yaml(text: str) -> BuilderConfig:
    d = yaml.safe_load(text)
    if d is not None and not isinstance(d, dict):
        raise ValueError("Config document must be a mapping")
    return config_from_dict(d)


def load_config(path: str) -> BuilderConfig:
    with open(path, encoding="utf-8") as f:
        return config_from_yaml(f.read())
