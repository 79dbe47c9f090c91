"""Reading and writing of the two documents the reconciler works with.

- ``mkdocs.yml``: parsed with a SafeLoader variant that tolerates the custom
  tags MkDocs configs commonly carry (``!!python/name:...``, ``!ENV``,
  ``!relative``). Such values survive a read/write cycle as ``TaggedValue``.
- ``typedoc.json``: plain JSON object; only ``out`` is consulted.

Missing files raise ResolutionError; unreadable content raises ConfigError.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError, ResolutionError


@dataclass(frozen=True)
class TaggedValue:
    tag: str
    value: Any


class NavLoader(yaml.SafeLoader):
    pass


class NavDumper(yaml.SafeDumper):
    pass


def _construct_tagged(loader: NavLoader, tag_suffix: str, node: yaml.Node) -> TaggedValue:
    if isinstance(node, yaml.ScalarNode):
        value: Any = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)
    return TaggedValue(node.tag, value)


def _represent_tagged(dumper: NavDumper, data: TaggedValue) -> yaml.Node:
    if isinstance(data.value, list):
        return dumper.represent_sequence(data.tag, data.value)
    if isinstance(data.value, dict):
        return dumper.represent_mapping(data.tag, data.value)
    return dumper.represent_scalar(data.tag, "" if data.value is None else str(data.value))


NavLoader.add_multi_constructor("!", _construct_tagged)
NavLoader.add_multi_constructor("tag:yaml.org,2002:python/", _construct_tagged)
NavDumper.add_representer(TaggedValue, _represent_tagged)


def _read_text(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ResolutionError(f"{what} not found at {path}") from e


def read_yaml(path: Path) -> Dict[str, Any]:
    text = _read_text(path, "MkDocs config")
    try:
        data = yaml.load(text, Loader=NavLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping, got {type(data).__name__}")
    return data


def stringify_yaml(data: Dict[str, Any]) -> str:
    return yaml.dump(
        data,
        Dumper=NavDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def read_typedoc_json(path: Path) -> Dict[str, Any]:
    text = _read_text(path, "TypeDoc config")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    out = data.get("out")
    if out is not None and not isinstance(out, str):
        raise ConfigError(f"'out' in {path} must be a string")
    return data


__all__ = [
    "TaggedValue",
    "NavLoader",
    "NavDumper",
    "read_yaml",
    "stringify_yaml",
    "read_typedoc_json",
]
