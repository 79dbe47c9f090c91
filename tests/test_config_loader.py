import json
from pathlib import Path

import pytest
import yaml

from refnav.core.config_loader import TaggedValue, read_typedoc_json, read_yaml, stringify_yaml
from refnav.core.errors import ConfigError, ResolutionError


def test_read_yaml_keeps_custom_tags(tmp_path: Path):
    p = tmp_path / "mkdocs.yml"
    p.write_text(
        "site_name: Demo\n"
        "markdown_extensions:\n"
        "  - pymdownx.emoji:\n"
        "      emoji_index: !!python/name:material.extensions.emoji.twemoji\n"
        "site_url: !ENV [SITE_URL, 'http://localhost']\n"
    )
    data = read_yaml(p)
    emoji = data["markdown_extensions"][0]["pymdownx.emoji"]["emoji_index"]
    assert emoji == TaggedValue("tag:yaml.org,2002:python/name:material.extensions.emoji.twemoji", "")
    assert data["site_url"] == TaggedValue("!ENV", ["SITE_URL", "http://localhost"])

    text = stringify_yaml(data)
    assert "!!python/name:material.extensions.emoji.twemoji" in text
    assert "!ENV" in text
    p.write_text(text)
    assert read_yaml(p) == data


def test_stringify_preserves_key_order():
    text = stringify_yaml({"site_name": "Demo", "nav": ["index.md", {"Reference": ["ref/a.md"]}], "docs_dir": "docs"})
    assert list(yaml.safe_load(text)) == ["site_name", "nav", "docs_dir"]
    assert text.index("site_name") < text.index("nav") < text.index("docs_dir")


def test_read_yaml_empty_and_errors(tmp_path: Path):
    p = tmp_path / "mkdocs.yml"
    p.write_text("")
    assert read_yaml(p) == {}
    p.write_text("nav: [unclosed\n")
    with pytest.raises(ConfigError):
        read_yaml(p)
    p.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        read_yaml(p)
    with pytest.raises(ResolutionError):
        read_yaml(tmp_path / "missing.yml")


def test_read_typedoc_json(tmp_path: Path):
    p = tmp_path / "typedoc.json"
    p.write_text(json.dumps({"entryPoints": ["lib/index.ts"]}))
    assert "out" not in read_typedoc_json(p)
    p.write_text("{not json")
    with pytest.raises(ConfigError):
        read_typedoc_json(p)
    p.write_text(json.dumps({"out": 3}))
    with pytest.raises(ConfigError):
        read_typedoc_json(p)
    with pytest.raises(ResolutionError):
        read_typedoc_json(tmp_path / "nope.json")
