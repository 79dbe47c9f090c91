import json
from pathlib import Path

import pytest
import yaml
from loguru import logger


@pytest.fixture
def log_records():
    """(level, message) tuples for everything logged during the test."""
    records = []
    handler_id = logger.add(
        lambda m: records.append((m.record["level"].name, m.record["message"])),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def make_project(tmp_path: Path):
    """Lay out package.json, typedoc.json, mkdocs.yml and generated command pages."""

    def _make(nav=None, pages=("alpha.md", "beta.md"), out="docs/reference", extra_cfg=None):
        (tmp_path / "package.json").write_text(json.dumps({"name": "demo-driver"}))
        (tmp_path / "typedoc.json").write_text(json.dumps({"out": out}))
        cfg = {"site_name": "Demo"}
        cfg.update(extra_cfg or {})
        if nav is not None:
            cfg["nav"] = nav
        (tmp_path / "mkdocs.yml").write_text(yaml.safe_dump(cfg, sort_keys=False))
        commands = tmp_path / out / "commands"
        commands.mkdir(parents=True, exist_ok=True)
        for name in pages:
            (commands / name).write_text(f"# {name}\n")
        return tmp_path

    return _make


def read_nav(root: Path):
    return yaml.safe_load((root / "mkdocs.yml").read_text())["nav"]
