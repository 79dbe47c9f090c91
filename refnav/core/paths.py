"""Locate mkdocs.yml / typedoc.json and derive the directories the reconciler compares."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .config_loader import TaggedValue
from .errors import ConfigError, ResolutionError

NAME_PACKAGE_JSON = "package.json"
NAME_MKDOCS_YML = "mkdocs.yml"
NAME_MKDOCS_YAML = "mkdocs.yaml"
NAME_TYPEDOC_JSON = "typedoc.json"
DEFAULT_REL_TYPEDOC_OUT_PATH = Path("docs") / "reference"
DEFAULT_DOCS_DIR = "docs"
COMMANDS_DIRNAME = "commands"


@dataclass(frozen=True)
class NavLayout:
    mkdocs_yml: Path
    typedoc_json: Path
    typedoc_out_dir: Path
    docs_dir: Path
    # typedoc_out_dir relative to docs_dir, '/'-separated
    reference_dir: str

    @property
    def commands_dir(self) -> Path:
        return self.typedoc_out_dir / COMMANDS_DIRNAME

    def relative_to_docs(self, path: Path) -> str:
        return Path(os.path.relpath(path, self.docs_dir)).as_posix()

    @property
    def reference_prefix(self) -> str:
        """Leading part of nav paths that marks an entry as a reference page.

        When TypeDoc writes straight into docs_dir, every page would match the
        out directory, so only the commands subdirectory is claimed.
        """
        if self.reference_dir == ".":
            return f"{self.relative_to_docs(self.commands_dir)}/"
        return f"{self.reference_dir}/"


def _absolute(cwd: Path, path: os.PathLike | str) -> Path:
    p = Path(path)
    return p if p.is_absolute() else (cwd / p).resolve()


def find_manifest(cwd: Path, manifest: Optional[os.PathLike | str] = None) -> Path:
    """Return the project manifest (package.json) for ``cwd``.

    An explicit ``manifest`` is only resolved against ``cwd``; otherwise the
    nearest package.json walking upwards from ``cwd`` wins.
    """
    cwd = Path(cwd).resolve()
    if manifest is not None:
        path = _absolute(cwd, manifest)
        if not path.is_file():
            raise ResolutionError(f"Manifest not found at {path}")
        return path
    for directory in (cwd, *cwd.parents):
        candidate = directory / NAME_PACKAGE_JSON
        if candidate.is_file():
            return candidate
    raise ResolutionError(f"Could not find {NAME_PACKAGE_JSON} in {cwd} or any parent directory")


def guess_mkdocs_yml_path(cwd: Path, manifest: Optional[os.PathLike | str] = None) -> Path:
    root = find_manifest(cwd, manifest).parent
    yml = root / NAME_MKDOCS_YML
    if not yml.exists() and (root / NAME_MKDOCS_YAML).exists():
        return root / NAME_MKDOCS_YAML
    return yml


def guess_typedoc_json_path(cwd: Path, manifest: Optional[os.PathLike | str] = None) -> Path:
    return find_manifest(cwd, manifest).parent / NAME_TYPEDOC_JSON


def resolve_config_paths(
    cwd: Path,
    mkdocs_yml: Optional[os.PathLike | str] = None,
    typedoc_json: Optional[os.PathLike | str] = None,
    manifest: Optional[os.PathLike | str] = None,
) -> Tuple[Path, Path]:
    """Absolute paths to mkdocs.yml and typedoc.json; explicit paths skip guessing."""
    cwd = Path(cwd).resolve()
    yml = _absolute(cwd, mkdocs_yml) if mkdocs_yml is not None else guess_mkdocs_yml_path(cwd, manifest)
    tdj = _absolute(cwd, typedoc_json) if typedoc_json is not None else guess_typedoc_json_path(cwd, manifest)
    return yml, tdj


def _resolve_env_tag(value: Any) -> Any:
    # MkDocs !ENV: a variable name, or a list of names whose last item is the default
    names = value if isinstance(value, list) else [value]
    default = names[-1] if len(names) > 1 else None
    candidates = names[:-1] if len(names) > 1 else names
    for name in candidates:
        if isinstance(name, str) and os.environ.get(name):
            return os.environ[name]
    return default


def _config_path(cfg: Dict[str, Any], key: str, source: Path) -> Optional[str]:
    value = cfg.get(key)
    if isinstance(value, TaggedValue) and value.tag == "!ENV":
        value = _resolve_env_tag(value.value)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' in {source} must be a string, got {type(value).__name__}")


def build_layout(
    mkdocs_yml: Path,
    mkdocs_cfg: Dict[str, Any],
    typedoc_json: Path,
    typedoc_cfg: Dict[str, Any],
) -> NavLayout:
    out = _config_path(typedoc_cfg, "out", typedoc_json) or DEFAULT_REL_TYPEDOC_OUT_PATH
    typedoc_out_dir = (typedoc_json.parent / out).resolve()
    docs_dir_name = _config_path(mkdocs_cfg, "docs_dir", mkdocs_yml) or DEFAULT_DOCS_DIR
    docs_dir = (mkdocs_yml.parent / docs_dir_name).resolve()
    reference_dir = Path(os.path.relpath(typedoc_out_dir, docs_dir)).as_posix()
    return NavLayout(
        mkdocs_yml=mkdocs_yml,
        typedoc_json=typedoc_json,
        typedoc_out_dir=typedoc_out_dir,
        docs_dir=docs_dir,
        reference_dir=reference_dir,
    )


__all__ = [
    "NavLayout",
    "DEFAULT_REL_TYPEDOC_OUT_PATH",
    "find_manifest",
    "guess_mkdocs_yml_path",
    "guess_typedoc_json_path",
    "resolve_config_paths",
    "build_layout",
]
