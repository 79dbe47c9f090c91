"""Keep the reference section of mkdocs.yml in sync with TypeDoc output.

TypeDoc (with typedoc-plugin-appium) writes one markdown page per command
group into ``<out>/commands``. ``update_nav`` lists those pages, compares them
with the reference entries currently in ``nav`` and rewrites mkdocs.yml only
when the two sets differ.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from loguru import logger

from .config_loader import read_typedoc_json, read_yaml, stringify_yaml
from .fs import list_markdown_files, safe_write_file
from .nav_model import (
    PageEntry,
    SectionEntry,
    dump_nav,
    find_section_index,
    is_flat,
    parse_nav,
    partition_reference,
)
from .paths import NavLayout, build_layout, resolve_config_paths

DEFAULT_REFERENCE_HEADER = "Reference"


@dataclass
class NavOptions:
    cwd: Optional[Path] = None
    mkdocs_yml: Optional[Path] = None
    package_json: Optional[Path] = None
    typedoc_json: Optional[Path] = None
    reference_header: str = DEFAULT_REFERENCE_HEADER
    # never wrap reference pages in a header section
    no_reference_header: bool = False
    # wrap reference pages in a header section even when nav is a flat list
    force_reference_header: bool = False
    dry_run: bool = False


@dataclass
class NavUpdateResult:
    mkdocs_yml: Path
    changed: bool = False
    written: bool = False
    nav: List[Any] = field(default_factory=list)
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)


def discover_reference_pages(layout: NavLayout, log=logger) -> List[str]:
    """Paths (relative to docs_dir) of the generated command reference pages."""
    commands_dir = layout.commands_dir
    rel_commands_dir = layout.relative_to_docs(commands_dir)
    pages = [f"{rel_commands_dir}/{name}" for name in list_markdown_files(commands_dir)]
    if not pages:
        log.warning("No reference API docs were found in {}; skipping navigation update", commands_dir)
    return pages


def _uses_headers(options: NavOptions, entries) -> bool:
    if options.no_reference_header:
        return False
    return options.force_reference_header or not is_flat(entries)


def update_nav(options: Optional[NavOptions] = None, *, log=None) -> NavUpdateResult:
    """Rewrite the reference section of mkdocs.yml if the set of reference pages changed.

    Resolution, parse and write failures propagate as RefNavError subclasses.
    Finding no reference pages at all is not an error: a warning is logged and
    nothing is written.
    """
    options = options or NavOptions()
    log = log or logger.bind(tag="mkdocs-nav")
    cwd = Path(options.cwd or os.getcwd()).resolve()

    mkdocs_yml_path, typedoc_json_path = resolve_config_paths(
        cwd, options.mkdocs_yml, options.typedoc_json, options.package_json
    )
    rel_mkdocs_yml = os.path.relpath(mkdocs_yml_path, cwd)
    typedoc_cfg = read_typedoc_json(typedoc_json_path)
    mkdocs_cfg = read_yaml(mkdocs_yml_path)
    layout = build_layout(mkdocs_yml_path, mkdocs_cfg, typedoc_json_path, typedoc_cfg)
    log.debug("Reference directory relative to {}: {}", layout.docs_dir, layout.reference_dir)

    entries = parse_nav(mkdocs_cfg.get("nav"))
    result = NavUpdateResult(mkdocs_yml=mkdocs_yml_path, nav=dump_nav(entries))

    new_refs = discover_reference_pages(layout, log)
    if not new_refs:
        return result
    log.debug("New reference filepaths: {}", new_refs)

    header = options.reference_header
    uses_headers = _uses_headers(options, entries)
    section_idx = find_section_index(entries, header) if uses_headers else -1
    if section_idx >= 0:
        section = entries[section_idx]
        old_refs, others = partition_reference(section.children, layout.reference_prefix)
    else:
        old_refs, others = partition_reference(entries, layout.reference_prefix)

    new_set, old_set = set(new_refs), set(old_refs)
    result.added = sorted(new_set - old_set)
    result.removed = sorted(old_set - new_set)
    if not (result.added or result.removed):
        log.info("No changes to navigation for reference documents in {}", rel_mkdocs_yml)
        return result
    log.debug("Difference in old nav vs new: added={} removed={}", result.added, result.removed)

    new_pages = [PageEntry(p) for p in new_refs]
    if uses_headers:
        if section_idx >= 0:
            section.children = others + new_pages
            log.debug("Replaced {!r} section with {}", header, dump_nav(section.children))
        else:
            entries = others + [SectionEntry(header, new_pages)]
            log.debug("Added {!r} section with {}", header, new_refs)
    else:
        entries = others + new_pages
        log.debug("Replaced nav with {}", dump_nav(entries))

    result.changed = True
    result.nav = dump_nav(entries)
    mkdocs_cfg["nav"] = result.nav
    text = stringify_yaml(mkdocs_cfg)
    log.debug(text)

    if options.dry_run:
        log.info("Dry run: not writing navigation changes to {}", rel_mkdocs_yml)
        return result

    safe_write_file(mkdocs_yml_path, text)
    result.written = True
    log.success("Updated navigation for reference documents in {}", rel_mkdocs_yml)
    return result


__all__ = [
    "DEFAULT_REFERENCE_HEADER",
    "NavOptions",
    "NavUpdateResult",
    "discover_reference_pages",
    "update_nav",
]
