"""Typed view over the MkDocs ``nav`` list.

MkDocs accepts a loose structure under ``nav``: plain page paths, single-key
mappings of a title to a page, and single-key mappings of a title to a nested
list. Entries are parsed into small dataclasses so the reconciler can branch
on the variant instead of probing raw dicts. Anything that does not fit one
of the known shapes is kept as a ``RawEntry`` and written back untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union

from .errors import NavFormatError


@dataclass(frozen=True)
class PageEntry:
    path: str


@dataclass(frozen=True)
class LinkEntry:
    title: str
    target: str


@dataclass
class SectionEntry:
    title: str
    children: List["Entry"] = field(default_factory=list)


@dataclass(frozen=True)
class RawEntry:
    value: Any


Entry = Union[PageEntry, LinkEntry, SectionEntry, RawEntry]


def parse_entry(value: Any) -> Entry:
    if isinstance(value, str):
        return PageEntry(value)
    if isinstance(value, dict) and len(value) == 1:
        (title, inner), = value.items()
        if isinstance(title, str):
            if isinstance(inner, str):
                return LinkEntry(title, inner)
            if isinstance(inner, list):
                return SectionEntry(title, [parse_entry(v) for v in inner])
    return RawEntry(value)


def parse_nav(value: Any) -> List[Entry]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise NavFormatError(f"'nav' must be a list, got {type(value).__name__}")
    return [parse_entry(v) for v in value]


def dump_entry(entry: Entry) -> Any:
    if isinstance(entry, PageEntry):
        return entry.path
    if isinstance(entry, LinkEntry):
        return {entry.title: entry.target}
    if isinstance(entry, SectionEntry):
        return {entry.title: [dump_entry(c) for c in entry.children]}
    return entry.value


def dump_nav(entries: List[Entry]) -> List[Any]:
    return [dump_entry(e) for e in entries]


def is_flat(entries: List[Entry]) -> bool:
    return all(isinstance(e, PageEntry) for e in entries)


def find_section_index(entries: List[Entry], header: str) -> int:
    for idx, entry in enumerate(entries):
        if isinstance(entry, SectionEntry) and entry.title == header:
            return idx
    return -1


def partition_reference(entries: List[Entry], prefix: str) -> Tuple[List[str], List[Entry]]:
    """Split ``entries`` into reference page paths and everything else.

    Only untitled pages whose path starts with ``prefix`` (a directory ending
    in ``/``) count as reference pages; relative order is kept on both sides.
    """
    refs: List[str] = []
    others: List[Entry] = []
    for entry in entries:
        if isinstance(entry, PageEntry) and entry.path.startswith(prefix):
            refs.append(entry.path)
        else:
            others.append(entry)
    return refs, others


__all__ = [
    "Entry",
    "PageEntry",
    "LinkEntry",
    "SectionEntry",
    "RawEntry",
    "parse_entry",
    "parse_nav",
    "dump_entry",
    "dump_nav",
    "is_flat",
    "find_section_index",
    "partition_reference",
]
