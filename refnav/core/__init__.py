"""Core components for refnav.

Modules:
  errors: Exception hierarchy.
  logging: One-time loguru configuration.
  config_loader: Read mkdocs.yml / typedoc.json, serialize mkdocs.yml back.
  paths: Locate config files and derive docs / reference directories.
  nav_model: Typed entries of the MkDocs nav list.
  fs: Markdown listing and atomic writes.
  reconciler: Compare generated reference pages with nav and rewrite it.
"""

from .reconciler import NavOptions, update_nav  # noqa: F401
