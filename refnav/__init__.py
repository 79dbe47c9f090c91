"""
refnav

Keeps the reference section of an MkDocs ``nav`` in sync with the markdown
pages TypeDoc generates for a package's commands.
"""

from .core.reconciler import (
    DEFAULT_REFERENCE_HEADER,
    NavOptions,
    NavUpdateResult,
    update_nav,
)
from .core.errors import (
    RefNavError,
    ResolutionError,
    ConfigError,
    NavFormatError,
    WriteError,
)

__all__ = [
    "DEFAULT_REFERENCE_HEADER",
    "NavOptions",
    "NavUpdateResult",
    "update_nav",
    "RefNavError",
    "ResolutionError",
    "ConfigError",
    "NavFormatError",
    "WriteError",
]
