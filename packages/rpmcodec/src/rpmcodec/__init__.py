# packages/rpmcodec/src/rpmcodec/__init__.py
from __future__ import annotations

"""rpmcodec - RPM lead + header region encoder (public surface).

Write-only : produit les octets du lead et des régions header, sans parser.
"""

__version__ = "0.1.0"

from .config import LeadConfig
from .tags import HEADER_SIGNATURES, HEADER_IMMUTABLE
from .header import (
    EntryType, IndexEntry,
    int32_entry, binary_entry, string_array_entry,
    Index, lead,
)

__all__ = [
    "__version__",
    "LeadConfig",
    "HEADER_SIGNATURES", "HEADER_IMMUTABLE",
    "EntryType", "IndexEntry",
    "int32_entry", "binary_entry", "string_array_entry",
    "Index", "lead",
]
