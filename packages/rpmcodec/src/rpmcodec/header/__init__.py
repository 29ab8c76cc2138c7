# packages/rpmcodec/src/rpmcodec/header/__init__.py
from __future__ import annotations

# Entrées typées
from .entries import EntryType, IndexEntry, int32_entry, binary_entry, string_array_entry

# Région header (preamble + index + data blob)
from .region import pack_descriptor, region_trailer
from .index import HEADER_MAGIC, Index

# Lead 96 octets
from .lead import LEAD_MAGIC, LEAD_SIZE, lead

# I/O fichiers  # [STORE:OVERWRITE]
from .io import write_index, write_region_file

__all__ = [
    "EntryType", "IndexEntry",
    "int32_entry", "binary_entry", "string_array_entry",
    "pack_descriptor", "region_trailer",
    "HEADER_MAGIC", "Index",
    "LEAD_MAGIC", "LEAD_SIZE", "lead",
    "write_index", "write_region_file",
]
