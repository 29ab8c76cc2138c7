# packages/rpmwf/src/rpmwf/__init__.py
from __future__ import annotations

from .api import region_name, load_manifest, build_index
from .paths import PathsConfig

__all__ = [
    "region_name",
    "load_manifest",
    "build_index",
    "PathsConfig",
    # le sous-module cli n'est pas importé ici
]

__version__ = "0.1.0"
