# packages/rpmcodec/src/rpmcodec/header/lead.py
from __future__ import annotations
import struct
from typing import Optional

from ..config import LeadConfig, DEFAULT_LEAD

__all__ = ["LEAD_MAGIC", "LEAD_SIZE", "NAME_FIELD_SIZE", "lead"]

LEAD_MAGIC = 0xEDABEEDB
NAME_FIELD_SIZE = 66

# magic | major.minor | type | arch | name[66] | os | sigtype | reserved[16]
_LEAD = struct.Struct(">IHHH66sHH16x")
LEAD_SIZE = _LEAD.size  # 96


def lead(name: str, version: str, release: str, config: Optional[LeadConfig] = None) -> bytes:
    """Build the 96-byte legacy lead for `name-version-release`.

    The NVR is truncated to 65 bytes so the name field always keeps a NUL.
    """
    cfg = config or DEFAULT_LEAD
    nvr = f"{name}-{version}-{release}".encode("utf-8")[:NAME_FIELD_SIZE - 1]
    return _LEAD.pack(
        LEAD_MAGIC,
        cfg.format_version,
        cfg.package_type,
        cfg.arch,
        nvr,  # struct complète avec des zéros jusqu'à 66
        cfg.os,
        cfg.signature_type,
    )
