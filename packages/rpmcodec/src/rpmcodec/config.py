# packages/rpmcodec/src/rpmcodec/config.py
from __future__ import annotations
from dataclasses import dataclass, fields

__all__ = ["LeadConfig", "DEFAULT_LEAD"]


@dataclass(frozen=True, slots=True)
class LeadConfig:
    """
    Champs constants du **lead** RPM (96 octets, format historique v3.0).

    Champs
    ------
    format_version : int, default=0x0300
        Version du format de lead (major=3, minor=0).
    package_type : int, default=0
        0 = paquet binaire, 1 = paquet source.
    arch : int, default=1
        Numéro d'architecture (archnum). Les lecteurs modernes l'ignorent et
        lisent l'architecture dans le header principal.
    os : int, default=1
        Numéro d'OS (osnum), 1 = Linux.
    signature_type : int, default=5
        Type de signature ; 5 = signature au format header (seule valeur lue).

    Notes
    -----
    - Immuable (`frozen=True`) : mêmes champs => mêmes octets.
    - Chaque champ occupe un u16 big-endian ; une valeur hors [0, 0xFFFF]
      lève une `ValueError`.
    """

    format_version: int = 0x0300
    package_type: int = 0
    arch: int = 1
    os: int = 1
    signature_type: int = 5

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if not isinstance(v, int) or not (0 <= v <= 0xFFFF):
                raise ValueError(f"LeadConfig.{f.name} must be an int in [0, 0xFFFF]")


DEFAULT_LEAD = LeadConfig()
