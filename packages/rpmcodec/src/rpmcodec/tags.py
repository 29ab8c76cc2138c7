# packages/rpmcodec/src/rpmcodec/tags.py
# -----------------------------------------------------------------------------
# Numéros de tags RPM usuels (header principal + header de signature)
# Les deux régions réutilisent les mêmes plages numériques : SIZE (signature)
# et NAME (header) valent tous deux 1000.

from __future__ import annotations
from typing import Dict

__all__ = [
    "HEADER_SIGNATURES", "HEADER_IMMUTABLE",
    "HEADER_TAGS", "SIGNATURE_TAGS", "REGION_TAGS",
    "tag_number", "region_number",
]

# Régions (tag de l'entrée synthétique de fin de région)
HEADER_SIGNATURES = 0x3E  # 62
HEADER_IMMUTABLE = 0x3F   # 63

REGION_TAGS: Dict[str, int] = {
    "signatures": HEADER_SIGNATURES,
    "immutable": HEADER_IMMUTABLE,
}

# Header principal
NAME = 1000
VERSION = 1001
RELEASE = 1002
EPOCH = 1003
SUMMARY = 1004
DESCRIPTION = 1005
BUILDTIME = 1006
BUILDHOST = 1007
SIZE = 1009
VENDOR = 1011
LICENSE = 1014
PACKAGER = 1015
GROUP = 1016
URL = 1020
OS = 1021
ARCH = 1022
PREIN = 1023
POSTIN = 1024
PREUN = 1025
POSTUN = 1026
SOURCERPM = 1044
PROVIDENAME = 1047
REQUIRENAME = 1049
PAYLOADFORMAT = 1124
PAYLOADCOMPRESSOR = 1125
PAYLOADFLAGS = 1126

HEADER_TAGS: Dict[str, int] = {
    "name": NAME, "version": VERSION, "release": RELEASE, "epoch": EPOCH,
    "summary": SUMMARY, "description": DESCRIPTION,
    "buildtime": BUILDTIME, "buildhost": BUILDHOST, "size": SIZE,
    "vendor": VENDOR, "license": LICENSE, "packager": PACKAGER,
    "group": GROUP, "url": URL, "os": OS, "arch": ARCH,
    "prein": PREIN, "postin": POSTIN, "preun": PREUN, "postun": POSTUN,
    "sourcerpm": SOURCERPM, "providename": PROVIDENAME, "requirename": REQUIRENAME,
    "payloadformat": PAYLOADFORMAT, "payloadcompressor": PAYLOADCOMPRESSOR,
    "payloadflags": PAYLOADFLAGS,
}

# Header de signature
SIG_SHA1 = 269
SIG_SHA256 = 273
SIG_SIZE = 1000
SIG_MD5 = 1004
SIG_PAYLOADSIZE = 1007

SIGNATURE_TAGS: Dict[str, int] = {
    "sha1": SIG_SHA1, "sha256": SIG_SHA256,
    "size": SIG_SIZE, "md5": SIG_MD5, "payloadsize": SIG_PAYLOADSIZE,
}


def tag_number(name: str | int, region: int = HEADER_IMMUTABLE) -> int:
    """
    Résout un tag : int tel quel, chaîne décimale, ou nom (insensible à la casse)
    dans la table de la région (`SIGNATURE_TAGS` si region == 62).

    Lève ValueError si le nom est inconnu.
    """
    if isinstance(name, int):
        return name
    key = str(name).strip().lower()
    if key.isdigit():
        return int(key)
    table = SIGNATURE_TAGS if region == HEADER_SIGNATURES else HEADER_TAGS
    if key not in table:
        raise ValueError(f"tag_number: unknown tag {name!r}")
    return table[key]


def region_number(region: str | int) -> int:
    """'signatures' / 'immutable' / int -> numéro de région."""
    if isinstance(region, int):
        return region
    key = str(region).strip().lower()
    if key.isdigit():
        return int(key)
    if key not in REGION_TAGS:
        raise ValueError(f"region_number: unknown region {region!r}")
    return REGION_TAGS[key]
