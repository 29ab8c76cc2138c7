from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Optional

from rpmcodec.header import HEADER_MAGIC


def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def looks_like_header(p: Path) -> bool:
    try:
        with open(p, "rb") as f:
            return f.read(4) == HEADER_MAGIC
    except OSError:
        return False
