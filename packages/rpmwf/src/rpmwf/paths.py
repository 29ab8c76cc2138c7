from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os


@dataclass(frozen=True)
class PathsConfig:
    """Output directory resolver (explicit value, then ENV).

    ENV keys
    --------
    RPMHDR_OUTPUTS_DIR → encoded leads / header regions   # [STORE:OVERWRITE]
    """
    outputs_dir: Path | None = None

    @staticmethod
    def from_env() -> "PathsConfig":
        return PathsConfig(outputs_dir=_opt_env("RPMHDR_OUTPUTS_DIR"))

    def outputs(self) -> Path | None:
        return self.outputs_dir or _opt_env("RPMHDR_OUTPUTS_DIR")

    def outputs_path(self, *parts: str, create: bool = False) -> Path | None:
        root = self.outputs()
        if not root: return None
        p = root / Path(*parts)
        if create: p.parent.mkdir(parents=True, exist_ok=True)
        return p


def _opt_env(name: str) -> Path | None:
    v = os.getenv(name)
    return Path(v) if v else None


__all__ = ["PathsConfig"]
