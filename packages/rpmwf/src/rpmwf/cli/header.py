from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, ensure_dir, looks_like_header
from rpmcodec.header import write_index
from rpmwf.api import load_manifest, build_index


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="rpmhdr — encode JSON manifests into RPM header regions")
    p.add_argument("manifests", nargs="+", help="Manifestes JSON")
    p.add_argument("--out", required=True, help="Output directory (<stem>.hdr)")
    p.add_argument("--resume", action="store_true", help="Skip outputs that already exist and look valid")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    out_dir = Path(args.out); ensure_dir(out_dir)
    ok = 0
    for i, m in enumerate(args.manifests, 1):
        m = Path(m)
        target = out_dir / f"{m.stem}.hdr"
        if args.resume and looks_like_header(target):
            logging.info("[%d/%d] skip: %s", i, len(args.manifests), target)
            ok += 1
            continue
        try:
            idx = build_index(load_manifest(m))
            size = write_index(idx, target)
            logging.info("[%d/%d] %s → %s (%d entries, %d bytes)",
                         i, len(args.manifests), m, target, len(idx), size)
            ok += 1
        except (OSError, ValueError, TypeError, OverflowError) as e:
            logging.exception("Header encode failed %s: %s", m, e)
    return 0 if ok == len(args.manifests) else 1


if __name__ == "__main__":
    sys.exit(main())
