from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging
from rpmcodec import LeadConfig, lead
from rpmcodec.header import write_region_file
from rpmwf.api import region_name
from rpmwf.paths import PathsConfig


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="rpmhdr — write the 96-byte RPM lead")
    p.add_argument("name")
    p.add_argument("version")
    p.add_argument("release")
    p.add_argument("--out", default=None, help="Output file (default: $RPMHDR_OUTPUTS_DIR/<nvr>.lead)")
    p.add_argument("--source", action="store_true", help="Source package (lead type=1)")
    p.add_argument("--arch", type=int, default=1, help="Lead archnum")
    p.add_argument("--os", dest="os_", type=int, default=1, help="Lead osnum")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    out = Path(args.out) if args.out else PathsConfig.from_env().outputs_path(
        region_name(args.name, args.version, args.release, "lead"), create=True)
    if out is None:
        logging.error("No --out given and RPMHDR_OUTPUTS_DIR is not set")
        return 2
    try:
        cfg = LeadConfig(package_type=1 if args.source else 0, arch=args.arch, os=args.os_)
        write_region_file(lead(args.name, args.version, args.release, cfg), out)
    except (OSError, ValueError) as e:
        logging.exception("Lead write failed %s: %s", out, e)
        return 1
    logging.info("→ lead %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
