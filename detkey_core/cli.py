"""
detkey command line.

    detkey <keyname>      derive the key for <keyname>, import it into the
                          key store and print "<identifier> <keyname>"
"""

from __future__ import annotations

import argparse
import sys

from .config import load_config
from .errors import DetKeyError
from .importer import importer_factory
from .keygen import DetKeyGen, KeyService
from .logger import get_logger, set_level

log = get_logger("DetKey.CLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detkey",
        description="Derive a reproducible Ed25519 key from a name and import it into a key store.",
    )
    parser.add_argument("keyname", help="name the key is derived from and imported under")
    parser.add_argument("--api", dest="api_url", help="key store API base URL (default: $DETKEY_IPFS_API or http://127.0.0.1:5001)")
    parser.add_argument("--importer", choices=["ipfs", "memory"], help="key store backend")
    parser.add_argument("--timeout", type=float, help="import request timeout in seconds")
    parser.add_argument("--retries", type=int, help="extra attempts on transient import failures")
    parser.add_argument("--no-import", action="store_true", help="only derive and print, skip the key store")
    parser.add_argument("--print-key", action="store_true", help="also print the private key PEM")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config({
            "api_url": args.api_url,
            "importer": args.importer,
            "timeout": args.timeout,
            "retries": args.retries,
        })
        set_level("DEBUG" if args.verbose else config.log_level)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        generator = DetKeyGen(args.keyname)
        if not args.no_import:
            importer = importer_factory(config)
            try:
                KeyService(generator, importer).generate_and_import(args.keyname)
            finally:
                importer.close()
    except DetKeyError as e:
        print(f"Operation failed: {e}")
        return 1

    print(f"{generator.get_key_id()} {args.keyname}")
    if args.print_key:
        sys.stdout.write(generator.get_key_data().decode("ascii"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
