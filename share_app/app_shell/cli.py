import argparse
import logging
import sys
from pathlib import Path

from share_app.components.args_decode import (
    DecodeArgsInput,
    EncodeArgsInput,
    run_decode,
    run_encode,
)
from share_app.domain.entities import ShareFile
from share_app.domain.result import Failure

logger = logging.getLogger("cli")


def file_from_path(path: Path) -> ShareFile:
    """Describe an existing file the way the shell extension does."""
    return ShareFile(id=path.stem, name=path.name, directory=str(path.parent))


def handle_encode(args: argparse.Namespace) -> int:
    paths = [Path(p).resolve() for p in args.files]
    missing = [p for p in paths if not p.is_file()]
    if missing and not args.allow_missing:
        for p in missing:
            logger.error(f"File {p} not found.")
        return 1

    files = tuple(file_from_path(p) for p in paths)
    print(run_encode(EncodeArgsInput(files=files)))
    return 0


def handle_decode(args: argparse.Namespace) -> int:
    result = run_decode(DecodeArgsInput(raw="".join(args.payload)))
    if isinstance(result, Failure):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    for f in result.value:
        print(f"{f.id}\t{f.name}\t{f.full_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Share App developer CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode
    encode_parser = subparsers.add_parser("encode", help="Build a payload for files")
    encode_parser.add_argument("files", nargs="+", help="Files to describe")
    encode_parser.add_argument(
        "--allow-missing", action="store_true", help="Do not require files to exist"
    )

    # decode
    decode_parser = subparsers.add_parser("decode", help="Decode a payload")
    decode_parser.add_argument("payload", nargs="+", help="Payload (parts are joined)")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "encode":
        return handle_encode(args)
    if args.command == "decode":
        return handle_decode(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
