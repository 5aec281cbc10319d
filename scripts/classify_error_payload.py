from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from watson_core.logging import configure_logging
from watson_core.settings import get_settings
from watson_services.common.error_response import classify


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify a failed Watson service response body and print the result as JSON."
    )
    parser.add_argument("--status-code", type=int, required=True, help="HTTP status code of the response.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="File holding the raw response body (default: read stdin).",
    )
    return parser


def _read_payload(path: Path | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.input is not None and not args.input.exists():
        parser.error(f"--input not found: {args.input}")

    error = classify(_read_payload(args.input), args.status_code)
    print(json.dumps(asdict(error), ensure_ascii=False, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
