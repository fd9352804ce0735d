#!/usr/bin/env python3
"""
Payload Sanitizer - CLI tool for checking extracted data offline.

Useful for replaying payloads from bug reports without running the API.

Usage:
    # Sanitize a raw JSON payload
    python scripts/sanitize_payload.py payload.json

    # Treat the input as a full model reply with tagged blocks
    python scripts/sanitize_payload.py reply.txt --envelope

    # Read from stdin, fail on size or parse rejection
    cat payload.json | python scripts/sanitize_payload.py - --strict

Exit codes:
    0 - Success
    1 - Payload rejected (--strict only) or input file unreadable
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app.core.limits import MAX_EXTRACTED_JSON_CHARS  # noqa: E402
from app.services.model_reply import process_model_reply  # noqa: E402
from app.services.sanitizers import SIZE_LIMIT_WARNING, sanitize_extracted_payload  # noqa: E402


def read_input(source: str) -> Optional[str]:
    """Read the payload from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        print(f"[ERROR] Cannot read {source}: {e}", file=sys.stderr)
        return None


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Sanitize extracted wedding data")
    parser.add_argument("source", help="Payload file path, or '-' for stdin")
    parser.add_argument(
        "--envelope",
        action="store_true",
        help="Input is a full model reply with <response>/<extracted_data> blocks"
    )
    parser.add_argument(
        "--max-chars",
        type=int,
        default=MAX_EXTRACTED_JSON_CHARS,
        help=f"Size cap for the extracted JSON (default {MAX_EXTRACTED_JSON_CHARS})"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 when the payload is rejected for size or parse errors"
    )
    args = parser.parse_args(argv)

    text = read_input(args.source)
    if text is None:
        return 1

    if args.envelope:
        processed = process_model_reply(text, max_extracted_chars=args.max_chars)
        result = processed.result
        output = {
            "message": processed.message,
            "notes": processed.notes,
            "result": result.model_dump(mode="json", by_alias=True),
        }
    else:
        result = sanitize_extracted_payload(text, max_chars=args.max_chars)
        output = result.model_dump(mode="json", by_alias=True)

    print(json.dumps(output, indent=2, ensure_ascii=False))

    rejected = result.parse_error is not None or SIZE_LIMIT_WARNING in result.warnings
    if args.strict and rejected:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
