"""
Validate a transaction CSV file from the command line.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from txn_validation.config import PROFILES, settings_for_profile
from txn_validation.logging_utils import configure_logging
from txn_validation.schemas.validation import ValidationResultResponse
from txn_validation.services.validation_engine import InvalidFileError, InvalidHeadersError, TransactionValidationEngine

EXIT_OK = 0
EXIT_FILE_REJECTED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a transaction CSV file.")
    parser.add_argument("path", type=Path, help="CSV file to validate.")
    parser.add_argument(
        "--profile",
        dest="profile",
        default="default",
        choices=sorted(PROFILES),
        help="Validation policy profile.",
    )
    parser.add_argument(
        "--content-type",
        dest="content_type",
        default=None,
        help="Optional declared content type of the upload.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    engine = TransactionValidationEngine(settings_for_profile(args.profile))
    try:
        with args.path.open("rb") as handle:
            result = engine.validate(
                handle,
                filename=args.path.name,
                content_type=args.content_type,
            )
    except InvalidHeadersError as exc:
        print(json.dumps({"error": type(exc).__name__, **exc.to_dict()}, indent=2, default=str))
        return EXIT_FILE_REJECTED
    except InvalidFileError as exc:
        print(json.dumps({"error": type(exc).__name__, "message": str(exc)}, indent=2))
        return EXIT_FILE_REJECTED
    except OSError as exc:
        print(json.dumps({"error": "FileReadError", "message": str(exc)}, indent=2))
        return EXIT_FILE_REJECTED

    sys.stdout.write(ValidationResultResponse.from_result(result).model_dump_json(indent=2))
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
