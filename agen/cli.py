"""agen CLI: print the build/test actions detected for a repository."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from agen.config import Settings
from agen.runtime import configure_logging, format_actions, inspect_repo


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detect build/test actions from project marker files")
    parser.add_argument("--repo", default=settings.repo, help="Repository path")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.strict,
        help="Fail when a marker cannot be probed (e.g. permission denied)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    configure_logging(settings)
    args = build_parser(settings).parse_args(argv)

    result = inspect_repo(Path(args.repo), strict=args.strict)

    if args.json:
        if not result["success"]:
            print(f"ERROR {result['error']}", file=sys.stderr)
        print(json.dumps(result, indent=2))
        return 0 if result["success"] else 1

    if not result["success"]:
        print(f"ERROR {result['error']}")
        return 1

    print(format_actions(result["actions"]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
