"""Command line entry point for restcrud.

Usage::

    restcrud                      # scaffold into the current directory
    restcrud ./my-api --port 4000
    python -m restcrud.cli ./my-api --project-name shop-api
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from restcrud.config import ScaffoldConfig
from restcrud.scaffolder import CrudApiGenerator
from restcrud.utils import print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restcrud",
        description="Scaffold an Express + MongoDB CRUD API for a User resource",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  restcrud\n"
            "  restcrud ./my-api --port 4000\n"
            "  restcrud ./my-api --mongo-uri mongodb://db:27017/app\n"
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to scaffold into (default: $RESTCRUD_ROOT_DIR or .)",
    )
    parser.add_argument(
        "--project-name",
        default=None,
        help="package.json name (default: my-crud-api)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port written to .env and used as the app.js fallback (default: 3000)",
    )
    parser.add_argument(
        "--mongo-uri",
        default=None,
        help="MongoDB connection string written to .env",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``restcrud``."""
    args = build_parser().parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
        overrides = {
            "root_dir": Path(args.root) if args.root is not None else None,
            "project_name": args.project_name,
            "port": args.port,
            "mongo_uri": args.mongo_uri,
        }
        config = ScaffoldConfig(
            **{
                **config.model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
    except ValueError as exc:
        print_error(f"invalid configuration: {exc}")
        sys.exit(1)

    try:
        report = CrudApiGenerator(config).generate()
    except OSError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(
        {
            "Root": str(report.root),
            "Folders created": str(len(report.created_dirs)),
            "Files created": str(len(report.created_files)),
            "Files written": str(len(report.written_files)),
        },
        title="restcrud",
    )
    print_success(f"Scaffolded CRUD API into {report.root}")


if __name__ == "__main__":
    main()
