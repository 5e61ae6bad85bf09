"""
Command line entry point for the CRUD module generator.
Usage: scaffold-module <name> [--out DIR] [--dry-run]
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from scaffold.common.errors import InvalidResourceNameError
from scaffold.core.config import settings
from scaffold.core.logging import configure_logging
from scaffold.generators.module_gen import generate_module, plan_module

FEATURES = (
    "Pagination (limit, offset, sort, order)",
    "Filter & Search",
    "Soft delete (deletedAt)",
    "Mapper (to_domain, to_entity with id check)",
    "DTOs with validation",
    "Response descriptions for API docs",
    "Full CRUD with Repository pattern",
    "Explicit providers (no global registry)",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold-module",
        description="Generate a CRUD module skeleton for a resource",
    )
    parser.add_argument("name", nargs="?", default="", help="Lowercase resource name, e.g. room")
    parser.add_argument(
        "--out",
        default=settings.modules_dir,
        help="Directory that holds generated modules (or set SCAFFOLD_MODULES_DIR)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without writing them",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        if args.dry_run:
            descriptor = plan_module(args.name)
        else:
            descriptor = generate_module(args.name, Path(args.out))
    except InvalidResourceNameError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    module_dir = Path(args.out) / descriptor.root
    if args.dry_run:
        print(f"Would generate module \"{descriptor.resource.name}\" in {module_dir}:")
        for path in descriptor.paths():
            print(f"  {path}")
        return 0

    print(f"✅ Module \"{descriptor.resource.name}\" generated in {module_dir} with:")
    for feature in FEATURES:
        print(f"  ✓ {feature}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
