"""Perch CLI — inspect how names resolve in the views namespace.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — view modules under a virtual namespace.",
    )
    parser.add_argument(
        "--root",
        default="app/views",
        help="Views root directory (default: app/views)",
    )
    parser.add_argument(
        "--namespace",
        default="views",
        help="Virtual namespace token (default: views)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Find the file for a path suffix")
    resolve_parser.add_argument("suffix", help="Path suffix (e.g. views/user/password)")

    # -- perch namespace --------------------------------------------------
    namespace_parser = subparsers.add_parser(
        "namespace", help="Find the package root for a path suffix"
    )
    namespace_parser.add_argument("suffix", help="Path suffix (e.g. views/user)")

    # -- perch find -------------------------------------------------------
    find_parser = subparsers.add_parser("find", help="Look up templates by name")
    find_parser.add_argument("name", help="Template name without prefix or extension")
    find_parser.add_argument("--prefix", default="", help="Directory below the views root")
    find_parser.add_argument(
        "--partial",
        action="store_true",
        help="Look for a partial (marker-prefixed) template",
    )
    find_parser.add_argument(
        "--handler",
        action="append",
        dest="handlers",
        default=None,
        help="Acceptable handler; repeat for several (default: html, py)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from perch.cli._inspect import run_find, run_namespace, run_resolve

    if args.command == "resolve":
        run_resolve(args)
    elif args.command == "namespace":
        run_namespace(args)
    elif args.command == "find":
        run_find(args)
