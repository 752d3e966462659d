"""``perch resolve``, ``perch namespace`` and ``perch find``.

Each prints one answer per line on stdout. Misses exit with status 1 so the
commands compose in shell scripts.
"""

import argparse
import sys

from perch.config import ViewsConfig
from perch.namespace.types import DELEGATE
from perch.system import ViewSystem
from perch.templating.lookup import LookupDetails


def _system(args: argparse.Namespace) -> ViewSystem:
    return ViewSystem(ViewsConfig(views_root=args.root, namespace=args.namespace))


def run_resolve(args: argparse.Namespace) -> None:
    result = _system(args).resolve(args.suffix)
    if result is DELEGATE:
        print("delegate")
    elif result is None:
        print("not found")
        sys.exit(1)
    else:
        print(result)


def run_namespace(args: argparse.Namespace) -> None:
    result = _system(args).resolve_namespace_root(args.suffix)
    print("delegate" if result is DELEGATE else result)


def run_find(args: argparse.Namespace) -> None:
    details = LookupDetails()
    if args.handlers:
        details = details.with_handlers(*args.handlers)

    templates = _system(args).find_templates(args.name, args.prefix, args.partial, details)
    if not templates:
        print(f"No templates found for {args.name!r}", file=sys.stderr)
        sys.exit(1)
    for template in templates:
        print(template.path)
