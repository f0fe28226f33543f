from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import TypeAdapter

from .core.config import settings
from .core.errors import PropsyncError
from .core.logging_config import setup_logging, get_logger
from .core.models import OperationResult, StringResource
from .infra.provider import PropertiesResourcesProvider

log = get_logger(__name__)

_resources_adapter = TypeAdapter(List[StringResource])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="propsync", description=PropertiesResourcesProvider.DESCRIPTION)
    parser.add_argument("--root", default=settings.STORAGE_LOCATION, help=PropertiesResourcesProvider.STORAGE_LOCATION_USER_TEXT)
    parser.add_argument("--solution", default=settings.SOLUTION_PATH, help="Base path for a relative --root")
    parser.add_argument("--project", default=settings.PROJECT_NAME)
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG)
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser("import", help="Read all resource files into JSON")
    p_import.add_argument("--output", "-o", help="Write JSON here instead of stdout")
    p_import.add_argument("--invariant-only", action="store_true", help="Drop strings without invariant text")

    p_export = sub.add_parser("export", help="Merge JSON resources into the resource files")
    p_export.add_argument("input", nargs="?", help="JSON file (default: stdin)")

    sub.add_parser("normalize", help="Import and re-export the tree in canonical form")
    return parser


def _print_results(results: List[OperationResult]) -> int:
    for r in results:
        if r.ok:
            print(f"OK    {r.path}")
        else:
            print(f"ERROR {r.path}: {r.message}")
    return 0 if all(r.ok for r in results) else 1


def cmd_import(provider: PropertiesResourcesProvider, args: argparse.Namespace) -> int:
    resources = provider.import_resource_strings(args.project)
    if args.invariant_only:
        resources = [r for r in resources if r.has_invariant_text]
    payload = _resources_adapter.dump_json(resources, indent=2).decode("utf-8")
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        log.info(f"Wrote {len(resources)} string(s) to {args.output}")
    else:
        print(payload)
    return 0


def cmd_export(provider: PropertiesResourcesProvider, args: argparse.Namespace) -> int:
    # Accept payload as path argument (preferred) or stdin fallback
    if args.input:
        with open(args.input, "r", encoding="utf-8-sig") as f:
            raw = f.read()
    else:
        raw = sys.stdin.read()
    resources = _resources_adapter.validate_json(raw)
    return _print_results(provider.export_resource_strings(args.project, resources))


def cmd_normalize(provider: PropertiesResourcesProvider, args: argparse.Namespace) -> int:
    resources = provider.import_resource_strings(args.project)
    return _print_results(provider.export_resource_strings(args.project, resources))


COMMANDS = {
    "import": cmd_import,
    "export": cmd_export,
    "normalize": cmd_normalize,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_file=settings.LOG_FILE, debug=args.debug, log_dir=settings.LOG_DIR)

    try:
        provider = PropertiesResourcesProvider(args.root, args.solution or None)
        return COMMANDS[args.command](provider, args)
    except PropsyncError as e:
        log.error(f"{args.command} failed: {e}")
        return 2


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
