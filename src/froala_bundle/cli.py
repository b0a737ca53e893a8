"""``froala-bundle`` command line: inspect options and resolved imports."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

from froala_bundle.config import (
    audit_text,
    field_spec_hint,
    load_pyproject_blocks,
    resolve_options,
    resolve_tool_settings,
    summarize_origins,
    to_dict,
    was_field_overridden,
)
from froala_bundle.errors import FroalaBundleError
from froala_bundle.resolver import build_import_plan


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("froala-bundle")
    parser.add_argument(
        "--pyproject", type=Path, default=None, help="pyproject.toml to read"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="cmd", required=True)
    sub.add_parser("show", help="print the effective options as JSON")
    sub.add_parser("audit", help="print where each option came from")
    resolve = sub.add_parser("resolve", help="print the files that would be imported")
    resolve.add_argument("--library-root", type=Path, default=None)
    resolve.add_argument("--fastboot", action="store_true")
    resolve.add_argument("--json", action="store_true", dest="as_json")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    levels = (logging.WARNING, logging.INFO, logging.DEBUG)
    logging.basicConfig(
        level=levels[min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        blocks = load_pyproject_blocks(args.pyproject)
        cfg, src = resolve_options(blocks, explain=True, warn=args.cmd == "resolve")

        if args.cmd == "show":
            sys.stdout.write(json.dumps(to_dict(cfg), indent=2) + "\n")
            if not was_field_overridden(src, "plugins"):
                sys.stdout.write("Advisory: " + field_spec_hint("plugins") + "\n")
        elif args.cmd == "audit":
            sys.stdout.write(audit_text(cfg, src) + "\n")
            for name, count in sorted(summarize_origins(src).items()):
                sys.stdout.write(f"{name:8s}: {count} keys\n")
        elif args.cmd == "resolve":
            overrides = {}
            if args.library_root is not None:
                overrides["library_root"] = args.library_root
            tool = resolve_tool_settings(overrides, pyproject=args.pyproject)
            plan = build_import_plan(cfg, tool, fastboot=args.fastboot or None)
            if args.as_json:
                payload = [{"category": i.category, "path": i.path} for i in plan]
                sys.stdout.write(json.dumps(payload, indent=2) + "\n")
            else:
                for item in plan:
                    sys.stdout.write(item.path + "\n")
    except FroalaBundleError as e:
        sys.stderr.write(f"error: {e}\n")
        if e.hint:
            sys.stderr.write(f"hint: {e.hint}\n")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
