#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cratemap.app import load_cargo_workspace
from cratemap.common import configure_logging
from cratemap.config import ConfigurationError, get_cargo_config
from cratemap.domain.errors import CratemapError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from cratemap.config import CargoConfig
    from cratemap.domain import CargoWorkspace

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the package graph of a cargo workspace")
    parser.add_argument(
        "manifest",
        nargs="?",
        default=".",
        help="Cargo.toml or the directory containing it (default: %(default)s)",
    )
    parser.add_argument(
        "--all-features",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Activate all features (on by default; overrides every other feature flag)",
    )
    parser.add_argument(
        "--no-default-features",
        action="store_true",
        default=None,
        help=(
            "Do not activate the `default` feature (overrides --features); "
            "needs --no-all-features since all features are on by default"
        ),
    )
    parser.add_argument(
        "--features",
        type=str,
        help="Comma separated list of features to activate (needs --no-all-features)",
    )
    parser.add_argument(
        "--target",
        type=str,
        help="Only include dependencies for this target triple",
    )
    parser.add_argument(
        "--load-out-dirs",
        action="store_true",
        default=None,
        help="Run `cargo check` to collect OUT_DIR, cfgs and proc-macro dylibs",
    )
    parser.add_argument("--json", action="store_true", help="Print the graph as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _apply_overrides(config: CargoConfig, args: argparse.Namespace) -> CargoConfig:
    overrides: dict[str, object] = {}
    if args.all_features is not None:
        overrides["all_features"] = args.all_features
    if args.no_default_features:
        overrides["no_default_features"] = True
    if args.features is not None:
        overrides["features"] = tuple(
            item for item in args.features.replace(",", " ").split() if item
        )
    if args.target is not None:
        overrides["target"] = args.target
    if args.load_out_dirs:
        overrides["load_out_dirs_from_check"] = True
    return replace(config, **overrides)


def render_text(workspace: CargoWorkspace) -> list[str]:
    lines = [f"workspace: {workspace.workspace_root}"]
    for idx in workspace.packages():
        package = workspace[idx]
        marker = "*" if package.is_member else " "
        lines.append(
            f"{marker} {workspace.package_flag(package)} {package.version} "
            f"(edition {package.edition}, targets={len(package.targets)}, "
            f"deps={len(package.dependencies)})"
        )
    lines.extend(f"warning: {warning.message}" for warning in workspace.warnings)
    return lines


def render_json(workspace: CargoWorkspace) -> dict[str, object]:
    packages: list[dict[str, object]] = []
    for idx in workspace.packages():
        package = workspace[idx]
        packages.append(
            {
                "name": package.name,
                "version": package.version,
                "flag": workspace.package_flag(package),
                "manifest": str(package.manifest),
                "edition": str(package.edition),
                "is_member": package.is_member,
                "features": list(package.features),
                "cfgs": list(package.cfgs),
                "out_dir": str(package.out_dir) if package.out_dir else None,
                "proc_macro_dylib_path": (
                    str(package.proc_macro_dylib_path)
                    if package.proc_macro_dylib_path
                    else None
                ),
                "targets": [
                    {
                        "name": workspace[target].name,
                        "kind": str(workspace[target].kind),
                        "root": str(workspace[target].root),
                        "is_proc_macro": workspace[target].is_proc_macro,
                    }
                    for target in package.targets
                ],
                "dependencies": [
                    {"name": dep.name, "package": workspace.package_flag(dep.pkg)}
                    for dep in package.dependencies
                ],
            }
        )
    return {
        "workspace_root": str(workspace.workspace_root),
        "packages": packages,
        "warnings": [
            {"kind": str(warning.kind), "package_id": warning.package_id}
            for warning in workspace.warnings
        ],
    }


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        config = _apply_overrides(get_cargo_config(), parsed_args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        workspace = load_cargo_workspace(parsed_args.manifest, config=config)
    except CratemapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        log.exception("Unexpected error while loading cargo workspace")
        sys.exit(1)

    if parsed_args.json:
        print(json.dumps(render_json(workspace), indent=2))
    else:
        for line in render_text(workspace):
            print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
