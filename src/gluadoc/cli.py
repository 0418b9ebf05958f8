"""CLI entry point: ``gluadoc annotate``, ``gluadoc bind`` and ``gluadoc classify``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from gluadoc import __version__
from gluadoc.config import Settings
from gluadoc.logging_config import setup_logging
from gluadoc.plugin import Plugin
from gluadoc.resilience.errors import ConfigurationError


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"gluadoc {__version__}")
        return

    if args.command is None:
        parser.print_help()
        return

    settings = _settings_for(args)
    setup_logging(settings.log_level)

    try:
        if args.command == "annotate":
            _run_annotate(args, settings)
        elif args.command == "bind":
            _run_bind(args, settings)
        elif args.command == "classify":
            _run_classify(args, settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gluadoc",
        description=(
            "Synthesize LuaLS annotations for Garry's Mod "
            "scripted classes, panels and networked fields."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    annotate = sub.add_parser(
        "annotate",
        help="Print the text edits for a Lua file",
    )
    _add_common(annotate)
    annotate.add_argument(
        "--apply",
        action="store_true",
        help="Print the patched file instead of the edits",
    )

    bind = sub.add_parser(
        "bind",
        help="Parse a Lua file and print the docs bound to its tree",
    )
    _add_common(bind)

    classify = sub.add_parser(
        "classify",
        help="Print the scope, type and folder base of a path",
    )
    _add_common(classify)

    return parser


def _add_common(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        "path",
        type=str,
        help="Path to a Lua file",
    )
    sub.add_argument(
        "--uri",
        default=None,
        help="Document URI to classify (default: the file's own URI)",
    )
    sub.add_argument(
        "--config",
        "-c",
        default=None,
        help="Plugin config YAML (default: GLUADOC_CONFIG_PATH or built-ins)",
    )


def _settings_for(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.config:
        overrides["config_path"] = Path(args.config)
    if getattr(args, "apply", False):
        # apply_edits works on character offsets
        overrides["byte_offsets"] = False
    return Settings(**overrides)  # type: ignore[arg-type]


def _read_source(args: argparse.Namespace) -> tuple[str, str]:
    path = Path(args.path).resolve()
    if not path.is_file():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)
    uri = args.uri or path.as_uri()
    return uri, path.read_text(encoding="utf-8")


def _run_annotate(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the annotate command."""
    from gluadoc.synthesis.diff import apply_edits

    uri, text = _read_source(args)
    edits = Plugin(settings).on_set_text(uri, text) or []

    if args.apply:
        sys.stdout.write(apply_edits(text, edits))
        return
    print(json.dumps([e.model_dump() for e in edits], indent=2))


def _run_bind(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the bind command."""
    from gluadoc.binding.parser import parse_source
    from gluadoc.binding.sink import RecordingSink

    uri, text = _read_source(args)
    tree = parse_source(text)
    if tree is None:
        print(
            "Error: Lua grammar not available (install tree-sitter-lua)",
            file=sys.stderr,
        )
        sys.exit(1)

    sink = RecordingSink()
    Plugin(settings).on_transform_ast(uri, tree, sink)
    print(
        json.dumps([d.model_dump(mode="json") for d in sink.docs], indent=2)
    )


def _run_classify(args: argparse.Namespace, settings: Settings) -> None:
    """Execute the classify command."""
    from gluadoc.scope.classifier import classify
    from gluadoc.scope.filesystem import uri_to_path

    plugin = Plugin(settings)
    path = uri_to_path(args.uri) if args.uri else str(Path(args.path).resolve())
    result = classify(path, plugin.config.scopes)
    if result is None:
        print(json.dumps({"scope": None}))
        return

    folder = plugin.folder_detector.detect(
        path, result.scope_name, result.logical_type_name
    )
    print(
        json.dumps(
            {
                "scope": result.scope_name,
                "type": result.logical_type_name,
                "folder": folder.model_dump(mode="json") if folder else None,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
