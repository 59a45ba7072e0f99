"""CLI entrypoints for packgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, PackGenConfig, load_config
from .errors import GenerationError
from .logging import configure_logging
from .orchestrator import Orchestrator

# flag -> PackageFields attribute
_FIELD_OPTIONS = (
    ("--company", "company", "Company name (lower-cased in the manifest name)."),
    ("--framework", "framework", "Framework name."),
    ("--name", "package_name", "Package name."),
    ("--author", "author", "Package author."),
    ("--version", "version", "Package version written to the manifest and changelog."),
    ("--description", "description", "One-line package description."),
    ("--platform-version", "platform_version", "Minimum platform version string."),
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Package directory (defaults to package_path from .packgen.yml).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packgen",
        description="Generate and maintain package manifest, README and changelog files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .packgen.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records, with timestamps, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Create or update package.json, README.md and CHANGELOG.md.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    for flag, dest, help_text in _FIELD_OPTIONS:
        generate_parser.add_argument(flag, dest=dest, default=None, help=help_text)
    generate_parser.add_argument(
        "--note",
        default=None,
        help="Add a changelog entry for the current version with this text.",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print the fields read from an existing manifest.",
    )
    _add_verbose_option(show_parser, suppress_default=True)
    _add_path_argument(show_parser)

    relpath_parser = subparsers.add_parser(
        "relpath",
        help="Express an absolute path relative to a base directory.",
    )
    _add_verbose_option(relpath_parser, suppress_default=True)
    relpath_parser.add_argument("absolute_path", help="Absolute path to convert.")
    relpath_parser.add_argument("base_path", help="Absolute base directory.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for packgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = Orchestrator(config)

    if args.command == "generate":
        target = _target_dir(args.path, config)
        try:
            fields = orchestrator.load_fields(target).merged(
                {dest: getattr(args, dest) for _, dest, _ in _FIELD_OPTIONS}
            )
            result = orchestrator.generate(target, fields, args.note)
        except GenerationError as exc:
            parser.exit(1, f"packgen generate failed: {exc}\nRun with --verbose for more details.\n")
        for kind in ("manifest", "readme", "changelog"):
            outcome = result.outcome_for(kind)
            path = next(item.path for item in result.artifacts if item.kind == kind)
            print(f"{kind} {outcome.value}: {_relativize(path)}")
    elif args.command == "show":
        target = _target_dir(args.path, config)
        try:
            fields = orchestrator.load_fields(target)
        except GenerationError as exc:
            parser.exit(1, f"packgen show failed: {exc}\n")
        for key, value in fields.as_dict().items():
            print(f"{key}: {value}")
    elif args.command == "relpath":
        try:
            print(orchestrator.relative_path(args.absolute_path, args.base_path))
        except GenerationError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _target_dir(path: str | None, config: PackGenConfig) -> Path:
    if path is not None:
        return Path(path).expanduser()
    return config.root / config.package_path


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
