"""CLI entrypoints for locc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict

from .config import ConfigError, LoccConfig, load_config
from .languages import LanguageRegistry
from .logging import configure_logging
from .reports import UnknownReportError, builtin_report_names
from .runner import ReportGenerationError, run
from .snapshot import SnapshotCounter, SnapshotError


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


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locc",
        description="Aggregate line counts by language and write reports.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser(
        "report",
        help="Write line count reports from a recorded counts snapshot.",
    )
    _add_verbose_option(report_parser, suppress_default=True)
    report_parser.add_argument(
        "snapshot",
        help="JSON or YAML file holding the per-file, per-language counts.",
    )
    report_parser.add_argument(
        "--config",
        default=None,
        help="Path to .locc.yml or the directory containing it (defaults to the current directory).",
    )
    report_parser.add_argument(
        "--root",
        default=None,
        help="Directory that file paths are reported relative to.",
    )
    report_parser.add_argument(
        "--reports-dir",
        default=None,
        help="Directory to write reports into (defaults to build/reports/locc under the root).",
    )
    report_parser.add_argument("--project-name", default=None, help="Project name shown in reports.")
    report_parser.add_argument(
        "--project-version", default=None, help="Project version shown in reports."
    )
    report_parser.add_argument(
        "--enable",
        action="append",
        default=[],
        metavar="REPORT",
        help=f"Enable a report ({', '.join(builtin_report_names())}). May be repeated.",
    )
    report_parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="REPORT",
        help="Disable a report that is enabled by default. May be repeated.",
    )
    report_parser.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Generate reports concurrently.",
    )
    report_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a DEBUG-level log of the run to this file.",
    )

    languages_parser = subparsers.add_parser(
        "languages",
        help="List the languages known to the registry.",
    )
    _add_verbose_option(languages_parser, suppress_default=True)
    languages_parser.add_argument(
        "--config",
        default=None,
        help="Apply the extension mappings from this .locc.yml (or its directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for locc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = getattr(args, "log_file", None)
    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(log_file).expanduser() if log_file else None,
    )

    if args.command == "report":
        try:
            config = _resolve_config(args)
            counter = SnapshotCounter.from_file(Path(args.snapshot).expanduser())
            summary = run(counter, counter.files, config)
        except (ConfigError, SnapshotError, UnknownReportError) as exc:
            parser.exit(1, f"{exc}\n")
        except ReportGenerationError as exc:
            parser.exit(1, f"locc report failed: {exc}\nRun with --verbose for more details.\n")
        if not summary.generated:
            print("No reports enabled")
        else:
            print(f"Reports written to {_relativize(config.effective_reports_dir)}")
    elif args.command == "languages":
        registry = LanguageRegistry.default()
        if args.config:
            try:
                load_config(Path(args.config)).extensions.apply(registry)
            except ConfigError as exc:
                parser.exit(1, f"{exc}\n")
        for language in registry:
            extensions = ", ".join(registry.extensions_for(language))
            print(f"{language.display_name} ({language.name}): {extensions}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _resolve_config(args: argparse.Namespace) -> LoccConfig:
    config = load_config(Path(args.config) if args.config else Path.cwd())
    if args.root:
        config.root = Path(args.root).expanduser().resolve()
    if args.reports_dir:
        config.reports_dir = Path(args.reports_dir).expanduser().resolve()
    if args.project_name:
        config.project_name = args.project_name
    if args.project_version:
        config.project_version = args.project_version
    if args.parallel is not None:
        config.parallel = args.parallel

    overrides: Dict[str, bool] = dict(config.reports)
    for name in args.enable:
        overrides[name.lower()] = True
    for name in args.disable:
        overrides[name.lower()] = False
    config.reports = overrides
    return config


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
