"""stickyparam CLI: resolve sticky defaults and coerce submitted values."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for stickyparam commands."""
    try:
        stickyparam_version = get_version("stickyparam")
    except PackageNotFoundError:
        stickyparam_version = "dev"

    from .kernel.parameter import DISPLAY_NAME

    parser = argparse.ArgumentParser(
        prog="stickyparam",
        description=f"stickyparam: {DISPLAY_NAME} defaults from job run history"
    )
    parser.add_argument("--version", action="version", version=f"stickyparam {stickyparam_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a parameter's default from a job's run history",
        parents=[parent_parser]
    )
    resolve_parser.add_argument(
        "--parameter",
        type=Path,
        required=True,
        help="Path to parameter definition JSON"
    )
    resolve_parser.add_argument(
        "--history",
        type=Path,
        required=True,
        help="Path to run history JSON"
    )
    resolve_parser.add_argument(
        "--job",
        dest="job_id",
        default=None,
        help="Only consider runs of this job"
    )
    resolve_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write resolved_default.json to this directory"
    )

    # coerce command
    coerce_parser = subparsers.add_parser(
        "coerce",
        help="Coerce a submitted string to a boolean",
        parents=[parent_parser]
    )
    coerce_parser.add_argument("value", help="Raw submitted value")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    def _write_resolved(result, output_dir: Optional[Path]) -> None:
        from ._internal.canonical_json import canonical_dumps

        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            result_out = output_dir / "resolved_default.json"
            result_out.write_text(canonical_dumps(result.model_dump(mode="json")) + "\n", encoding="utf-8")
            if not args.quiet:
                print("[OK] Resolution complete")
                print(f"  Result: {result_out}")
        elif not args.quiet:
            print("[OK] Resolution complete")
        if not args.quiet:
            print(f"  Value: {'true' if result.value else 'false'}")
            print(f"  Source: {result.source.value}")
            if result.run_sequence_number is not None:
                print(f"  Run: #{result.run_sequence_number}")
            for warning in result.warnings:
                print(f"  Warning: {warning}")

    if args.command == "resolve":
        try:
            from .api import resolve_default

            result = resolve_default(
                parameter=args.parameter.resolve(),
                history=args.history.resolve(),
                job_id=args.job_id,
            )
            _write_resolved(result, args.output_dir.resolve() if args.output_dir else None)
            sys.exit(0)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.command == "coerce":
        from .kernel.parameter import coerce_boolean

        print("true" if coerce_boolean(args.value) else "false")
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
