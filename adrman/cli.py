"""CLI entrypoints for adrman commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from .errors import AdrError
from .initializer import Confirm
from .logging import configure_logging
from .manager import AdrManager


def _shared_options() -> argparse.ArgumentParser:
    # SUPPRESS: a -v given before the subcommand must survive subparsing.
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log debug details (directory listings, skipped roots).",
    )
    return shared


def _add_adr_directory_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--adr-directory",
        default=None,
        help="ADR directory relative to each root (overrides .adrman.yml; default docs/decisions).",
    )


def _add_roots_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "roots",
        nargs="*",
        default=["."],
        help="Project roots to inspect (defaults to the current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adrman",
        description="Find, scaffold and collect Markdown architectural decision records.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug details (directory listings, skipped roots).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    shared = _shared_options()
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        parents=[shared],
        help="Report whether each root contains the ADR directory.",
    )
    _add_adr_directory_option(check_parser)
    _add_roots_argument(check_parser)

    init_parser = subparsers.add_parser(
        "init",
        parents=[shared],
        help="Create the ADR directory and fill it with boilerplate files.",
    )
    _add_adr_directory_option(init_parser)
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    answer = init_parser.add_mutually_exclusive_group()
    answer.add_argument(
        "--yes",
        dest="refill",
        action="store_const",
        const=True,
        default=None,
        help="Rewrite boilerplate files when the ADR directory already exists.",
    )
    answer.add_argument(
        "--no",
        dest="refill",
        action="store_const",
        const=False,
        help="Leave an existing ADR directory untouched.",
    )

    list_parser = subparsers.add_parser(
        "list",
        parents=[shared],
        help="List ADR files found across all roots.",
    )
    _add_adr_directory_option(list_parser)
    _add_roots_argument(list_parser)
    list_parser.add_argument(
        "--content",
        action="store_true",
        help="Print the full text of every ADR instead of its location.",
    )

    roots_parser = subparsers.add_parser(
        "roots",
        parents=[shared],
        help="Show the roots adrman would operate on.",
    )
    _add_roots_argument(roots_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        parents=[shared],
        help="Run the HTTP service used by editor integrations.",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _confirm_for(refill: Optional[bool], prompt: Callable[[str], str] = input) -> Confirm:
    if refill is not None:
        return lambda _message: refill

    def _ask(message: str) -> bool:
        try:
            reply = prompt(f"{message} [y/N] ")
        except EOFError:
            return False
        return reply.strip().lower() in {"y", "yes"}

    return _ask


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for adrman commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    paths = [args.path] if args.command == "init" else list(args.roots)
    try:
        manager = AdrManager.from_paths(
            paths, adr_directory=getattr(args, "adr_directory", None)
        )
    except (AdrError, OSError) as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "check":
        missing = 0
        for root in manager.workspace.roots:
            try:
                found = manager.adr_directory_exists(root)
            except OSError as exc:
                parser.exit(1, f"adrman check failed: {exc}\nRun with --verbose for more details.\n")
            missing += 0 if found else 1
            status = "found" if found else "missing"
            print(f"{root.name}: {status} ({_relativize(manager.adr_directory_for(root))})")
        if missing:
            parser.exit(1)
    elif args.command == "init":
        try:
            outcome = manager.initialize(confirm=_confirm_for(args.refill))
        except (AdrError, OSError) as exc:
            parser.exit(1, f"adrman init failed: {exc}\nRun with --verbose for more details.\n")
        print(f"{outcome.message} ({_relativize(manager.adr_directory_for(manager.workspace.roots[0]))})")
    elif args.command == "list":
        try:
            documents = manager.collect_all()
        except (AdrError, OSError) as exc:
            parser.exit(1, f"adrman list failed: {exc}\nRun with --verbose for more details.\n")
        if args.content:
            print("\n".join(document.content for document in documents), end="")
        else:
            for document in documents:
                print(f"{document.root.name}: {_relativize(document.path)}")
    elif args.command == "roots":
        for root in manager.workspace.roots:
            print(f"{root.name}\t{root.path}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
