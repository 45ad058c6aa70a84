"""
Command-line entry point for streamlog.

    streamlog emit cout "Hello World" "Foo message"
    streamlog streams
    streamlog demo

Sinks are wired from ``STREAMLOG_*`` environment variables via
``configure()`` before any command runs.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pydantic import ValidationError

from ..core.bootstrap import configure
from ..core.registry import Registry
from ..core.settings import Settings
from ..plugins.sinks.console import ConsoleSink
from ..plugins.sinks.file import FileSink


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamlog",
        description="Dispatch messages to named log streams",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    emit = sub.add_parser("emit", help="Print messages to a stream")
    emit.add_argument("stream", help="Stream name, e.g. cout")
    emit.add_argument("messages", nargs="+", help="Messages, sent in order")

    sub.add_parser("streams", help="List the configured stream names")
    sub.add_parser("demo", help="Print two messages to a console stream")
    return parser


def _foo(registry: Registry) -> None:
    registry.print("cout", "Foo message")


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = _build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "demo":
        registry = Registry.instance()
        registry.add_sink("cout", ConsoleSink())
        registry.print("cout", "Hello World")
        _foo(registry)
        return 0

    registry = configure(settings)
    try:
        if args.command == "emit":
            for message in args.messages:
                registry.print(args.stream, message)
        elif args.command == "streams":
            for name in registry.streams():
                print(name)
    finally:
        if settings.file.path is not None:
            file_sink = registry.get_sink(settings.file.stream)
            if isinstance(file_sink, FileSink):
                file_sink.close()
    return 0


def cli_main() -> int:
    """Console-script wrapper."""
    return main()


if __name__ == "__main__":
    sys.exit(cli_main())
