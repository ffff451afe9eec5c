#!/usr/bin/env python3
"""
Memory Space Command Line Interface
Runs a script of malloc/free/defrag commands against a simulated memory space.

Script format, one command per line:
    malloc <length>
    free <address>
    defrag
    show
    stats
Blank lines and lines starting with '#' are ignored.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from memspace.conf import SpaceConfig
from memspace.exceptions import MemSpaceError
from memspace.memory import MemorySpace

logger = logging.getLogger(__name__)


class CommandRunner:
    """Executes script commands against one memory space."""

    def __init__(self, space: MemorySpace, out: Optional[TextIO] = None):
        self.space = space
        self.out = out
        self.failures = 0

    def _emit(self, text: str) -> None:
        print(text, file=self.out or sys.stdout)

    def run_line(self, line: str, line_number: int = 0) -> None:
        line = line.strip()
        if not line or line.startswith("#"):
            return

        command, *args = line.split()
        command = command.lower()
        try:
            if command == "malloc":
                self._emit(str(self.space.malloc(self._int_argument(command, args))))
            elif command == "free":
                self.space.free(self._int_argument(command, args))
            elif command == "defrag":
                self.space.defrag()
            elif command == "show":
                self._emit(str(self.space))
            elif command == "stats":
                self._emit(json.dumps(self.space.get_statistics(), indent=2))
            else:
                raise ValueError(f"Unknown command: {command}")
        except (MemSpaceError, ValueError) as e:
            self.failures += 1
            print(f"line {line_number}: {e}", file=sys.stderr)

    @staticmethod
    def _int_argument(command: str, args: List[str]) -> int:
        if len(args) != 1:
            raise ValueError(f"{command} expects exactly one integer argument")
        return int(args[0])

    def run(self, stream: TextIO) -> int:
        for line_number, line in enumerate(stream, 1):
            self.run_line(line, line_number)
        return self.failures


def build_config(args: argparse.Namespace) -> SpaceConfig:
    """Merge the optional JSON config file with command line overrides."""
    data = {}
    if args.config:
        data = SpaceConfig.from_file(args.config).model_dump()
    if args.size is not None:
        data["max_size"] = args.size
    if args.strict:
        data["strict_free"] = True
    if args.log_level:
        data["log_level"] = args.log_level
    return SpaceConfig(**data)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memspace",
        description="Run malloc/free/defrag commands against a simulated memory space",
    )
    parser.add_argument("script", nargs="?", help="Command script (default: stdin)")
    parser.add_argument("--size", "-s", type=int, help="Size of the memory space")
    parser.add_argument("--config", "-c", help="JSON configuration file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when freeing an address that is not allocated",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.size is None and not args.config:
        parser.error("either --size or --config is required")

    try:
        config = build_config(args)
        logging.basicConfig(level=config.log_level)

        runner = CommandRunner(MemorySpace.from_config(config))
        if args.script:
            with open(args.script, "r", encoding="utf-8") as f:
                failures = runner.run(f)
        else:
            failures = runner.run(sys.stdin)
    except (ValidationError, json.JSONDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Script finished with {failures} failed commands")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
