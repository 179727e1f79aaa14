# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
cprompt Entry Point.

Renders the configured prompt and writes it to stdout as one line.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from cprompt.core.config import settings
from cprompt.core.logging import setup_logging
from cprompt.kernel.engine import ResolverEngine, build_engine, render_prompt
from cprompt.user_config import PROMPT

logger = logging.getLogger("cprompt.main")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cprompt",
        description="Print the configured shell prompt.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="stderr log level (default: %(default)s)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list the registered resolvers and the kinds they handle, then exit",
    )
    return parser.parse_args(argv)


def write_line(line: str) -> None:
    """Write `line` to stdout, passing undecodable path bytes through unchanged."""
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(line)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    stream.write(os.fsencode(line))
    stream.flush()


def list_resolvers(engine: ResolverEngine) -> str:
    lines = []
    for info in engine.registry.list_all():
        lines.append(f"{info['resolver_id']}: {', '.join(info['kinds'])}")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    engine = build_engine(settings=settings)
    if args.list:
        sys.stdout.write(list_resolvers(engine))
        return 0

    missing = engine.registry.missing_kinds()
    if missing:
        logger.warning("No resolver for kinds: %s", sorted(k.value for k in missing))

    write_line(render_prompt(PROMPT, engine))
    return 0


if __name__ == "__main__":
    sys.exit(main())
