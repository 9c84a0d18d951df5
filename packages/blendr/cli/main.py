"""Command-line interface for blendr.

Subcommands:
    play      Play the spinner demo through the playback host
    mix       Blend two literal values
    resample  Resample a list of literal values
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from blendr.core.blending import ensure_compatible, mix, resample
from blendr.core.config.loader import configure_logging, load_app_config
from blendr.core.errors import BlendrError
from blendr.core.playback import (
    InputEvent,
    PlaybackController,
    PlaybackHost,
    ms_to_steps,
)
from blendr.core.rendering import format_status
from blendr.core.sequencing import KeyframeSequence

console = Console()
logger = logging.getLogger(__name__)

SPINNER_FRAMES = ["|", "/", "-", "\\"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_literal(text: str) -> Any:
    """Parse a command-line literal as int, float, bool or plain text.

    Example:
        >>> parse_literal("3"), parse_literal("0.5"), parse_literal("true"), parse_literal("hi")
        (3, 0.5, True, 'hi')
    """
    lowered = text.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def build_spinner() -> KeyframeSequence:
    """The demo sequence: one keyframe per spinner glyph."""
    return KeyframeSequence.from_pairs(enumerate(SPINNER_FRAMES))


def run_play(args: argparse.Namespace) -> int:
    """Play the spinner demo."""
    playback = args.app_config.playback
    if args.delay is not None:
        playback = playback.model_copy(update={"delay_ms": args.delay})

    timing = playback.to_timing()

    def show(sequence: KeyframeSequence) -> None:
        console.print(Text(format_status(sequence, timing.delay_ms)), soft_wrap=True)

    controller = PlaybackController(
        build_spinner(),
        on_begin=lambda _seq: console.print(":)"),
        on_end=lambda _seq: console.print(":D"),
        on_render=show,
        check_continuity=playback.check_continuity,
    )
    host = PlaybackHost(controller, timing, delay_step_ms=playback.delay_step_ms)

    ticks = args.ticks
    if args.duration_ms is not None:
        ticks = ms_to_steps(args.duration_ms, playback.ms_per_step)

    events = {0: [InputEvent.BACKWARD]} if args.backward else None
    host.run(ticks, events=events, sleep=_no_sleep if args.no_sleep else time.sleep)
    return 0


def _no_sleep(_seconds: float) -> None:
    pass


def run_mix(args: argparse.Namespace) -> int:
    """Blend two literals and print the result."""
    a, b = parse_literal(args.a), parse_literal(args.b)
    ensure_compatible(a, b)
    result = mix(a, b, args.t)
    console.print(Text(repr(result)), soft_wrap=True)
    return 0


def run_resample(args: argparse.Namespace) -> int:
    """Resample literals and print the resulting list."""
    values = [parse_literal(v) for v in args.values]
    console.print(Text(repr(resample(values, args.size))), soft_wrap=True)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="blendr",
        description="blendr - keyframe sequencing and interpolation",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml, default: blendr.yaml if present)",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play the spinner demo")
    play.add_argument("--ticks", type=int, default=16, help="Number of ticks (default: 16)")
    play.add_argument(
        "--duration-ms", type=int, default=None, help="Play for this long instead of --ticks"
    )
    play.add_argument("--delay", type=int, default=None, help="Milliseconds per tick")
    play.add_argument("--backward", action="store_true", help="Play backward")
    play.add_argument("--no-sleep", action="store_true", help="Do not wait between ticks")
    play.set_defaults(handler=run_play)

    mix_p = sub.add_parser("mix", help="Blend two values")
    mix_p.add_argument("a", help="Value at t=0")
    mix_p.add_argument("b", help="Value at t=1")
    mix_p.add_argument("t", type=float, help="Blend factor in [0, 1]")
    mix_p.set_defaults(handler=run_mix)

    res = sub.add_parser("resample", help="Resample a list of values")
    res.add_argument("values", nargs="+", help="Values in order")
    res.add_argument("--size", type=int, required=True, help="Output length (>= 2)")
    res.set_defaults(handler=run_resample)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    p = build_arg_parser()
    args = p.parse_args(argv)

    config = load_app_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config)
    args.app_config = config

    try:
        return int(args.handler(args))
    except BlendrError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
