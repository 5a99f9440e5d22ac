"""Command-line entry point: record a sort and replay it in the terminal."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .algorithms import SUPPORTED_ALGORITHMS, get_algorithm
from .api import describe_algorithm, dump_trace, play_trace, record_trace, replay_instantly
from .data_gen import generate
from .render import CodeHighlighter, TextRenderer
from . import constants


def _parse_values(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated integers, got {text!r}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortviz",
        description="Step-by-step sorting algorithm visualizer")
    parser.add_argument("--algorithm", "-a", default=constants.DEFAULT_ALGORITHM,
                        choices=SUPPORTED_ALGORITHMS,
                        help="Algorithm to run (default: bubble)")
    parser.add_argument("--data", "-d", default=constants.DATA_RANDOM,
                        choices=constants.DATA_KINDS,
                        help="Kind of generated input (default: random)")
    parser.add_argument("--size", "-n", type=int, default=constants.DEFAULT_ARRAY_SIZE,
                        help="Generated array size (default: 20)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for generated input")
    parser.add_argument("--values", type=_parse_values, default=None,
                        help="Explicit input, e.g. 5,3,8,1 (overrides --data)")
    parser.add_argument("--speed", "-s", type=int, default=constants.DEFAULT_SPEED,
                        help="Playback speed 1 (slowest) to 5 (fastest)")
    parser.add_argument("--language", "-l", default=constants.CANONICAL_LANGUAGE,
                        choices=constants.SUPPORTED_LANGUAGES,
                        help="Listing language for --code and --with-code (default: python)")
    parser.add_argument("--code", action="store_true",
                        help="Print the algorithm listing and complexity, then exit")
    parser.add_argument("--json", action="store_true",
                        help="Print the recorded trace as JSON instead of replaying it")
    parser.add_argument("--stats-only", action="store_true",
                        help="Only print comparison/swap/step counts")
    parser.add_argument("--with-code", action="store_true",
                        help="Show the listing with the executing line during replay")
    parser.add_argument("--instant", action="store_true",
                        help="Replay without delays between steps")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.size < 0:
        parser.error("--size must be non-negative")

    if args.code:
        info = describe_algorithm(args.algorithm)
        complexity = info["complexity"]
        print(f"═══ {info['name']} ({args.language}) ═══")
        print(
            f"  best {complexity['best']}, average {complexity['average']},"
            f" worst {complexity['worst']}, space {complexity['space']}"
        )
        print()
        print(get_algorithm(args.algorithm).source_text(args.language))
        return

    algorithm = get_algorithm(args.algorithm)
    values = args.values if args.values is not None else generate(
        args.data, args.size, seed=args.seed
    )
    trace = record_trace(values, args.algorithm)

    if args.json:
        print(dump_trace(trace))
        return

    if not args.stats_only:
        renderer = TextRenderer(sys.stdout)
        on_step = renderer.render
        if args.with_code:
            highlighter = CodeHighlighter(
                algorithm, args.language, sys.stdout
            )

            def on_step(step, index):
                renderer.render(step, index)
                highlighter.render(step, index)

        print(f"═══ {algorithm.NAME}: {values} ═══")
        if args.instant:
            replay_instantly(trace, on_step=on_step)
        else:
            asyncio.run(play_trace(trace, speed=args.speed, on_step=on_step))
        print()

    print(trace.stats.report(algorithm.NAME))


if __name__ == "__main__":
    main()
