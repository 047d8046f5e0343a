#!/usr/bin/env python3
"""Bot Tier Benchmark Script.

Plays bot-only rounds and reports how each difficulty tier scores, so the
evaluation weights in the bot profiles can be tuned.

Usage:
    python benchmark_bot_tiers.py --seats easy medium hard [--iterations N] [--seed S] [--mode board|map]
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from seqtiles.core.generator import BoardGenerator
from seqtiles.core.simulator import RoundSimulator
from seqtiles.models.board import BoardMode
from seqtiles.models.bot_profile import BotDifficulty
from seqtiles.utils.helpers import extract_board_statistics, format_board_for_display

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark bot difficulty tiers")
    parser.add_argument("--seats", nargs="+", default=["easy", "hard"],
                        choices=[d.value for d in BotDifficulty],
                        help="Difficulty for each seat, in turn order")
    parser.add_argument("--iterations", type=int, default=5, help="Rounds to play")
    parser.add_argument("--mode", default=BoardMode.BOARD.value,
                        choices=[m.value for m in BoardMode])
    parser.add_argument("--seed", default="bench", help="Base board seed")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the first round's starting board")
    parser.add_argument("--output", help="Write JSON results to this file")
    args = parser.parse_args()

    generator = BoardGenerator()
    simulator = RoundSimulator(generator)
    difficulties = [BotDifficulty(s) for s in args.seats]

    if args.show_board:
        layout = generator.generate(BoardMode(args.mode), f"{args.seed}0")
        print(format_board_for_display(layout.tiles, layout.cols, show_hidden=True))
        stats = extract_board_statistics(layout.tiles)
        logger.info(
            f"Board {args.seed}0: {stats['total_tiles']} tiles, "
            f"{stats['obstacles']} obstacles, value counts {stats['value_counts']}"
        )

    logger.info(f"Playing {args.iterations} round(s) with seats {args.seats} on {args.mode}")
    start = time.time()
    results = simulator.benchmark(difficulties, args.iterations, BoardMode(args.mode), args.seed)
    elapsed = time.time() - start
    logger.info(f"Finished in {elapsed:.1f}s")

    output = {
        "mode": args.mode,
        "seed": args.seed,
        "iterations": args.iterations,
        "elapsed_seconds": round(elapsed, 2),
        "seats": [r.to_dict() for r in results],
    }
    text = json.dumps(output, indent=2, ensure_ascii=False)
    print(text)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Saved results to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
