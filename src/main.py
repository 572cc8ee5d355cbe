"""
Main entry point for generating petal-words puzzles.

Usage:
    python -m src.main
    python -m src.main config.yaml --output results/puzzles.json --verbose
    python -m src.main --difficulty hard --seed 7 --dictionary sowpods.json
    python -m src.main --arrangement "R UETOAD FIKTYNMDLCWS"
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List

import yaml

from .board import find_formable_words, parse_arrangement, render_arrangement
from .game import ArrangementGenerator, Difficulty, GenerationReport, PuzzleConfig, PuzzleResult
from .game.generator import count_common_patterns
from .lexicon import load_dictionary


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def group_by_length(words: List[str]) -> Dict[int, List[str]]:
    groups: Dict[int, List[str]] = {}
    for word in sorted(words):
        groups.setdefault(len(word), []).append(word)
    return dict(sorted(groups.items()))


def print_report(report: GenerationReport, show_words: bool = False) -> None:
    print(render_arrangement(report.arrangement))
    status = "fallback" if report.used_fallback else ("accepted" if report.accepted else "best effort")
    print(
        f"{report.word_count} words, {report.pattern_score} patterns, "
        f"{report.attempts} attempt(s) [{status}]"
    )
    if show_words:
        for length, words in group_by_length(report.words).items():
            print(f"  {length} letters ({len(words)}): {', '.join(words)}")


def main():
    parser = argparse.ArgumentParser(
        description="Generate petal-words puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  difficulty: easy
  seed: 42
  dictionary: sowpods.json
  count: 3
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (optional)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=[d.name.lower() for d in Difficulty],
        help="Puzzle difficulty (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--dictionary",
        help="Word list file, .txt or .json (overrides config)"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        help="Number of puzzles to generate (overrides config)"
    )
    parser.add_argument(
        "--arrangement",
        help='Evaluate a given arrangement instead, e.g. "R UETOAD FIKTYNMDLCWS"'
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and formable words"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else PuzzleConfig()
        overrides = {
            "difficulty": args.difficulty,
            "seed": args.seed,
            "dictionary": args.dictionary,
            "count": args.count,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            config = PuzzleConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    started_at = datetime.now()
    dictionary = load_dictionary(config.dictionary)

    if args.verbose:
        stats = dictionary.stats
        print(f"Dictionary: {stats.word_count} words ({stats.source})")
        print()

    reports: List[GenerationReport] = []

    if args.arrangement:
        try:
            arrangement = parse_arrangement(args.arrangement)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        words = find_formable_words(dictionary, arrangement)
        reports.append(GenerationReport(
            arrangement=arrangement,
            difficulty=config.difficulty,
            word_count=len(words),
            pattern_score=count_common_patterns(arrangement),
            words=sorted(words, key=lambda w: (len(w), w)),
        ))
        print_report(reports[0], show_words=True)
    else:
        generator = ArrangementGenerator(seed=config.seed)
        for i in range(config.count):
            if config.count > 1:
                print(f"=== Puzzle {i + 1} ===")
            report = generator.generate_with_report(dictionary, config.difficulty)
            reports.append(report)
            print_report(report, show_words=args.verbose)
            print()

    ended_at = datetime.now()

    if args.output:
        result = PuzzleResult(
            config=config,
            dictionary=dictionary.stats.model_dump(),
            puzzles=reports,
            started_at=started_at.isoformat(),
            ended_at=ended_at.isoformat(),
            duration_seconds=(ended_at - started_at).total_seconds(),
        )
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(result.model_dump(mode="json"), f, indent=2)
        if args.verbose:
            print(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
