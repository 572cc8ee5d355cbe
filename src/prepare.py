"""
Standalone CLI for preparing a word list for petal-words.

Keeps unique uppercase words of 3-9 letters and writes them as a JSON array.

Usage:
    python -m src.prepare dictionary.txt
    python -m src.prepare dictionary.txt --output sowpods.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from .lexicon import MAX_WORD_LENGTH, MIN_WORD_LENGTH, read_word_list


def length_distribution(words: List[str]) -> Dict[int, int]:
    """Number of words of each length from 3 to 9."""
    counts = {length: 0 for length in range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1)}
    for word in words:
        counts[len(word)] += 1
    return counts


def main():
    parser = argparse.ArgumentParser(
        description="Normalize a raw word list into a petal-words JSON dictionary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.prepare dictionary.txt
  python -m src.prepare dictionary.txt --output sowpods.json
        """
    )
    parser.add_argument(
        "input",
        help="Path to the raw word list (one word per line, or a JSON array)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output path for the JSON word list (default: same as input with .json extension)"
    )

    args = parser.parse_args()

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Word list not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    output_path = Path(args.output) if args.output else input_path.with_suffix(".json")
    if output_path.resolve() == input_path.resolve():
        print("Error: Output path would overwrite the input file", file=sys.stderr)
        sys.exit(1)

    print(f"Processing word list from {input_path}...")
    try:
        words = read_word_list(input_path)
    except Exception as e:
        print(f"Error reading word list: {e}", file=sys.stderr)
        sys.exit(1)

    if not words:
        print("Error: No usable words found", file=sys.stderr)
        sys.exit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(words, f)

    print(f"Processed {len(words)} words ({MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters)")
    print(f"Dictionary saved to {output_path}")

    print("Word length distribution:")
    for length, count in length_distribution(words).items():
        print(f"  {length} letters: {count} words ({count / len(words) * 100:.1f}%)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
