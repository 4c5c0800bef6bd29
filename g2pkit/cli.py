"""Command-line front end: a demonstration, a benchmark and a dictionary check."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Iterable, Sequence

from .dictionary import Dictionary, DictionaryError
from .g2p import DEFAULT_DICT_PATH, DEFAULT_RULES_PATH, G2P
from .phoneme import Phoneme

DEMO_WORDS = (
    "hello",
    "world",
    "computer",
    "language",
    "artificial",
    "intelligence",
)

DEMO_SENTENCES = (
    "Hello, world!",
    "Dr. Smith has 5 cats.",
    "This is a test sentence.",
    "How are you today?",
)

BENCHMARK_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "Dr. Smith and Mrs. Johnson went to the store to buy 10 apples and 5 oranges. "
    "This is a longer sentence to test the performance of our G2P system."
)

VERIFY_WORDS = (
    "hello", "world", "computer", "language", "artificial",
    "intelligence", "the", "and", "or", "to", "from", "cat", "dog",
)

_WARMUP_ROUNDS = 10


def _joined(phonemes: Iterable[Phoneme]) -> str:
    return "".join(f"{p} " for p in phonemes)


def _run_demo(g2p: G2P) -> None:
    print("=== G2P Demo ===")
    stats = g2p.get_stats()
    print(f"Dictionary entries: {stats.dict_entries}")
    print(f"Rules: {stats.rule_count}")
    print()

    print("=== Word-level conversion ===")
    for word in DEMO_WORDS:
        print(f"{word}: {_joined(g2p.word_to_phonemes(word))}")
    print()

    print("=== Sentence-level conversion ===")
    for sentence in DEMO_SENTENCES:
        print(f"Input: {sentence}")
        rendered = "".join(
            "| " if p.symbol == " " else f"{p} " for p in g2p.text_to_phonemes(sentence)
        )
        print(f"Output: {rendered}")
        print()


def _run_benchmark(g2p: G2P, iterations: int) -> None:
    print("Benchmarking G2P performance...")
    print(f"Test text: {BENCHMARK_TEXT}")
    print()

    for _ in range(_WARMUP_ROUNDS):
        g2p.text_to_phonemes(BENCHMARK_TEXT)

    start = time.perf_counter()
    for _ in range(iterations):
        g2p.text_to_phonemes(BENCHMARK_TEXT)
    elapsed = time.perf_counter() - start

    average = elapsed / iterations
    per_second = 1.0 / average if average > 0 else float("inf")
    print("Performance results:")
    print(f"Iterations: {iterations}")
    print(f"Total time: {elapsed:.6f}s")
    print(f"Average time per conversion: {average * 1e6:.3f}us")
    print(f"Conversions per second: {per_second:.2f}")


def _run_verify(dict_path: str) -> None:
    print("=== CMU Dictionary Verification ===")
    if not os.path.exists(dict_path):
        print(f"Error: CMU dictionary file not found at {dict_path}", file=sys.stderr)
        return

    size_mb = os.path.getsize(dict_path) / 1024.0 / 1024.0
    print(f"File size: {size_mb:.2f} MB")

    dictionary = Dictionary.load_cmu_dict(dict_path)
    print()
    print("Dictionary loaded successfully!")
    print(f"Total entries: {dictionary.size()}")

    print()
    print("=== Testing common words ===")
    found = 0
    for word in VERIFY_WORDS:
        phonemes = dictionary.lookup(word)
        if phonemes is None:
            print(f"{word}: NOT FOUND")
        else:
            found += 1
            print(f"{word}: {_joined(phonemes)}")
    print()
    print(f"Found {found}/{len(VERIFY_WORDS)} test words")

    print()
    print("=== Dictionary sample (first 10 words) ===")
    sample = dictionary.get_sample_words(10)
    for number, word in enumerate(sample, start=1):
        phonemes = dictionary.lookup(word)
        if phonemes is not None:
            print(f"{number}. {word}: {_joined(phonemes)}")

    print()
    print("=== Statistics ===")
    average = sum(len(word) for word in sample) / len(sample)
    print(f"Average word length: {average:.1f} characters")


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="g2pkit", description="Grapheme-to-phoneme tools.")
    parser.add_argument("--dict", dest="dict_path", default=DEFAULT_DICT_PATH,
                        help="CMU pronunciation dictionary file")
    parser.add_argument("--rules", dest="rules_path", default=DEFAULT_RULES_PATH,
                        help="letter-to-sound rules file")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="convert sample words and sentences")
    bench = commands.add_parser("benchmark", help="time sentence conversion")
    bench.add_argument("--iterations", type=_positive_int, default=1000)
    commands.add_parser("verify", help="load and inspect the dictionary")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    command = args.command or "demo"
    try:
        if command == "verify":
            _run_verify(args.dict_path)
            return 0
        g2p = G2P.load(args.dict_path, args.rules_path)
        if command == "benchmark":
            _run_benchmark(g2p, args.iterations)
        else:
            _run_demo(g2p)
    except (DictionaryError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())