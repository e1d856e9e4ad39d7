"""
CLI labeler:
Usage example:
  py src/main.py label -a asdf -i type=530 value=169 function=158 --stats
  py src/main.py label -a ab -f items.txt --sort --verbose
  py src/main.py example
  py src/main.py bench --bases 2 8 32 --items 10 100 1000
  py src/main.py verify -a ab -l aa bbb ba bba ab

alphabet: символы алфавита, base = len(alphabet); индекс символа — номер в метке.
"""

# =================================================================================================================

import random
import sys
import time

import cli

from Huffman import *
from utils import *

# Частоты слов для примера
EXAMPLE_ITEMS = [
    ("parameter", 52),
    ("values", 52),
    ("variable", 55),
    ("argument", 56),
    ("slice", 59),
    ("types", 70),
    ("expression", 88),
    ("function", 158),
    ("value", 169),
    ("type", 530),
]

# =================================================================================================================

def label_items(args) -> int:
    """Генерирует и печатает метки для элементов из аргументов и/или файла."""
    try:
        check_alphabet(args.alphabet)
        tokens = list(args.items)
        if args.file:
            tokens += cli.read_items_file(args.file)
        items = parse_items(tokens)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        return 1

    if args.verbose:
        print(f"[label] alphabet: {args.alphabet!r} (base={len(args.alphabet)})")
        print(f"[label] items: {len(items)}")

    freqs = [freq for _, freq in items]
    labels = labels_to_strings(args.alphabet, label(len(args.alphabet), freqs))

    rows = list(zip(items, labels))
    if args.sort:
        rows.sort(key=lambda row: (len(row[1]), row[1]))

    for (name, _), text in rows:
        print(f"{name}: {text}")

    if args.stats:
        print_stats(freqs, labels)
    return 0

def run_example(args) -> int:
    """Печатает метки для слов из EXAMPLE_ITEMS."""
    try:
        check_alphabet(args.alphabet)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1

    freqs = [freq for _, freq in EXAMPLE_ITEMS]
    labels = labels_to_strings(args.alphabet, label(len(args.alphabet), freqs))
    for (name, _), text in zip(EXAMPLE_ITEMS, labels):
        print(f"{name}: {text}")
    return 0

def run_bench(args) -> int:
    """Замеряет время label() на случайных частотах из [0, 100)."""
    if args.repeat < 1 or any(base < 2 for base in args.bases):
        print("[ERROR] repeat must be >= 1 and every base >= 2")
        return 1

    rnd = random.Random(args.seed)

    print("\n=== Benchmark ===")
    for base in args.bases:
        for num_items in args.items:
            freqs = [rnd.randrange(100) for _ in range(num_items)]

            start = time.perf_counter()
            for _ in range(args.repeat):
                got = label(base, freqs)
            elapsed = time.perf_counter() - start

            if len(got) != len(freqs):
                print(f"[ERROR] unexpected length: got={len(got)}, want={len(freqs)}")
                return 1

            per_call = elapsed / args.repeat * 1e6
            print(f"[bench] base={base}/numItems={num_items}: {per_call:.1f} us/op, "
                  f"avg len {expected_length(freqs, got):.2f}")
    return 0

def verify_labels(args) -> int:
    """Проверяет, что метки непустые, над алфавитом, различны и беспрефиксны."""
    print("[verify]", " ".join(args.labels))
    try:
        check_alphabet(args.alphabet)
        for text in args.labels:
            if not text:
                raise ValueError("empty label")
            string_to_label(args.alphabet, text)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1

    conflict = find_prefix_conflict(args.labels)
    if conflict is not None:
        i, j = conflict
        print(f"[ERROR] {args.labels[j]!r} is a prefix of {args.labels[i]!r}")
        return 1

    print("Prefix-free: True")
    return 0

# =================================================================================================================

def print_stats(freqs, labels):
    """Печатает статистику по длинам меток."""
    lengths = [len(text) for text in labels]
    print("\n=== Statistics ===")
    print(f"• items:            {len(labels)}")
    if not labels:
        return
    print(f"• max length:       {max(lengths)}")
    print(f"• mean length:      {sum(lengths) / len(lengths):.3f}")
    print(f"• weighted length:  {expected_length(freqs, labels):.3f}")

# =================================================================================================================

def main(argv=None) -> int:

    parser = cli.init()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    return args.func(args)

# =================================================================================================================

if __name__ == "__main__":
    sys.exit(main())
