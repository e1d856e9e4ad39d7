
import argparse

import main

DEFAULT_ALPHABET = "asdf"

# =================================================================================================================

def init() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prefix-free labels with n-ary Huffman coding"
    )
    sub = parser.add_subparsers(dest="cmd")

    # ------------------------------------------------------------
    # label
    # ------------------------------------------------------------
    p = sub.add_parser("label", help="Сгенерировать метки для элементов")
    p.add_argument("-a", "--alphabet", default=DEFAULT_ALPHABET, help="Символы алфавита, base = длина алфавита")
    p.add_argument("-i", "--items", nargs="+", default=[], help="Элементы вида name=freq")
    p.add_argument("-f", "--file", help="Файл с элементами, по одному name=freq на строку")
    p.add_argument("--sort", action="store_true", help="Печатать по возрастанию длины метки")
    p.add_argument("--stats", action="store_true")
    p.add_argument("--verbose", action="store_true")
    p.set_defaults(func=main.label_items)

    # ------------------------------------------------------------
    # example
    # ------------------------------------------------------------
    e = sub.add_parser("example", help="Показать пример на наборе слов")
    e.add_argument("-a", "--alphabet", default=DEFAULT_ALPHABET)
    e.set_defaults(func=main.run_example)

    # ------------------------------------------------------------
    # bench
    # ------------------------------------------------------------
    b = sub.add_parser("bench", help="Замерить время генерации меток")
    b.add_argument("--bases", nargs="+", type=int, default=[2, 8, 32])
    b.add_argument("--items", nargs="+", type=int, default=[10, 100, 1000])
    b.add_argument("--repeat", type=int, default=100, help="Количество запусков на каждую пару base/items")
    b.add_argument("--seed", type=int, default=None)
    b.set_defaults(func=main.run_bench)

    # ------------------------------------------------------------
    # verify
    # ------------------------------------------------------------
    v = sub.add_parser("verify", help="Проверить набор меток на беспрефиксность")
    v.add_argument("-a", "--alphabet", default=DEFAULT_ALPHABET)
    v.add_argument("-l", "--labels", nargs="+", required=True)
    v.set_defaults(func=main.verify_labels)

    return parser

# =================================================================================================================

def read_items_file(path: str) -> list:
    """Читает строки name=freq из файла, пропуская пустые строки и комментарии #."""
    tokens = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            tokens.append(line)
    return tokens
