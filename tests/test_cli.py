#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit-тесты для командной строки.

Запуск:
    python -m unittest -v test_cli.py
или (если запускаешь директорию tests/):
    python -m unittest discover -v

Тесты:
- label: метки для элементов из аргументов и из файла, сортировка и статистика.
- example: пример из набора слов с алфавитом asdf.
- bench: замер на маленьком наборе.
- verify: беспрефиксный и конфликтный наборы меток.
"""

from __future__ import annotations

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import io
import tempfile
import unittest
from contextlib import redirect_stdout

import cli
import main


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = main.main(list(argv))
    return code, out.getvalue()


class TestLabelCommand(unittest.TestCase):
    """Проверка команды label."""

    def test_items_from_args(self):
        code, out = run("label", "-a", "abcd", "-i", "x=50", "y=25", "z=12", "w=6")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["x: d", "y: c", "z: b", "w: a"])

    def test_items_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "items.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("# words\n\np=5\nq=4\n")
            code, out = run("label", "-a", "abcd", "-i", "r=3", "s=2", "t=1", "-f", path)

        self.assertEqual(code, 0)
        # порядок: сначала -i, затем строки файла
        self.assertEqual(out.splitlines(), ["r: a", "s: bb", "t: ba", "p: d", "q: c"])

    def test_sort_and_stats(self):
        code, out = run("label", "-a", "abcd", "-i", "a=5", "b=4", "c=3", "d=2", "e=1",
                        "--sort", "--stats")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[:5], ["c: a", "b: c", "a: d", "e: ba", "d: bb"])
        self.assertIn("=== Statistics ===", out)
        self.assertIn("max length:       2", out)

    def test_bad_input(self):
        code, out = run("label", "-a", "a", "-i", "x=1")
        self.assertEqual(code, 1)
        self.assertIn("[ERROR]", out)

        code, out = run("label", "-i", "x=abc")
        self.assertEqual(code, 1)
        self.assertIn("[ERROR]", out)

        code, out = run("label", "-f", os.path.join(tempfile.gettempdir(), "no-such-items.txt"))
        self.assertEqual(code, 1)

    def test_read_items_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "items.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("  a=1  \n#b=2\n\nc:3\n")
            self.assertEqual(cli.read_items_file(path), ["a=1", "c:3"])


class TestOtherCommands(unittest.TestCase):
    """Проверка команд example, bench, verify."""

    def test_example(self):
        code, out = run("example")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "parameter: sa")
        self.assertEqual(lines[-2:], ["value: a", "type: f"])

    def test_bench(self):
        code, out = run("bench", "--bases", "2", "4", "--items", "1", "10", "--repeat", "2", "--seed", "1")
        self.assertEqual(code, 0)
        self.assertIn("[bench] base=4/numItems=10", out)

        code, out = run("bench", "--bases", "1")
        self.assertEqual(code, 1)

    def test_verify(self):
        code, out = run("verify", "-a", "ab", "-l", "aa", "bbb", "ba", "bba", "ab")
        self.assertEqual(code, 0)
        self.assertIn("Prefix-free: True", out)

        code, out = run("verify", "-a", "ab", "-l", "a", "ab")
        self.assertEqual(code, 1)
        self.assertIn("'a' is a prefix of 'ab'", out)

        code, out = run("verify", "-a", "ab", "-l", "ac")
        self.assertEqual(code, 1)

    def test_no_command(self):
        code, out = run()
        self.assertEqual(code, 0)
        self.assertIn("usage", out)


if __name__ == "__main__":
    unittest.main(verbosity=2)
