"""Interactive menu for working with a left-leaning red-black tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from llrbtree.prompt import EndOfInput, read_uint
from llrbtree.render import save_tree_png
from llrbtree.timing import RESULT_FILES, run_timing
from llrbtree.tree import Color, Tree, TreeLoadError, load_tree_from_text_file

EXIT_OK = 0
EXIT_EOF = 4
EXIT_CHOICE = 10
PNG_NAME = "llrb.png"

MENU = (
    "\n--- LLRB Tree Operations ---\n"
    "1. Insert element\n"
    "2. Remove element\n"
    "3. Search element\n"
    "4. Find lower bound\n"
    "5. Inorder traversal not in range\n"
    "6. Save tree visualization (PNG)\n"
    "7. Print tree\n"
    "8. Load tree from txt file\n"
    "9. Timing tree\n"
    "10. Exit\n"
    "Enter your choice: "
)


def print_menu(out: TextIO | None = None) -> None:
    """Write the menu and the choice prompt."""
    out = sys.stdout if out is None else out
    out.write(MENU)
    out.flush()


def _as_int(value: int) -> int:
    return value - 2**32 if value >= 2**31 else value


class Shell:
    """Menu loop over one tree, reading from stdin and writing to stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.tree = Tree()

    def run(self) -> int:
        """Serve menu choices until exit or end of input; return the exit code."""
        handlers: dict[int, Callable[[], None]] = {
            1: self._insert,
            2: self._remove,
            3: self._search,
            4: self._lower_bound,
            5: self._inorder,
            6: self._save_png,
            7: self._print_tree,
            8: self._load,
            9: self._timing,
        }
        while True:
            print_menu(self.stdout)
            try:
                choice = _as_int(read_uint("", self.stdin, self.stdout))
            except EndOfInput:
                self._write("Bue\n")
                return EXIT_EOF
            if choice == EXIT_CHOICE:
                self._write("Exiting program...\n")
                return EXIT_OK
            handler = handlers.get(choice)
            if handler is None:
                self._write("Invalid choice. Please try again.\n")
                continue
            try:
                handler()
            except EndOfInput:
                return EXIT_EOF

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self, prompt: str) -> str | None:
        self._write(prompt)
        line = self.stdin.readline()
        if line == "":
            return None
        return line[:-1] if line.endswith("\n") else line

    def _read_key(self, prompt: str) -> int:
        return _as_int(read_uint(prompt, self.stdin, self.stdout))

    def _insert(self) -> None:
        key = self._read_key("Введите ключ который нужно вставить: ")
        value = self._readline("Input elem value to insert: ")
        if value is None:
            raise EndOfInput("no value")
        self.tree.insert(key, value)

    def _remove(self) -> None:
        key = self._read_key("Введите ключ который нужно удалить: ")
        if self.tree.delete(key):
            self._write("Delete node\n")
        else:
            self._write("No element\n")

    def _search(self) -> None:
        key = self._read_key("Введите ключ по которому будем искать: ")
        node = self.tree.search(key)
        if node is None:
            self._write("Ничего не найдено\n")
        else:
            self._write(f"Найден элемент. Key: {node.key}, value: {node.value}\n")

    def _lower_bound(self) -> None:
        key = self._read_key(
            "Введите ключь по которому нужно будет найти верхнюю границу: "
        )
        node = self.tree.lower_bound(key)
        if node is None:
            self._write("Ничего не нашлось\n")
            return
        color = "red" if node.color is Color.RED else "blak"
        self._write(
            f"Нашли элемент. ключь: {node.key}, значение: {node.value}, цвет: {color}\n"
        )

    def _inorder(self) -> None:
        self._write(self.tree.format_inorder())

    def _save_png(self) -> None:
        save_tree_png(self.tree, PNG_NAME)
        self._write(f"Tree visualization saved as '{PNG_NAME}'\n")

    def _print_tree(self) -> None:
        self._write(self.tree.format())

    def _load(self) -> None:
        filename = self._readline("Input filename: ")
        if filename is None:
            self._write("Memory allocation failed\n")
            return
        try:
            tree = load_tree_from_text_file(filename)
        except TreeLoadError as exc:
            self._write(f"Error: {exc}\n")
            self._write("Error loading tree from file\n")
            return
        self.tree = tree
        self._write("Tree successfully loaded from file\n")

    def _timing(self) -> None:
        self._write("Timing...\n")
        try:
            run_timing(Path.cwd())
        except OSError:
            self._write("Failed to open output files\n")
            return
        self._write("Timing completed. Results saved to:\n")
        self._write("".join(f"- {name}\n" for name in RESULT_FILES))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive tree menu."""
    parser = argparse.ArgumentParser(
        prog="llrbtree",
        description="Interactive left-leaning red-black tree.",
    )
    parser.parse_args(argv)
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())