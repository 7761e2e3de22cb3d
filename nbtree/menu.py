"""Interactive text menu for building and inspecting a non-binary tree."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Callable
from typing import TextIO

from nbtree.tree import DEFAULT_CAPACITY, NodeNotFoundError, NonBinaryTree, TreeError

CLEAR = "\x1b[H\x1b[J"
PAUSE = "\nTekan Enter untuk kembali ke menu..."
MENU = (
    " ===== Non Binary Tree =====\n"
    "1. Membuat Tree Baru\n"
    "2. Traversal Pre Order\n"
    "3. Traversal In Order\n"
    "4. Traversal Post Order\n"
    "5. Traversal Level Order\n"
    "6. Print Tree\n"
    "7. Jumlah Daun Tree\n"
    "8. Search Node Tree\n"
    "9. Mencari level node Tree\n"
    "10. Kedalaman tree\n"
    "11. Membandingkan 2 node Tree\n"
    "12. Exit\n"
    "Pilih Menu: "
)
EXIT_CHOICE = 12


class _Scanner:
    """Reads whitespace-separated characters and integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushed = ""

    def _getc(self) -> str:
        if self._pushed:
            char, self._pushed = self._pushed, ""
            return char
        return self._stream.read(1)

    def _skip_space(self) -> str:
        char = self._getc()
        while char and char.isspace():
            char = self._getc()
        return char

    def read_char(self) -> str:
        char = self._skip_space()
        if not char:
            raise EOFError("unexpected end of input")
        return char

    def read_int(self) -> int:
        char = self._skip_space()
        if not char:
            raise EOFError("unexpected end of input")
        text = ""
        if char in "+-":
            text, char = char, self._getc()
        while char and char in string.digits:
            text += char
            char = self._getc()
        self._pushed = char
        if text in ("", "+", "-"):
            raise ValueError("expected an integer")
        return int(text)

    def read_line(self) -> str:
        chars = []
        char = self._getc()
        while char and char != "\n":
            chars.append(char)
            char = self._getc()
        return "".join(chars)


def _scanner(stdin: TextIO | _Scanner) -> _Scanner:
    return stdin if isinstance(stdin, _Scanner) else _Scanner(stdin)


def read_tree(node_count: int, stdin: TextIO, stdout: TextIO) -> NonBinaryTree:
    """Prompt for a tree of ``node_count`` nodes, entered level by level."""
    if node_count < 0:
        raise ValueError("node count must not be negative")
    capacity = DEFAULT_CAPACITY
    tree = NonBinaryTree(capacity)
    if node_count == 0:
        return tree
    if node_count > capacity:
        raise TreeError(f"a tree holds at most {capacity} nodes")
    reader = _scanner(stdin)
    stdout.write("Masukkan info untuk root : ")
    infos = [reader.read_char()]
    tree.set_root(infos[0])
    parent = 0
    while len(tree) != node_count:
        if parent >= len(infos):
            raise TreeError(f"every node has its children but the tree has only {len(tree)} nodes")
        stdout.write(f"Masukkan jumlah anak untuk {infos[parent]} : ")
        count = reader.read_int()
        if count < 0:
            raise ValueError("number of children must not be negative")
        if len(tree) + count > node_count:
            raise TreeError(f"{count} children would exceed the {node_count} nodes requested")
        children = []
        for number in range(1, count + 1):
            stdout.write(f"Masukkan anak ke {number} : ")
            children.append(reader.read_char())
        tree.add_children(parent, children)
        infos.extend(children)
        parent += 1
    return tree


def _sequence(values) -> str:
    return "".join(f"{value} " for value in values)


def _create(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> NonBinaryTree:
    out.write(CLEAR)
    out.write("Masukkan jumlah node pada tree: ")
    try:
        return read_tree(reader.read_int(), reader, out)  # type: ignore[arg-type]
    except (TreeError, ValueError) as error:
        out.write(f"\n{error}\n")
        out.write(PAUSE)
        reader.read_line()
        reader.read_line()
        return NonBinaryTree()


def _traversal(title: str, order: Callable[[NonBinaryTree], object], leading: str = "\n"):
    def show(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
        out.write(CLEAR)
        out.write("\n--- Traversal ---\n")
        out.write(f"{leading}{title}: {_sequence(order(tree))}")
        out.write(PAUSE)
        reader.read_line()

    return show


def _print_tree(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("\n--- Tree ---\n")
    out.write(tree.describe())
    out.write(f"\nJumlah elemen      : {len(tree)}\n")
    out.write(PAUSE)
    reader.read_line()


def _leaves(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("\n--- Informasi Tree ---\n")
    out.write(f"Jumlah daun        : {tree.leaf_count()}\n")
    out.write(PAUSE)
    reader.read_line()


def _search(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("Masukkan Node yang ingin dicari: ")
    wanted = reader.read_char()
    if wanted in tree:
        out.write(f"Node '{wanted}' ditemukan dalam tree.\n")
    else:
        out.write(f"Node '{wanted}' tidak ditemukan dalam tree.\n")
    out.write(PAUSE)
    reader.read_line()
    reader.read_line()


def _level(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("\nMasukkan karakter yang ingin dicari level-nya: ")
    wanted = reader.read_char()
    try:
        out.write(f"Level dari {wanted} adalah {tree.level(wanted)}\n")
    except NodeNotFoundError:
        out.write(f"Node {wanted} tidak ditemukan\n")
    out.write(PAUSE)
    reader.read_line()
    reader.read_line()


def _depth(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("\n--- Informasi Tree ---\n")
    out.write(f"Kedalaman (depth)  : {tree.depth()}\n")
    out.write(PAUSE)
    reader.read_line()


def _compare(reader: _Scanner, out: TextIO, tree: NonBinaryTree) -> None:
    out.write(CLEAR)
    out.write("Masukkan data pertama di tree: ")
    first = reader.read_char()
    out.write("Masukkan data kedua di tree: ")
    second = reader.read_char()
    try:
        greater = tree.max_of(first, second)
    except NodeNotFoundError:
        out.write("Data tidak ditemukan dalam tree!\n")
        out.write("Salah satu atau kedua data tidak ditemukan dalam tree.\n")
    else:
        out.write(f"Nilai maksimum dari '{first}' dan '{second}' adalah: '{greater}'\n")
    out.write(PAUSE)
    reader.read_line()
    reader.read_line()


_ACTIONS: dict[int, Callable[[_Scanner, TextIO, NonBinaryTree], NonBinaryTree | None]] = {
    1: _create,
    2: _traversal("Preorder     ", NonBinaryTree.preorder, leading=""),
    3: _traversal("Inorder      ", NonBinaryTree.inorder),
    4: _traversal("Postorder    ", NonBinaryTree.postorder),
    5: _traversal("Level Order  ", NonBinaryTree.level_order),
    6: _print_tree,
    7: _leaves,
    8: _search,
    9: _level,
    10: _depth,
    11: _compare,
}


def run_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the menu until the exit choice is made or input ends."""
    reader = _Scanner(sys.stdin if stdin is None else stdin)
    out = sys.stdout if stdout is None else stdout
    tree = NonBinaryTree()
    while True:
        out.write(CLEAR)
        out.write(MENU)
        try:
            choice = reader.read_int()
        except EOFError:
            return
        except ValueError:
            reader.read_line()
            out.write("Pilihan tidak valid.\n")
            continue
        reader.read_line()
        if choice == EXIT_CHOICE:
            out.write(CLEAR)
            out.write("Log Out.....\n")
            return
        action = _ACTIONS.get(choice)
        if action is None:
            out.write("Pilihan tidak valid.\n")
            continue
        try:
            result = action(reader, out, tree)
        except EOFError:
            return
        if result is not None:
            tree = result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nbtree", description="Build and inspect a non-binary tree from an interactive menu."
    )
    parser.parse_args(argv)
    run_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())