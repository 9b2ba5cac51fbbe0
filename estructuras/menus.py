"""Interactive text menus for a stack, a binary search tree and an AVL tree."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Deque, Optional, Sequence, TextIO

from estructuras.avl import AVLTree
from estructuras.bst import BinarySearchTree
from estructuras.stack_queue import Stack

INSERTED = "Value inserted"
INSERT_FAILED = "Error inserting the new value"
REMOVED = "Value removed"
REMOVE_FAILED = "Error removing the value"
INVALID_OPTION = "Invalid option"
INVALID_NUMBER = "Invalid input. Enter an integer."
POP_FAILED = "Could not remove the top"
TOP_VALUE = "The value on top is: {}"
NO_TOP = "There is no item"
STACK_EMPTY = "The stack is empty"
STACK_NOT_EMPTY = "The stack is not empty"
CURRENT_STACK = "Current stack:"
ASK_INSERT = "Value to insert: "
ASK_REMOVE = "Value to remove: "

STACK_EXIT = 6
TREE_EXIT = 0

_STACK_MENU = "\n".join(
    [
        "Choose an option:",
        "1) Push",
        "2) Pop",
        "3) Top",
        "4) Is empty",
        "6) Exit",
    ]
)

_TREE_MENU = "\n".join(
    [
        "Choose an option:",
        "1) Insert value",
        "2) Print in order",
        "3) Print pre order",
        "4) Print post order",
        "5) Delete everything",
        "",
        "0) Exit",
    ]
)

_AVL_MENU = "\n".join(
    [
        "Choose an option:",
        "1) Insert value",
        "2) Print in order",
        "3) Print pre order",
        "4) Print post order",
        "5) Delete everything",
        "6) Delete value",
        "7) Print breadth first",
        "8) Print by heights",
        "0) Exit",
    ]
)


class _Input:
    """Reads whitespace-separated integers; a bad token discards its line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Deque[str] = deque()

    def read_int(self) -> Optional[int]:
        """The next integer, None for a malformed token; EOFError at the end."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        token = self._pending.popleft()
        try:
            return int(token)
        except ValueError:
            self._pending.clear()
            return None


def _values(values) -> str:
    return " ".join(str(value) for value in values)


def run_stack_menu(stdin: TextIO, stdout: TextIO) -> None:
    """Drive a stack of integers from commands read on ``stdin``."""
    source = _Input(stdin)
    stack: Stack[int] = Stack()
    try:
        while True:
            if not stack.is_empty():
                print(f"\n{CURRENT_STACK}", file=stdout)
                print(stack, file=stdout)
            print(_STACK_MENU, file=stdout)
            option = source.read_int()
            if option == 1:
                print(ASK_INSERT, end="", file=stdout)
                value = source.read_int()
                if value is None:
                    print(INVALID_NUMBER, file=stdout)
                else:
                    stack.push(value)
                    print(INSERTED, file=stdout)
            elif option == 2:
                try:
                    stack.pop()
                except IndexError:
                    print(POP_FAILED, file=stdout)
            elif option == 3:
                try:
                    print(TOP_VALUE.format(stack.peek()), file=stdout)
                except IndexError:
                    print(NO_TOP, file=stdout)
            elif option == 4:
                print(STACK_EMPTY if stack.is_empty() else STACK_NOT_EMPTY, file=stdout)
            elif option == STACK_EXIT:
                return
            else:
                print(INVALID_OPTION, file=stdout)
    except EOFError:
        return


def _insert(tree, source: _Input, stdout: TextIO) -> bool:
    """Ask for a value and insert it; False when the input was not a number."""
    print(ASK_INSERT, end="", file=stdout)
    value = source.read_int()
    if value is None:
        return False
    print(INSERTED if tree.insert(value) else INSERT_FAILED, file=stdout)
    return True


def _print_traversal(tree, option: int, stdout: TextIO) -> bool:
    traversals = {2: tree.in_order, 3: tree.pre_order, 4: tree.post_order}
    if option in traversals:
        print(_values(traversals[option]()), file=stdout)
        return True
    if option == 5:
        tree.clear()
        return True
    return False


def run_tree_menu(stdin: TextIO, stdout: TextIO) -> None:
    """Drive a binary search tree of integers from commands read on ``stdin``."""
    source = _Input(stdin)
    tree: BinarySearchTree[int] = BinarySearchTree()
    try:
        while True:
            print(_TREE_MENU, file=stdout)
            option = source.read_int()
            if option == 1:
                _insert(tree, source, stdout)
            elif option == TREE_EXIT:
                return
            elif option is None or not _print_traversal(tree, option, stdout):
                print(INVALID_OPTION, file=stdout)
            print(file=stdout)
    except EOFError:
        return


def run_avl_menu(stdin: TextIO, stdout: TextIO) -> None:
    """Drive an AVL tree of integers from commands read on ``stdin``."""
    source = _Input(stdin)
    tree: AVLTree[int] = AVLTree()
    try:
        while True:
            print(_AVL_MENU, file=stdout)
            option = source.read_int()
            if option == 1:
                _insert(tree, source, stdout)
            elif option == 6:
                print(ASK_REMOVE, end="", file=stdout)
                value = source.read_int()
                if value is not None:
                    try:
                        tree.remove(value)
                    except KeyError:
                        print(REMOVE_FAILED, file=stdout)
                    else:
                        print(REMOVED, file=stdout)
            elif option == 7:
                print(_values(tree.breadth_first()), file=stdout)
            elif option == 8:
                for value, height, depth in tree.by_height():
                    print(f"{'    ' * depth}{value}({height})", file=stdout)
            elif option == TREE_EXIT:
                return
            elif option is None or not _print_traversal(tree, option, stdout):
                print(INVALID_OPTION, file=stdout)
            print(file=stdout)
    except EOFError:
        return


_MENUS = {"stack": run_stack_menu, "tree": run_tree_menu, "avl": run_avl_menu}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run an interactive data structure menu.")
    parser.add_argument("menu", nargs="?", choices=sorted(_MENUS), default="avl")
    args = parser.parse_args(argv)
    _MENUS[args.menu](sys.stdin, sys.stdout)
    return 0