"""Linked lists, stacks, queues, sorting, search trees and hash tables, with catalog and menu tools."""

__version__ = "0.1.0"