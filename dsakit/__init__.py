"""Classic data structures and algorithms: arrays, matrices, stacks and queues,
linked lists, sorting, searching, trees, graphs, dynamic programming,
backtracking, tries, an LRU cache, range-sum trees and string search."""

__version__ = "0.1.0"