from .errors import EmptyKeyError, InvalidKeyError, TrieError
from .node import Node
from .printer import format_tree
from .tst import TernarySearchTrie, Trie

__version__ = "0.1.0"

__all__ = ["EmptyKeyError", "InvalidKeyError", "Node", "TernarySearchTrie",
           "Trie", "TrieError", "format_tree"]
