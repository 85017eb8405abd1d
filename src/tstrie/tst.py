import logging
import warnings

from .errors import validate_key, validate_type
from .node import Node
from .printer import format_tree

logger = logging.getLogger(__name__)


class TernarySearchTrie():
    """Ternary search trie mapping strings to arbitrary values.

    Keys are stored one code point per node, so characters outside
    the basic multilingual plane (e.g. emoji) take up a single node.
    Besides exact lookups, the trie answers prefix queries.

    Notes
    -----
    None marks nodes without a value and can therefore not be stored.
    The trie is not thread-safe, concurrent mutation requires
    external locking.
    """

    def __init__(self, items=None):
        """Initializes TST.

        Parameters
        ----------
        items : mapping or iterable of (str, object)-tuples
            Key-value pairs to insert right away.
        """
        self._root = None
        self._count = 0

        if items is not None:
            if hasattr(items, "items"):
                items = items.items()
            for key, value in items:
                self.set(key, value)

    @property
    def root(self):
        return self._root

    @property
    def size(self):
        """Number of keys stored in the trie."""
        return self._count

    @property
    def is_empty(self):
        return self._count == 0

    def set(self, key, value):
        """Associate value with key.

        Parameters
        ----------
        key : str
            Non-empty key.
        value : object
            Value to store. Setting None removes the key.

        Returns
        -------
        TernarySearchTrie
            The trie itself, so calls can be chained.
        """
        validate_key(key, "set")

        if value is None:
            warnings.warn(f"None can not be stored, removing {key!r} "
                          "instead")
            return self.delete(key)

        self._insert(key, value)
        return self

    def get(self, key):
        """Return value stored for key, None if key is not present.

        Parameters
        ----------
        key : str
            Non-empty key.
        """
        validate_key(key, "get")

        node = self._search(key, self._root)

        if node is None:
            return None

        return node.value

    def delete(self, key):
        """Remove key from trie. Absent keys are ignored.

        Parameters
        ----------
        key : str
            Key to remove.

        Returns
        -------
        TernarySearchTrie
            The trie itself, so calls can be chained.
        """
        validate_type(key, "delete")
        self._remove(key)
        return self

    def contains(self, key):
        """Whether key is among the keys stored in the trie.

        Notes
        -----
        Scans all keys. Use get for a lookup that only follows
        the path of key.
        """
        return key in self.keys()

    def keys(self):
        """Return list of all keys, in depth-first order.

        Notes
        -----
        Keys are not sorted across subtrees, sort them if
        lexicographic order is needed.
        """
        return [key for key, _ in self._items("")]

    def keys_with_prefix(self, prefix):
        """Return list of all keys that start with prefix.

        Parameters
        ----------
        prefix : str
            String that all keys returned begin with. A stored key
            equal to prefix is included.
        """
        validate_type(prefix, "keys_with_prefix")
        return [key for key, _ in self._items(prefix)]

    def search_with_prefix(self, prefix, callback):
        """Call callback with key and value of all keys starting with prefix.

        Parameters
        ----------
        prefix : str
            String that all keys passed to callback begin with.
        callback : callable
            Called as callback(key, value) once per match.
        """
        validate_type(prefix, "search_with_prefix")
        for key, value in self._items(prefix):
            callback(key, value)

    def items(self, prefix=""):
        """Return (key, value)-pairs for all keys starting with prefix.

        Parameters
        ----------
        prefix : str
            Empty (default) for all keys.

        Returns
        -------
        Generator
            Yield (str, object)-tuples in depth-first order.
        """
        validate_type(prefix, "items")
        return self._items(prefix)

    def dfs(self, callback):
        """Visit every node depth-first: node, left, middle, right.

        Parameters
        ----------
        callback : callable
            Called as callback(key, value) for each node. Key is the
            node's single character, value is None for nodes that
            don't end a stored key.
        """
        self._dfs(self._root, callback)

    def to_string(self, show_values=False):
        """Render the node structure as an indented tree.

        Parameters
        ----------
        show_values : bool
            Append values to the nodes that end a key.
        """
        return format_tree(self._root, show_values=show_values)

    def _insert(self, key, value):
        """Insert key, creating missing nodes along its path.

        Tree depth is not bounded by key length, so the walk is a loop.
        """
        if self._root is None:
            self._root = Node(key[0])

        node = self._root
        pos = 0

        while True:
            char = key[pos]

            if char == node.key:
                pos += 1
                if pos == len(key):
                    break
                if node.middle is None:
                    node.middle = Node(key[pos])
                    node.middle.parent = node
                node = node.middle

            elif char < node.key:
                if node.left is None:
                    node.left = Node(char)
                    node.left.parent = node
                node = node.left

            else:
                if node.right is None:
                    node.right = Node(char)
                    node.right.parent = node
                node = node.right

        if node.value is None:
            self._count += 1
        node.value = value

    def _search(self, key, node):
        """Return node that key ends in.
        """
        pos = 0

        while node is not None and pos < len(key):
            char = key[pos]

            if char == node.key:
                pos += 1
                if pos == len(key):
                    return node
                node = node.middle

            elif char < node.key:
                node = node.left

            else:
                node = node.right

        return None

    def _items(self, prefix):
        """Generator yielding all (key, value)-pairs below prefix.
        """
        if not prefix:
            for item in self._completions(self._root, ""):
                yield item
            return

        prefix_node = self._search(prefix, self._root)

        if prefix_node is None:
            return

        if prefix_node.value is not None:
            yield prefix, prefix_node.value

        for item in self._completions(prefix_node.middle, prefix):
            yield item

    def _completions(self, node, prefix):
        """Generator yielding completions starting from node.
        """
        stack = [(node, prefix)]

        while stack:
            node, prefix = stack.pop()
            if node is None:
                continue

            if node.value is not None:
                yield prefix + node.key, node.value

            # pushed in reverse so left is visited first
            stack.append((node.right, prefix))
            stack.append((node.middle, prefix + node.key))
            stack.append((node.left, prefix))

    def _dfs(self, node, callback):
        stack = [node]

        while stack:
            node = stack.pop()
            if node is None:
                continue

            callback(node.key, node.value)

            stack.append(node.right)
            stack.append(node.middle)
            stack.append(node.left)

    def _remove(self, key):
        """Remove key, return whether it was present.
        """
        node = self._search(key, self._root)

        if node is None or node.value is None:
            logger.debug("Key %r not in trie, nothing to delete", key)
            return False

        node.value = None
        self._count -= 1
        self._prune(node)
        return True

    def _prune(self, node):
        """Unlink node if it neither ends a key nor leads to one.

        Removing a leaf can leave its parent without purpose, so
        pruning continues upwards from there.
        """
        while node is not None and node.is_leaf and not node.has_value:
            parent = node.parent
            self._replace(node, None)
            logger.debug("Unlinked leaf node %r", node.key)
            node = parent

        if node is None or node.has_value or node.middle is not None:
            return

        if node.left is None:
            self._replace(node, node.right)

        elif node.right is None:
            self._replace(node, node.left)

        else:
            self._replace(node, self._adopt_predecessor(node))

    def _adopt_predecessor(self, node):
        """Prepare rightmost node of node's left subtree to take its place.

        The predecessor is detached from where it is, its own left
        subtree moving up into the gap, and takes over node's left
        and right subtrees.
        """
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right

        if predecessor is not node.left:
            former_parent = predecessor.parent
            former_parent.right = predecessor.left
            if predecessor.left is not None:
                predecessor.left.parent = former_parent

            predecessor.left = node.left
            node.left.parent = predecessor

        predecessor.right = node.right
        node.right.parent = predecessor

        node.left = None
        node.right = None

        logger.debug("Replacing node %r with predecessor %r",
                     node.key, predecessor.key)
        return predecessor

    def _replace(self, node, child):
        """Put child into the slot node occupies in its parent.
        """
        parent = node.parent

        if child is not None:
            child.parent = parent

        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        elif parent.middle is node:
            parent.middle = child
        else:
            parent.right = child

        node.parent = None

    def __contains__(self, key):
        """Adds "key in TST" syntactic sugar.
        """
        return self.contains(key)

    def __len__(self):
        return self._count

    def __iter__(self):
        for key, _ in self._items(""):
            yield key

    def __getitem__(self, key):
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        validate_type(key, "delete")
        if not self._remove(key):
            raise KeyError(key)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{type(self).__name__}({dict(self._items(''))!r})"


Trie = TernarySearchTrie
