import weakref


class Node():
    """Single character of a ternary search trie.

    Attributes
    ----------
    key : str
        Exactly one code point.
    value : object
        Payload of the key ending in this node, None for nodes
        that only carry a path to longer keys.
    left, middle, right : Node
        Subtrees with smaller, continuing and greater characters.
    parent : Node
        Node this one hangs from, None at the root. Held as a weak
        reference so the tree stays owned top-down.
    """
    __slots__ = ("key", "value", "left", "middle", "right",
                 "_parent", "__weakref__")

    def __init__(self, key):
        self.key = key
        self.value = None

        self.left = None
        self.middle = None
        self.right = None
        self._parent = None

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = None if node is None else weakref.ref(node)

    @property
    def has_value(self):
        return self.value is not None

    @property
    def has_children(self):
        return (self.left is not None
                or self.middle is not None
                or self.right is not None)

    @property
    def is_leaf(self):
        return not self.has_children

    def children(self):
        """Yield (relation, child) pairs in left, middle, right order.

        Relation is one of "<", "=" and ">".
        """
        for relation, child in (("<", self.left),
                                ("=", self.middle),
                                (">", self.right)):
            if child is not None:
                yield relation, child

    def __repr__(self):
        return f"Node({self.key!r}, {self.value!r})"
