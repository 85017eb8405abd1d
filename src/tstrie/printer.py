"""Render ternary search trie nodes as indented text.

Every node gets one line. Below the root, lines start with box drawing
characters and the relation of the node to its parent:

    f
    ├─ < !
    ├─ = o
    │  └─ = o
    └─ > 汉
       └─ = 字

"<" marks a left child, "=" a middle child and ">" a right child.
Nodes are only read, never modified.
"""

BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
SPACE = "   "


def iter_lines(root, show_values=False):
    """Yield lines of the tree below root.

    Parameters
    ----------
    root : Node
        Node to start from, nothing is yielded for None.
    show_values : bool
        Append ": value" to nodes that hold a value.

    Yields
    ------
    str
        One line per node, without line break.
    """
    if root is None:
        return

    yield _label(root, show_values)

    stack = _branches(root, "")

    while stack:
        indent, branch, relation, child = stack.pop()
        yield f"{indent}{branch}{relation} {_label(child, show_values)}"

        child_indent = indent + (SPACE if branch == LAST_BRANCH else PIPE)
        stack.extend(_branches(child, child_indent))


def format_tree(root, show_values=False):
    """Return the tree below root as a string, one node per line.
    """
    return "".join(line + "\n" for line in iter_lines(root, show_values))


def _branches(node, indent):
    """Return (indent, branch, relation, child)-tuples of node's children,
    last child first, ready to be pushed onto a stack.
    """
    children = list(node.children())
    branches = []

    for idx, (relation, child) in enumerate(children):
        branch = LAST_BRANCH if idx == len(children) - 1 else BRANCH
        branches.append((indent, branch, relation, child))

    branches.reverse()
    return branches


def _label(node, show_values):
    if show_values and node.value is not None:
        return f"{node.key}: {node.value}"
    return node.key
