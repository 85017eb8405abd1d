from tstrie import TernarySearchTrie, format_tree
from tstrie.printer import iter_lines


def make_trie():
    trie = TernarySearchTrie()
    for word in ["foo", "汉字", "!"]:
        trie.set(word, word)
    return trie


def test_format_tree():
    expected = ("f\n"
                "├─ < !\n"
                "├─ = o\n"
                "│  └─ = o\n"
                "└─ > 汉\n"
                "   └─ = 字\n")
    assert format_tree(make_trie().root) == expected


def test_format_tree_with_values():
    expected = ("f\n"
                "├─ < !: !\n"
                "├─ = o\n"
                "│  └─ = o: foo\n"
                "└─ > 汉\n"
                "   └─ = 字: 汉字\n")
    trie = make_trie()
    assert format_tree(trie.root, show_values=True) == expected
    assert trie.to_string(show_values=True) == expected


def test_str_of_trie():
    trie = make_trie()
    assert str(trie) == format_tree(trie.root)


def test_empty_tree():
    assert format_tree(None) == ""
    assert str(TernarySearchTrie()) == ""


def test_one_line_per_node():
    trie = make_trie()
    nodes = []
    trie.dfs(lambda key, value: nodes.append(key))
    lines = list(iter_lines(trie.root))
    assert len(lines) == len(nodes)
    assert [line[-1] for line in lines] == nodes


def test_printing_does_not_modify_trie():
    trie = make_trie()
    keys = trie.keys()
    trie.to_string(show_values=True)
    str(trie)
    assert trie.keys() == keys
    assert trie.size == 3
