import pytest

from algolab.bst import BST


def _build(keys):
    tree = BST()
    for key in keys:
        tree.insert(key)
    return tree


def _check(tree):
    if tree.root is not None:
        assert tree.root.parent is None
    stack = [tree.root] if tree.root else []
    while stack:
        node = stack.pop()
        if node.left:
            assert node.left.key <= node.key
            assert node.left.parent is node
            stack.append(node.left)
        if node.right:
            assert node.right.key > node.key
            assert node.right.parent is node
            stack.append(node.right)


KEYS = [50, 30, 70, 20, 40, 60, 80, 30, 65]


def test_insert_keeps_order_and_size():
    tree = _build(KEYS)
    assert list(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)
    _check(tree)


def test_empty_tree():
    tree = BST()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == -1
    assert tree.format() == "()\n"
    assert tree.pretty_format() == ""


def test_search():
    tree = _build(KEYS)
    assert tree.search(60).key == 60
    assert tree.search(99) is None


def test_duplicates_go_left():
    tree = _build([5, 5])
    assert tree.root.left.key == 5
    assert tree.root.right is None


@pytest.mark.parametrize("victim", [20, 40, 60, 30, 50, 70, 80, 65])
def test_delete_any_node(victim):
    tree = _build(KEYS)
    tree.delete(tree.search(victim))
    expected = sorted(KEYS)
    expected.remove(victim)
    assert list(tree) == expected
    assert len(tree) == len(expected)
    _check(tree)


def test_delete_all_empties_tree():
    tree = _build(KEYS)
    for key in KEYS:
        tree.delete(tree.search(key))
        _check(tree)
    assert tree.is_empty()
    assert len(tree) == 0


def test_delete_none_raises():
    with pytest.raises(ValueError):
        BST().delete(None)


def test_height_of_chain_and_single():
    assert _build([1]).height() == 0
    chain = list(range(10))
    assert _build(chain).height() == len(chain) - 1


def test_deep_chain_does_not_overflow():
    chain = list(range(5000))
    tree = _build(chain)
    assert list(tree) == chain
    assert tree.height() == len(chain) - 1
    assert tree.format().count("(") == 2 * len(chain) + 1


def test_clear():
    tree = _build(KEYS)
    tree.clear()
    assert tree.is_empty()
    assert list(tree) == []


def test_format_single_and_small():
    assert _build([5]).format() == "(5 () ())\n"
    assert _build([2, 1, 3]).format() == "(2 (1 () ()) (3 () ()))\n"


def test_pretty_format():
    assert _build([2, 1, 3]).pretty_format() == "   3\n2\n   1\n"