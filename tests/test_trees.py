import pytest

from algosuite.trees import (
    LinkedTreeNode,
    TreeNode,
    build_linked_tree,
    build_tree,
    connect,
    deepest_leaves_sum,
    inorder_traversal,
    is_same_tree,
    max_depth,
    postorder_traversal,
    preorder_traversal,
)

TREES = [
    [1, None, 2, 3],
    [3, 9, 20, None, None, 15, 7],
    [1, 2, 3, 4, 5, None, 6, 7, None, None, None, None, 8],
    [1],
    [5, 4, None, 3, None, 2, None, 1],
]


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            if value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
    return root


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def _levels(root):
    levels = []
    level = [root] if root is not None else []
    while level:
        levels.append(level)
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return levels


@pytest.mark.parametrize("values", [[], [None]])
def test_build_empty(values):
    assert build_tree(values) is None
    assert build_linked_tree(values) is None


def test_build_tree_layout():
    root = build_tree([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3


@pytest.mark.parametrize("values", [[50, 30, 70, 20, 40, 60, 80], [3, 1, 2], [1, 2, 3, 4], [8, 8, 3, 10]])
def test_inorder_of_bst_is_sorted(values):
    assert inorder_traversal(_bst(values)) == sorted(values)


@pytest.mark.parametrize("values", TREES)
def test_pre_and_post_are_mirror_reverses(values):
    root = build_tree(values)
    assert postorder_traversal(_mirror(root)) == preorder_traversal(root)[::-1]


@pytest.mark.parametrize("values", TREES)
def test_traversals_visit_every_node_once(values):
    root = build_tree(values)
    present = sorted(v for v in values if v is not None)
    assert sorted(preorder_traversal(root)) == present
    assert sorted(inorder_traversal(root)) == present
    assert sorted(postorder_traversal(root)) == present
    assert preorder_traversal(root)[0] == root.val
    assert postorder_traversal(root)[-1] == root.val


def test_traversals_of_empty_tree():
    assert preorder_traversal(None) == []
    assert inorder_traversal(None) == []
    assert postorder_traversal(None) == []


def test_left_chain_traversals():
    values = [1, 2, 3, 4]
    root = _chain(values)
    assert preorder_traversal(root) == values
    assert inorder_traversal(root) == values[::-1]


@pytest.mark.parametrize("values", TREES)
def test_same_tree_equal_copies(values):
    assert is_same_tree(build_tree(values), build_tree(values)) is True


@pytest.mark.parametrize(
    "a, b",
    [([1, 2], [1, None, 2]), ([1, 2, 1], [1, 1, 2]), ([1], []), ([10000], [10000, 10000])],
)
def test_different_trees(a, b):
    assert is_same_tree(build_tree(a), build_tree(b)) is False


def test_same_tree_both_empty():
    assert is_same_tree(None, None) is True


@pytest.mark.parametrize("n", [1, 2, 5, 50])
def test_max_depth_of_chain(n):
    assert max_depth(_chain(list(range(n)))) == n


def test_max_depth_empty():
    assert max_depth(None) == 0


def test_max_depth_matches_levels():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert max_depth(root) == len(_levels(root))


def test_deepest_leaves_sum_example():
    root = build_tree([1, 2, 3, 4, 5, None, 6, 7, None, None, None, None, 8])
    assert deepest_leaves_sum(root) == 15


def test_deepest_leaves_sum_complete_tree():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert deepest_leaves_sum(build_tree(values)) == sum(values[3:])


def test_deepest_leaves_sum_chain_and_single():
    values = [4, 8, 15, 16]
    assert deepest_leaves_sum(_chain(values)) == values[-1]
    assert deepest_leaves_sum(TreeNode(42)) == 42
    assert deepest_leaves_sum(None) == 0


@pytest.mark.parametrize("values", TREES + [[1, 2, 3, 4, 5, None, 7], [1, 2, 3, 4, None, None, 5]])
def test_connect_links_each_level(values):
    root = connect(build_linked_tree(values))
    for level in _levels(root):
        for node, neighbour in zip(level, level[1:]):
            assert node.next is neighbour
        assert level[-1].next is None


def test_connect_empty():
    assert connect(None) is None


def test_connect_returns_root():
    root = LinkedTreeNode(1, LinkedTreeNode(2), LinkedTreeNode(3))
    assert connect(root) is root
    assert root.left.next is root.right