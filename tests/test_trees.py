from collections import deque

import pytest

from algokit.nodes import Node, TreeNode
from algokit.trees import (
    build_tree,
    build_tree_from_postorder,
    connect,
    count_nodes,
    flatten,
    flip_tree,
    has_path_sum,
    invert_tree,
    is_same_tree,
    is_symmetric,
    lowest_common_ancestor,
    max_depth,
    sorted_array_to_bst,
    sum_numbers,
)


def _tree(values, cls=TreeNode):
    if not values or values[0] is None:
        return None
    items = iter(values[1:])
    root = cls(values[0])
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for attr in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = cls(value)
                setattr(node, attr, child)
                queue.append(child)
    return root


def _nodes(root):
    if root is None:
        return
    yield root
    yield from _nodes(root.left)
    yield from _nodes(root.right)


def _preorder(root):
    return [node.val for node in _nodes(root)]


def _inorder(root):
    if root is None:
        return []
    return _inorder(root.left) + [root.val] + _inorder(root.right)


def _postorder(root):
    if root is None:
        return []
    return _postorder(root.left) + _postorder(root.right) + [root.val]


def _find(root, value):
    return next(node for node in _nodes(root) if node.val == value)


def test_build_tree_round_trip():
    preorder = [3, 9, 20, 15, 7]
    inorder = [9, 3, 15, 20, 7]
    root = build_tree(preorder, inorder)
    assert _preorder(root) == preorder
    assert _inorder(root) == inorder


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_tree_rejects_missing_root():
    with pytest.raises(ValueError):
        build_tree([1, 2], [2, 3])


def test_build_tree_from_postorder_round_trip():
    inorder = [9, 3, 15, 20, 7]
    postorder = [9, 15, 7, 20, 3]
    root = build_tree_from_postorder(inorder, postorder)
    assert _inorder(root) == inorder
    assert _postorder(root) == postorder


def test_build_tree_from_postorder_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        build_tree_from_postorder([1], [])


def test_connect_links_levels():
    root = _tree([1, 2, 3, 4, 5, None, 7], cls=Node)
    assert connect(root) is root
    n2, n3 = _find(root, 2), _find(root, 3)
    n4, n5, n7 = _find(root, 4), _find(root, 5), _find(root, 7)
    assert root.next is None
    assert n2.next is n3 and n3.next is None
    assert n4.next is n5 and n5.next is n7 and n7.next is None


def test_connect_empty():
    assert connect(None) is None


@pytest.mark.parametrize("size", range(0, 16))
def test_count_nodes_complete_trees(size):
    assert count_nodes(_tree(list(range(size)))) == size


def test_flatten_makes_preorder_chain():
    root = _tree([1, 2, 5, 3, 4, None, 6])
    before = _preorder(root)
    flatten(root)
    chain = []
    node = root
    while node is not None:
        assert node.left is None
        chain.append(node.val)
        node = node.right
    assert chain == before


@pytest.mark.parametrize("mirror", [flip_tree, invert_tree])
def test_mirror_reverses_inorder(mirror):
    root = _tree([4, 2, 7, 1, 3, 6, 9])
    expected = list(reversed(_inorder(root)))
    assert mirror(root) is root
    assert _inorder(root) == expected


@pytest.mark.parametrize("mirror", [flip_tree, invert_tree])
def test_mirror_twice_restores_tree(mirror):
    values = [1, 2, 3, None, 4, 5]
    root = mirror(mirror(_tree(values)))
    assert is_same_tree(root, _tree(values))


def test_has_path_sum():
    root = _tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1])
    assert has_path_sum(root, 5 + 4 + 11 + 2)
    assert has_path_sum(root, 5 + 8 + 4 + 1)
    assert not has_path_sum(root, 5)
    assert not has_path_sum(None, 0)


def test_is_same_tree():
    assert is_same_tree(_tree([1, 2, 3]), _tree([1, 2, 3]))
    assert not is_same_tree(_tree([1, 2]), _tree([1, None, 2]))
    assert not is_same_tree(_tree([1, 2, 1]), _tree([1, 1, 2]))
    assert is_same_tree(None, None)


def test_is_symmetric():
    assert is_symmetric(_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(_tree([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


def test_lowest_common_ancestor():
    root = _tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    five, one, four = _find(root, 5), _find(root, 1), _find(root, 4)
    assert lowest_common_ancestor(root, five, one) is root
    assert lowest_common_ancestor(root, five, four) is five
    assert lowest_common_ancestor(None, five, one) is None


def test_max_depth():
    assert max_depth(_tree([3, 9, 20, None, None, 15, 7])) == 3
    assert max_depth(None) == 0
    chain = build_tree([1, 2, 3, 4], [4, 3, 2, 1])
    assert max_depth(chain) == len([1, 2, 3, 4])


@pytest.mark.parametrize("nums", [[], [1], [-10, -3, 0, 5, 9], list(range(20))])
def test_sorted_array_to_bst(nums):
    root = sorted_array_to_bst(nums)
    assert _inorder(root) == nums
    for node in _nodes(root):
        assert abs(max_depth(node.left) - max_depth(node.right)) <= 1
    if nums:
        assert root.val == nums[len(nums) // 2]


def test_sum_numbers():
    assert sum_numbers(_tree([1, 2, 3])) == 25
    assert sum_numbers(_tree([7])) == 7
    assert sum_numbers(None) == 0