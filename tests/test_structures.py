import pytest

from algokit.structures import (
    ListNode,
    TreeNode,
    add_one_row,
    build_linked_list,
    detect_loop,
    inorder,
    insert_level_order,
    list_values,
    postorder,
    preorder,
    reverse_list,
)


def _source_tree():
    root = TreeNode(10)
    root.left = TreeNode(11)
    root.left.left = TreeNode(7)
    root.right = TreeNode(9)
    root.right.left = TreeNode(15)
    root.right.right = TreeNode(8)
    return root


def _build(values):
    root = None
    for value in values:
        root = insert_level_order(root, value)
    return root


def test_insert_fills_first_free_slot():
    root = _source_tree()
    assert insert_level_order(root, 12) is root
    assert root.left.right.value == 12
    assert inorder(root) == [7, 11, 12, 10, 15, 9, 8]


def test_insert_into_empty_tree():
    root = insert_level_order(None, 5)
    assert preorder(root) == [5]


def test_traversals_share_values_and_root_positions():
    values = list(range(1, 16))
    root = _build(values)
    for traversal in (inorder, preorder, postorder):
        assert sorted(traversal(root)) == values
    assert preorder(root)[0] == root.value
    assert postorder(root)[-1] == root.value


def test_level_order_insertion_places_children_by_index():
    values = list(range(1, 8))
    root = _build(values)
    assert [root.left.value, root.right.value] == values[1:3]
    assert [root.left.left.value, root.left.right.value] == values[3:5]
    assert [root.right.left.value, root.right.right.value] == values[5:7]


def test_traversals_of_empty_tree():
    assert inorder(None) == preorder(None) == postorder(None) == []


def test_add_one_row_at_root():
    root = _source_tree()
    new_root = add_one_row(root, 1, 1)
    assert new_root.value == 1
    assert new_root.left is root
    assert new_root.right is None


def test_add_one_row_deeper():
    root = _source_tree()
    old_left, old_right = root.left, root.right
    result = add_one_row(root, 4, 2)
    assert result is root
    assert root.left.value == 4 and root.right.value == 4
    assert root.left.left is old_left and root.left.right is None
    assert root.right.right is old_right and root.right.left is None


def test_add_one_row_below_leaves():
    root = _build([1, 2, 3])
    add_one_row(root, 0, 3)
    assert sorted(preorder(root)) == [0, 0, 0, 0, 1, 2, 3]


def test_add_one_row_rejects_zero_depth():
    with pytest.raises(ValueError):
        add_one_row(_source_tree(), 1, 0)


def test_build_without_loop_roundtrips():
    values = [1, 2, 3, 4]
    head = build_linked_list(values, 0)
    assert list_values(head) == values
    assert detect_loop(head) is False


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_build_with_loop_is_detected(position):
    head = build_linked_list([1, 2, 3, 4], position)
    assert detect_loop(head) is True
    with pytest.raises(ValueError):
        list_values(head)


def test_build_rejects_bad_input():
    with pytest.raises(ValueError):
        build_linked_list([], 0)
    with pytest.raises(ValueError):
        build_linked_list([1, 2], 3)


def test_detect_loop_single_node():
    node = ListNode(1)
    assert detect_loop(node) is False
    node.next = node
    assert detect_loop(node) is True


def test_reverse_list():
    values = [1, 2, 3, 4]
    head = reverse_list(build_linked_list(values))
    assert list_values(head) == list(reversed(values))


def test_reverse_empty_list():
    assert reverse_list(None) is None