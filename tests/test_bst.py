from algokit.bst import BinaryTree, TreeNode, height, is_balanced


def build_source_tree():
    tree = BinaryTree()
    for key in (10, 15, 13, 13, 13):
        tree.insert(key)
    return tree


def test_source_tree_counts_duplicates():
    tree = build_source_tree()
    assert len(tree) == 5
    assert 13 in tree
    assert 99 not in tree


def test_source_tree_preorder():
    assert list(build_source_tree().preorder()) == [10, 15, 13, 13, 13]


def test_larger_keys_go_left():
    tree = BinaryTree()
    tree.insert(10)
    tree.insert(20)
    tree.insert(5)
    assert tree.root.left.key == 20
    assert tree.root.right.key == 5


def test_clear():
    tree = build_source_tree()
    tree.clear()
    assert len(tree) == 0
    assert list(tree.preorder()) == []
    assert 10 not in tree


def test_height():
    assert height(None) == 0
    assert height(TreeNode(1)) == 1
    chain = TreeNode(1, right=TreeNode(2, right=TreeNode(3)))
    assert height(chain) == 3


def test_balanced_source_shape():
    root = TreeNode(10, left=TreeNode(3), right=TreeNode(9, TreeNode(15), TreeNode(20)))
    assert is_balanced(root) is True
    assert is_balanced(None) is True


def test_unbalanced_chain():
    root = TreeNode(1, right=TreeNode(2, right=TreeNode(3)))
    assert is_balanced(root) is False
    leaning_left = TreeNode(1, left=TreeNode(2, left=TreeNode(3)))
    assert is_balanced(leaning_left) is False