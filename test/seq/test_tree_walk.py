import unittest

from src.seq.tree_walk import walk_depth_first, TreeVisit


def _children_of(tree):
    return lambda node: tree.get(node, [])


class TestTreeWalk(unittest.TestCase):
    def setUp(self):
        #        a
        #      / | \
        #     b  c  d
        #    / \     \
        #   e   f     g
        self.tree = {"a": ["b", "c", "d"], "b": ["e", "f"], "d": ["g"]}

    def test_preorder_with_levels_and_parents(self):
        visits = list(walk_depth_first("a", _children_of(self.tree)))
        self.assertEqual([v.node for v in visits], ["a", "b", "e", "f", "c", "d", "g"])
        self.assertEqual([v.level for v in visits], [0, 1, 2, 2, 1, 1, 2])
        self.assertEqual(visits[0], TreeVisit("a", 0, None))
        self.assertEqual(visits[2].parent, "b")
        self.assertEqual(visits[6].parent, "d")

    def test_max_depth(self):
        visits = list(walk_depth_first("a", _children_of(self.tree), max_depth=1))
        self.assertEqual([v.node for v in visits], ["a", "b", "c", "d"])
        visits = list(walk_depth_first("a", _children_of(self.tree), max_depth=0))
        self.assertEqual([v.node for v in visits], ["a"])

    def test_invalid_max_depth(self):
        with self.assertRaises(ValueError):
            walk_depth_first("a", _children_of(self.tree), max_depth=-1)

    def test_deep_chain_does_not_recurse(self):
        depth = 20000
        visits = list(walk_depth_first(0, lambda n: [n + 1] if n < depth else []))
        self.assertEqual(len(visits), depth + 1)
        self.assertEqual(visits[-1].level, depth)
        self.assertEqual(visits[-1].parent, depth - 1)

    def test_lazy(self):
        expanded = []

        def children(n):
            expanded.append(n)
            return [2 * n, 2 * n + 1]

        it = walk_depth_first(1, children)
        first_three = [next(it).node for _ in range(3)]
        self.assertEqual(first_three, [1, 2, 4])
        self.assertEqual(expanded, [1, 2])


if __name__ == "__main__":
    unittest.main(verbosity=2)
