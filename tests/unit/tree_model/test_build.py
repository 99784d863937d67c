"""Rebuild tests: flat sequences back into nested trees."""

from __future__ import annotations

import unittest
from dataclasses import replace

from dragtree.tree_model import TreeNode, flatten, rebuild


def _n(node_id: str, *children: TreeNode, collapsed: bool = False) -> TreeNode:
    return TreeNode(node_id, f"node {node_id}", tuple(children), collapsed)


class RebuildTests(unittest.TestCase):
    def test_round_trip_restores_structure(self) -> None:
        tree = (
            _n("1", _n("2", _n("3")), _n("4"), collapsed=True),
            _n("5"),
            _n("6", _n("7", _n("8", _n("9")))),
        )

        self.assertEqual(rebuild(flatten(tree)), tree)

    def test_empty_sequence_rebuilds_empty_tree(self) -> None:
        self.assertEqual(rebuild([]), ())

    def test_uses_parent_links_not_depth(self) -> None:
        flat = flatten((_n("1", _n("2")), _n("3")))
        # 3 now claims 1 as parent while keeping its stale depth of 0.
        flat[2] = replace(flat[2], parent_id="1")

        self.assertEqual(rebuild(flat), (_n("1", _n("2"), _n("3")),))

    def test_sibling_order_follows_sequence_order(self) -> None:
        flat = flatten((_n("1"), _n("2"), _n("3")))
        reordered = [flat[2], flat[0], flat[1]]

        self.assertEqual([node.id for node in rebuild(reordered)], ["3", "1", "2"])

    def test_child_before_parent_is_rejected(self) -> None:
        flat = flatten((_n("1", _n("2")),))

        with self.assertRaises(ValueError):
            rebuild([flat[1], flat[0]])

    def test_rebuilt_nodes_do_not_alias_stale_children(self) -> None:
        tree = (_n("1", _n("2")), _n("3"))
        flat = flatten(tree)
        # Move 2 to the top level; 1 must come back childless.
        flat[1] = replace(flat[1], parent_id=None, depth=0)

        self.assertEqual(rebuild(flat), (_n("1"), _n("2"), _n("3")))


if __name__ == "__main__":
    unittest.main()
