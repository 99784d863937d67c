"""Flattening and visible-row filtering tests.

Checks pre-order layout, depth/parent bookkeeping, and per-level indexes.
Also covers transitive hiding below collapsed rows.
"""

from __future__ import annotations

import unittest

from dragtree.tree_model import TreeNode, flatten, visible


def _n(node_id: str, *children: TreeNode, collapsed: bool = False) -> TreeNode:
    return TreeNode(node_id, f"node {node_id}", tuple(children), collapsed)


def _sample_tree() -> tuple[TreeNode, ...]:
    return (
        _n("1", _n("2", _n("3")), _n("4")),
        _n("5", _n("6", _n("7", _n("8")))),
        _n("9"),
    )


class FlattenTests(unittest.TestCase):
    def test_chain_yields_depth_and_parent_per_level(self) -> None:
        flat = flatten((_n("1", _n("2", _n("3"))),))

        self.assertEqual(
            [(entry.id, entry.depth, entry.parent_id) for entry in flat],
            [("1", 0, None), ("2", 1, "1"), ("3", 2, "2")],
        )

    def test_output_is_preorder_and_covers_every_node(self) -> None:
        flat = flatten(_sample_tree())

        self.assertEqual([entry.id for entry in flat], ["1", "2", "3", "4", "5", "6", "7", "8", "9"])

    def test_index_resets_for_each_sibling_group(self) -> None:
        flat = {entry.id: entry for entry in flatten(_sample_tree())}

        self.assertEqual(flat["1"].index, 0)
        self.assertEqual(flat["5"].index, 1)
        self.assertEqual(flat["9"].index, 2)
        self.assertEqual(flat["2"].index, 0)
        self.assertEqual(flat["4"].index, 1)
        self.assertEqual(flat["3"].index, 0)

    def test_depth_is_zero_exactly_for_top_level_and_parent_plus_one_otherwise(self) -> None:
        flat = flatten(_sample_tree())
        by_id = {entry.id: entry for entry in flat}

        for entry in flat:
            if entry.parent_id is None:
                self.assertEqual(entry.depth, 0)
            else:
                self.assertEqual(entry.depth, by_id[entry.parent_id].depth + 1)

    def test_rows_keep_node_fields(self) -> None:
        tree = (_n("1", _n("2"), collapsed=True),)
        first = flatten(tree)[0]

        self.assertEqual(first.name, "node 1")
        self.assertTrue(first.collapsed)
        self.assertEqual(first.children, tree[0].children)

    def test_empty_tree_flattens_to_empty_list(self) -> None:
        self.assertEqual(flatten(()), [])


class VisibleTests(unittest.TestCase):
    def test_hides_children_of_collapsed_row(self) -> None:
        rows = visible(flatten(_sample_tree()), {"1"})

        self.assertEqual([row.id for row in rows], ["1", "5", "6", "7", "8", "9"])

    def test_hides_grandchildren_in_one_pass(self) -> None:
        rows = visible(flatten(_sample_tree()), {"5"})

        self.assertEqual([row.id for row in rows], ["1", "2", "3", "4", "5", "9"])

    def test_collapsed_leaf_and_unknown_ids_change_nothing(self) -> None:
        flat = flatten(_sample_tree())

        self.assertEqual(visible(flat, {"9", "missing"}), flat)

    def test_filter_is_idempotent(self) -> None:
        flat = flatten(_sample_tree())
        excluded = {"2", "6"}

        once = visible(flat, excluded)
        self.assertEqual(visible(once, excluded), once)
        self.assertEqual([row.id for row in once], ["1", "2", "4", "5", "6", "9"])

    def test_does_not_mutate_caller_exclusion_set(self) -> None:
        excluded = {"1"}
        visible(flatten(_sample_tree()), excluded)

        self.assertEqual(excluded, {"1"})


if __name__ == "__main__":
    unittest.main()
