"""JSON-shape conversion tests for trees."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dragtree.tree_model import TreeFormatError, TreeNode, load_tree, tree_from_data, tree_to_data


class TreeFromDataTests(unittest.TestCase):
    def test_reads_nested_nodes_with_defaults(self) -> None:
        tree = tree_from_data(
            [
                {"id": "1", "name": "Banana", "children": [{"id": "2", "name": "Cavendish"}], "collapsed": True},
                {"id": "3", "name": "Apple"},
            ]
        )

        self.assertEqual(
            tree,
            (
                TreeNode("1", "Banana", (TreeNode("2", "Cavendish"),), collapsed=True),
                TreeNode("3", "Apple"),
            ),
        )

    def test_legacy_expanded_flag_is_inverted(self) -> None:
        tree = tree_from_data([{"id": "1", "name": "a", "expanded": False}, {"id": "2", "name": "b", "expanded": True}])

        self.assertEqual([node.collapsed for node in tree], [True, False])

    def test_collapsed_wins_over_expanded(self) -> None:
        tree = tree_from_data([{"id": "1", "name": "a", "expanded": False, "collapsed": False}])

        self.assertFalse(tree[0].collapsed)

    def test_single_object_and_integer_ids_are_accepted(self) -> None:
        self.assertEqual(tree_from_data({"id": 7, "name": "x"}), (TreeNode("7", "x"),))

    def test_malformed_input_raises_tree_format_error(self) -> None:
        bad_inputs = [
            "nope",
            [1],
            [{"name": "no id"}],
            [{"id": "", "name": "empty id"}],
            [{"id": "1", "name": 5}],
            [{"id": "1", "name": "x", "children": {}}],
            [{"id": "1", "name": "x", "collapsed": "yes"}],
            [{"id": "1", "name": "x", "children": [{"id": True}]}],
        ]
        for data in bad_inputs:
            with self.subTest(data=data), self.assertRaises(TreeFormatError):
                tree_from_data(data)

    def test_error_message_points_at_nested_location(self) -> None:
        with self.assertRaises(TreeFormatError) as ctx:
            tree_from_data([{"id": "1", "children": [{"id": "2"}, {"name": "x"}]}])

        self.assertIn("[0].children[1]", str(ctx.exception))


class TreeToDataTests(unittest.TestCase):
    def test_writes_every_field(self) -> None:
        tree = (TreeNode("1", "a", (TreeNode("2", "b", collapsed=True),)),)

        self.assertEqual(
            tree_to_data(tree),
            [
                {
                    "id": "1",
                    "name": "a",
                    "children": [{"id": "2", "name": "b", "children": [], "collapsed": True}],
                    "collapsed": False,
                }
            ],
        )


class LoadTreeTests(unittest.TestCase):
    def test_reads_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tree.json"
            path.write_text(json.dumps([{"id": "1", "name": "a"}]), encoding="utf-8")

            self.assertEqual(load_tree(path), (TreeNode("1", "a"),))

    def test_dash_reads_stdin(self) -> None:
        with mock.patch("sys.stdin", io.StringIO('[{"id": "1", "name": "a"}]')):
            self.assertEqual(load_tree("-"), (TreeNode("1", "a"),))

    def test_invalid_json_raises_tree_format_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tree.json"
            path.write_text("[{", encoding="utf-8")

            with self.assertRaises(TreeFormatError):
                load_tree(path)

    def test_non_utf8_file_raises_tree_format_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tree.json"
            path.write_bytes(b'[{"id":"\xff"}]')

            with self.assertRaises(TreeFormatError) as ctx:
                load_tree(path)

            self.assertIn("invalid UTF-8", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
