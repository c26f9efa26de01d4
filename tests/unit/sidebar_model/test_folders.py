"""Tests for recursive, index-gated folder walking."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from sidebar_builder.sidebar_model import (
    FileEntry,
    FolderNode,
    SidebarOptions,
    build_sidebar,
    files_and_order,
    folders_and_order,
    sort_by_order,
)


def _write_doc(path: Path, header: str | None, body: str = "Body\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = body if header is None else f"---\n{header}---\n{body}"
    path.write_text(text, encoding="utf-8")
    return path


class FoldersAndOrderTests(unittest.TestCase):
    def test_recursive_composition_merges_files_and_folders(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            folder_a = root / "docs" / "A"
            _write_doc(folder_a / "f.md", "title: F\norder: 1\n")
            _write_doc(folder_a / "B" / "index.md", "title: B\norder: 0\n")
            _write_doc(folder_a / "B" / "g.md", "title: G\norder: 1\n")

            combined = sort_by_order([*folders_and_order("docs/A", root=root), *files_and_order("docs/A", root=root)])
            sidebar = build_sidebar("docs/A", root=root)

        self.assertEqual(combined, sidebar)
        folder_b, file_f = sidebar
        self.assertIsInstance(folder_b, FolderNode)
        self.assertEqual((folder_b.text, folder_b.order), ("B", 0))
        self.assertIsInstance(file_f, FileEntry)
        self.assertEqual((file_f.text, file_f.order), ("F", 1))
        (file_g,) = folder_b.items
        self.assertEqual((file_g.text, file_g.link), ("G", "/A/B/g.md"))

    def test_items_mix_files_and_nested_folders_by_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            guide = root / "docs" / "guide"
            _write_doc(guide / "index.md", "title: Guide\norder: 5\n")
            _write_doc(guide / "intro.md", "title: Intro\norder: 0\n")
            _write_doc(guide / "later.md", "title: Later\norder: 3\n")
            _write_doc(guide / "advanced" / "index.md", "title: Advanced\norder: 2\n")
            _write_doc(guide / "advanced" / "tuning.md", "title: Tuning\n")
            _write_doc(guide / "basics" / "index.md", "title: Basics\n")

            (node,) = folders_and_order("docs", root=root)

        self.assertEqual(node.text, "Guide")
        self.assertEqual(node.order, 5)
        # Ties keep files before folders, each in name order.
        self.assertEqual([item.text for item in node.items], ["Intro", "Basics", "Advanced", "Later"])
        advanced = node.items[2]
        self.assertIsInstance(advanced, FolderNode)
        self.assertEqual([item.link for item in advanced.items], ["/guide/advanced/tuning.md"])

    def test_top_level_folders_are_sorted_by_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "aaa" / "index.md", "title: Last\norder: 9\n")
            _write_doc(root / "docs" / "bbb" / "index.md", "title: First\norder: -1\n")
            _write_doc(root / "docs" / "ccc" / "index.md", "title: Middle\n")
            _write_doc(root / "docs" / "ddd" / "index.md", "title: Middle Too\n")

            nodes = folders_and_order("docs", root=root)

        self.assertEqual([node.text for node in nodes], ["First", "Middle", "Middle Too", "Last"])

    def test_folder_without_index_hides_its_whole_subtree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "visible" / "index.md", "title: Visible\n")
            hidden = root / "docs" / "no-index"
            _write_doc(hidden / "orphan.md", "title: Orphan\n")
            _write_doc(hidden / "deeper" / "index.md", "title: Deeper\n")
            _write_doc(hidden / "deeper" / "leaf.md", "title: Leaf\n")

            nodes = folders_and_order("docs", root=root)

        self.assertEqual([node.text for node in nodes], ["Visible"])
        self.assertEqual(nodes[0].items, ())

    def test_hidden_folder_with_titled_index_is_included(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / ".hidden" / "index.md", "title: Hidden\n")
            _write_doc(root / "docs" / ".hidden" / "page.md", "title: Page\n")
            (root / "docs" / ".cache").mkdir()

            nodes = folders_and_order("docs", root=root)

        self.assertEqual([node.text for node in nodes], ["Hidden"])
        self.assertEqual([item.link for item in nodes[0].items], ["/.hidden/page.md"])

    def test_folder_index_without_title_is_excluded_with_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "untitled" / "index.md", "order: 1\n")
            _write_doc(root / "docs" / "untitled" / "page.md", "title: Page\n")

            with self.assertLogs("sidebar_builder.sidebar_model.folders", level="WARNING") as logs:
                nodes = folders_and_order("docs", root=root)

        self.assertEqual(nodes, [])
        self.assertIn("Missing Title Front Matter |", logs.output[0])
        self.assertIn("untitled/index.md", logs.output[0])

    def test_ignore_patterns_apply_at_every_depth(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "top" / "index.md", "title: Top\n")
            _write_doc(root / "docs" / "top" / "draft-a.md", "title: Draft A\n")
            _write_doc(root / "docs" / "top" / "kept.md", "title: Kept\n")
            _write_doc(root / "docs" / "top" / "sub" / "index.md", "title: Sub\n")
            _write_doc(root / "docs" / "top" / "sub" / "draft-b.md", "title: Draft B\n")

            (top,) = folders_and_order("docs", {"partialFileNamesToIgnore": ["draft"]}, root=root)

        self.assertEqual([item.text for item in top.items], ["Kept", "Sub"])
        self.assertEqual(top.items[1].items, ())

    def test_collapse_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "a" / "index.md", "title: A\n")
            _write_doc(root / "docs" / "a" / "b" / "index.md", "title: B\n")

            (node_a,) = folders_and_order("docs", root=root)

        (node_b,) = node_a.items
        for node in (node_a, node_b):
            self.assertTrue(node.collapsible)
            self.assertFalse(node.collapsed)

    def test_collapse_options_apply_only_to_literal_booleans(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "a" / "index.md", "title: A\n")
            _write_doc(root / "docs" / "a" / "b" / "index.md", "title: B\n")

            (strict,) = folders_and_order("docs", SidebarOptions(collapsible=False, collapsed=True), root=root)
            (loose,) = folders_and_order("docs", {"collapsible": 0, "collapsed": "yes"}, root=root)

        self.assertFalse(strict.collapsible)
        self.assertTrue(strict.collapsed)
        self.assertFalse(strict.items[0].collapsible)
        self.assertTrue(strict.items[0].collapsed)
        self.assertTrue(loose.collapsible)
        self.assertFalse(loose.collapsed)

    def test_absolute_folder_path_is_accepted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "a" / "index.md", "title: A\n")
            _write_doc(root / "docs" / "a" / "page.md", "title: Page\n")

            (node,) = folders_and_order(root / "docs", root=root)

        self.assertEqual(node.items[0].link, "/a/page.md")

    def test_custom_docs_dir_changes_links(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "site" / "a" / "index.md", "title: A\n")
            _write_doc(root / "site" / "a" / "page.md", "title: Page\n")

            (node,) = folders_and_order("site", SidebarOptions(docs_dir="site"), root=root)

        self.assertEqual(node.items[0].link, "/a/page.md")

    def test_symlink_cycle_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            folder = root / "docs" / "a"
            _write_doc(folder / "index.md", "title: A\n")
            try:
                os.symlink(folder, folder / "loop", target_is_directory=True)
            except (OSError, NotImplementedError):
                self.skipTest("symlinks unavailable")

            with self.assertLogs("sidebar_builder.sidebar_model.folders", level="WARNING") as logs:
                (node,) = folders_and_order("docs", root=root)

        self.assertEqual(node.items, ())
        self.assertIn("Symlink Cycle |", logs.output[0])

    def test_repeated_walks_are_identical(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "a" / "index.md", "title: A\norder: 2\n")
            _write_doc(root / "docs" / "a" / "x.md", "title: X\n")
            _write_doc(root / "docs" / "b" / "index.md", "title: B\norder: 1\n")

            first = folders_and_order("docs", root=root)
            second = folders_and_order("docs", root=root)

        self.assertEqual(first, second)
        self.assertEqual([node.to_dict() for node in first], [node.to_dict() for node in second])

    def test_folder_to_dict_shape(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _write_doc(root / "docs" / "a" / "index.md", "title: A\norder: 2\n")
            _write_doc(root / "docs" / "a" / "x.md", "title: X\n")

            (node,) = folders_and_order("docs", root=root)

        self.assertEqual(
            node.to_dict(),
            {
                "text": "A",
                "items": [{"title": "X", "text": "X", "link": "/a/x.md", "order": 0}],
                "order": 2,
                "collapsible": True,
                "collapsed": False,
            },
        )

    def test_missing_folder_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                folders_and_order("docs", root=Path(tmp).resolve())


if __name__ == "__main__":
    unittest.main()
