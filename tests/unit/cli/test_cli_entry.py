"""CLI argument and target-path behavior tests.

Verifies how ``focusedit.cli.main`` resolves the tree root and the initially
opened file, and covers the non-interactive ``--tree`` and ``--render`` modes.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from focusedit import cli


class CliTargetTests(unittest.TestCase):
    def _run(self, argv: list[str], default_path: str | None = None):
        with (
            mock.patch.object(sys, "argv", ["focusedit", *argv]),
            mock.patch("focusedit.cli.run_editor") as run_editor,
            mock.patch("focusedit.cli.configure_logging") as configure_logging,
        ):
            cli.main(default_path=default_path)
        return run_editor, configure_logging

    def test_directory_argument_becomes_tree_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.go").write_text("package a\n", encoding="utf-8")

            run_editor, configure_logging = self._run([str(root)])

            run_editor.assert_called_once()
            tree_root, mapping, initial_file = run_editor.call_args.args
            self.assertEqual(tree_root, str(root))
            self.assertEqual(mapping.children_of(str(root)), [str(root / "a.go")])
            self.assertIsNone(initial_file)
            self.assertEqual(run_editor.call_args.kwargs["autosave_delay"], None)
            configure_logging.assert_called_once_with(None)

    def test_file_argument_opens_inside_parent_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "main.go"
            target.write_text("package main\n", encoding="utf-8")

            run_editor, _configure = self._run([str(target), "--autosave-delay", "2", "--theme", "ocean"])

            tree_root, _mapping, initial_file = run_editor.call_args.args
            self.assertEqual(tree_root, str(root))
            self.assertEqual(initial_file, str(target))
            self.assertEqual(run_editor.call_args.kwargs["autosave_delay"], 2.0)
            self.assertEqual(run_editor.call_args.kwargs["theme_name"], "ocean")

    def test_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                run_editor, _configure = self._run([])
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(run_editor.call_args.args[0], str(root))

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "nope")
            with self.assertRaises(SystemExit) as ctx:
                self._run([missing])
            self.assertEqual(str(ctx.exception), f"Path not found: {missing}")

    def test_unreadable_tree_exits_without_starting_editor(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch.object(sys, "argv", ["focusedit", tmp]),
                mock.patch("focusedit.cli.run_editor") as run_editor,
                mock.patch("focusedit.cli.configure_logging"),
                mock.patch(
                    "focusedit.cli.project_directory",
                    side_effect=PermissionError(13, "Permission denied"),
                ),
            ):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()
            run_editor.assert_not_called()
            self.assertIn("Cannot read directory tree", str(ctx.exception))

    def test_negative_autosave_delay_is_rejected(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self._run([".", "--autosave-delay", "-1"])
        self.assertEqual(ctx.exception.code, 2)


class CliOutputModeTests(unittest.TestCase):
    def test_tree_mode_prints_projection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").mkdir()
            (root / "a" / "x.txt").write_text("", encoding="utf-8")
            (root / "b").mkdir()
            (root / ".git").mkdir()

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["focusedit", str(root), "--tree"]),
                mock.patch("focusedit.cli.run_editor") as run_editor,
                mock.patch("focusedit.cli.configure_logging"),
                mock.patch("sys.stdout", stdout),
            ):
                cli.main()

            run_editor.assert_not_called()
            self.assertEqual(
                stdout.getvalue(),
                f"▾ {root}\n  ▾ a\n    x.txt\n  b\n",
            )

    def test_render_markup_prints_spans(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "d.json"
            target.write_text("[true]", encoding="utf-8")

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["focusedit", "--render", str(target), "--format", "markup"]),
                mock.patch("focusedit.cli.run_editor") as run_editor,
                mock.patch("focusedit.cli.configure_logging"),
                mock.patch("sys.stdout", stdout),
            ):
                cli.main()

            run_editor.assert_not_called()
            self.assertEqual(
                stdout.getvalue(),
                '<span style="color: #98C379">[</span>'
                '<span style="color: #00ADD8">true</span>'
                '<span style="color: #98C379">]</span>',
            )

    def test_render_no_color_prints_source(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "main.go"
            target.write_text("package main\n", encoding="utf-8")

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["focusedit", "--render", str(target), "--no-color"]),
                mock.patch("focusedit.cli.configure_logging"),
                mock.patch("sys.stdout", stdout),
            ):
                cli.main()

            self.assertEqual(stdout.getvalue(), "package main\n")

    def test_render_missing_file_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch.object(sys, "argv", ["focusedit", "--render", str(Path(tmp) / "gone.go")]),
                mock.patch("focusedit.cli.configure_logging"),
            ):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()
            self.assertIn("gone.go", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
