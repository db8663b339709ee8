"""Tests for the directory scan and listing sort policy.

Covers dotfile filtering, entry-type classification, directories-first
byte-wise ordering, and silent empty results for unscannable roots.
"""

from __future__ import annotations

import os
import socket
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirbrowse.entries import Entry, EntryKind, entry_sort_key, scan_directory, sort_entries


def _names(entries: list[Entry]) -> list[str]:
    return [entry.name for entry in entries]


class ScanDirectoryTests(unittest.TestCase):
    def test_scan_lists_directories_first_and_skips_dotfiles(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "A").mkdir()
            (root / ".hidden").write_text("secret\n", encoding="utf-8")
            (root / "c.txt").write_text("c\n", encoding="utf-8")

            entries = scan_directory(root)

        self.assertEqual(
            [(entry.name, entry.kind) for entry in entries],
            [("A", EntryKind.DIRECTORY), ("b.txt", EntryKind.FILE), ("c.txt", EntryKind.FILE)],
        )

    def test_entry_paths_join_root_and_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "notes.md").write_text("# notes\n", encoding="utf-8")

            entries = scan_directory(root)

        self.assertEqual([entry.path for entry in entries], [root / "docs", root / "notes.md"])

    def test_hidden_directories_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".git").mkdir()
            (root / ".config").mkdir()
            (root / "src").mkdir()

            entries = scan_directory(root)

        self.assertEqual(_names(entries), ["src"])
        self.assertFalse(any(entry.name.startswith(".") for entry in entries))

    def test_names_sort_byte_wise_within_each_kind(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("beta", "Alpha", "_under", "zeta", "Zulu", "émile"):
                (root / name).write_text("", encoding="utf-8")
            for name in ("lib", "Bin", "etc"):
                (root / name).mkdir()

            entries = scan_directory(root)

        self.assertEqual(
            _names(entries),
            ["Bin", "etc", "lib", "Alpha", "Zulu", "_under", "beta", "zeta", "émile"],
        )

    def test_symlinks_are_not_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target_dir = root / "real_dir"
            target_dir.mkdir()
            target_file = root / "real.txt"
            target_file.write_text("x\n", encoding="utf-8")
            os.symlink(target_dir, root / "dir_link")
            os.symlink(target_file, root / "file_link")
            os.symlink(root / "missing", root / "dangling")

            entries = scan_directory(root)

        self.assertEqual(_names(entries), ["real_dir", "real.txt"])

    @unittest.skipUnless(hasattr(os, "mkfifo"), "requires os.mkfifo")
    def test_fifos_are_not_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.mkfifo(root / "pipe")
            (root / "plain.txt").write_text("x\n", encoding="utf-8")

            entries = scan_directory(root)

        self.assertEqual(_names(entries), ["plain.txt"])

    @unittest.skipUnless(hasattr(socket, "AF_UNIX"), "requires unix sockets")
    def test_sockets_are_not_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            sock_path = root / "s.sock"
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.bind(str(sock_path))
                entries = scan_directory(root)
            finally:
                sock.close()

        self.assertEqual(entries, [])

    def test_missing_root_yields_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            entries = scan_directory(Path(tmp) / "does-not-exist")

        self.assertEqual(entries, [])

    def test_unreadable_root_yields_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "visible.txt").write_text("x\n", encoding="utf-8")
            with mock.patch(
                "dirbrowse.entries.scan.os.scandir",
                side_effect=PermissionError(13, "Permission denied", str(root)),
            ):
                entries = scan_directory(root)

        self.assertEqual(entries, [])

    def test_file_root_yields_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x\n", encoding="utf-8")

            entries = scan_directory(target)

        self.assertEqual(entries, [])

    def test_empty_directory_yields_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(scan_directory(Path(tmp)), [])

    def test_scan_is_not_recursive(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            nested = root / "outer" / "inner"
            nested.mkdir(parents=True)
            (nested / "deep.txt").write_text("x\n", encoding="utf-8")

            entries = scan_directory(root)

        self.assertEqual(_names(entries), ["outer"])


class SortPolicyTests(unittest.TestCase):
    def test_sort_entries_orders_in_place(self) -> None:
        root = Path("/tmp/root")
        entries = [
            Entry("b.txt", root / "b.txt", EntryKind.FILE),
            Entry("z", root / "z", EntryKind.DIRECTORY),
            Entry("a.txt", root / "a.txt", EntryKind.FILE),
            Entry("m", root / "m", EntryKind.DIRECTORY),
        ]

        result = sort_entries(entries)

        self.assertIs(result, entries)
        self.assertEqual(_names(entries), ["m", "z", "a.txt", "b.txt"])

    def test_sort_key_puts_directories_before_files(self) -> None:
        directory = Entry("zzz", Path("/tmp/zzz"), EntryKind.DIRECTORY)
        file_entry = Entry("aaa", Path("/tmp/aaa"), EntryKind.FILE)

        self.assertLess(entry_sort_key(directory), entry_sort_key(file_entry))


if __name__ == "__main__":
    unittest.main()
