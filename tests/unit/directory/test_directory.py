"""Tests for directory handles, make policies, and the lazy child cache."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typedfs import Directory, DirectoryListing, EntryError, ErrorKind, File, IfExists, IfNotExists, pathinfo, primitives


def _build_fixture(root: Path) -> None:
    (root / "a.txt").write_text("a\n", encoding="utf-8")
    (root / "b.py").write_text("b = 1\n", encoding="utf-8")
    (root / ".hidden").write_text("h\n", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "src").mkdir()
    (root / "src" / "nested.txt").write_text("n\n", encoding="utf-8")


class DirectoryConstructionTests(unittest.TestCase):
    def test_exists_distinguishes_directories_from_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "file.txt").write_text("x\n", encoding="utf-8")

            self.assertTrue(Directory.exists(str(root)))
            self.assertFalse(Directory.exists(str(root / "file.txt")))
            self.assertFalse(Directory.exists(str(root / "missing")))

    def test_constructor_rejects_missing_and_file_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "file.txt").write_text("x\n", encoding="utf-8")

            for candidate in (root / "missing", root / "file.txt"):
                with self.subTest(path=candidate):
                    with self.assertRaises(EntryError) as ctx:
                        Directory(str(candidate))
                    self.assertIs(ctx.exception.kind, ErrorKind.DOES_NOT_EXIST)
                    self.assertEqual(ctx.exception.entry_type, "directory")

    def test_construction_does_not_load_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("typedfs.directory.primitives.list_names") as list_names:
                handle = Directory(tmp)

            self.assertFalse(handle.is_loaded)
            list_names.assert_not_called()

    def test_static_derivations(self) -> None:
        self.assertEqual(Directory.name_of("/srv/data.d/"), "data.d")
        self.assertEqual(Directory.location_of("/srv/data.d/"), "/srv")


class DirectoryMakeTests(unittest.TestCase):
    def test_make_creates_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "sandbox"

            handle = Directory.make(str(target))

            self.assertTrue(target.is_dir())
            self.assertEqual(handle.path, str(target))
            self.assertEqual(handle.name, "sandbox")

    def test_make_throw_on_existing_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(EntryError) as ctx:
                Directory.make(tmp)
            self.assertIs(ctx.exception.kind, ErrorKind.ALREADY_EXISTS)

    def test_make_open_returns_handle_with_normalized_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = str(Path(tmp).resolve())

            handle = Directory.make(root + "//", IfExists.OPEN)

            self.assertEqual(handle.path, root)

    def test_make_overwrite_recreates_empty_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "empty"
            target.mkdir()

            handle = Directory.make(str(target), IfExists.OVERWRITE)

            self.assertTrue(target.is_dir())
            self.assertEqual(handle.get_files(), [])
            self.assertEqual(handle.get_directories(), [])

    def test_make_overwrite_refuses_non_empty_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "full"
            target.mkdir()
            (target / "keep.txt").write_text("x\n", encoding="utf-8")

            with self.assertRaises(EntryError) as ctx:
                Directory.make(str(target), IfExists.OVERWRITE)

            self.assertIs(ctx.exception.kind, ErrorKind.COULD_NOT_CREATE)
            self.assertTrue((target / "keep.txt").exists())

    def test_make_reports_could_not_create_without_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "a" / "b"
            with self.assertRaises(EntryError) as ctx:
                Directory.make(str(target))
            self.assertIs(ctx.exception.kind, ErrorKind.COULD_NOT_CREATE)


class DirectoryListingTests(unittest.TestCase):
    def test_load_partitions_files_and_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            handle = Directory(str(root))

            handle.load()

            self.assertTrue(handle.is_loaded)
            file_names = {child.name for child in handle.get_files()}
            directory_names = {child.name for child in handle.get_directories()}
            self.assertEqual(file_names, {"a.txt", "b.py", ".hidden"})
            self.assertEqual(directory_names, {"docs", "src"})
            self.assertFalse(file_names & directory_names)
            self.assertFalse({".", ".."} & (file_names | directory_names))
            self.assertTrue(all(isinstance(child, File) for child in handle.get_files()))
            self.assertTrue(all(isinstance(child, Directory) for child in handle.get_directories()))

    def test_queries_trigger_single_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            handle = Directory(str(root))

            with mock.patch(
                "typedfs.directory.primitives.list_names",
                wraps=primitives.list_names,
            ) as list_names:
                self.assertTrue(handle.file_exists("a.txt"))
                self.assertTrue(handle.directory_exists("docs"))
                self.assertFalse(handle.file_exists("docs"))
                self.assertFalse(handle.directory_exists("a.txt"))
                handle.get_files()
                handle.get_directories()
                handle.load()

            self.assertEqual(list_names.call_count, 1)

    def test_loaded_handle_ignores_later_disk_changes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            handle = Directory(str(root))
            before_files = [child.path for child in handle.get_files()]

            (root / "late.txt").write_text("late\n", encoding="utf-8")
            (root / "late_dir").mkdir()

            self.assertFalse(handle.file_exists("late.txt"))
            self.assertFalse(handle.directory_exists("late_dir"))
            self.assertEqual([child.path for child in handle.get_files()], before_files)

    def test_child_handles_are_fresh_objects(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            handle = Directory(str(root))

            first = handle.get_directory("src")
            second = handle.get_directory("src")

            self.assertIsNot(first, second)
            self.assertEqual(first.path, second.path)
            self.assertFalse(second.is_loaded)
            self.assertTrue(first.file_exists("nested.txt"))
            self.assertFalse(second.is_loaded)

    def test_load_error_propagates_and_leaves_handle_unloaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            handle = Directory(tmp)
            with mock.patch("typedfs.directory.primitives.list_names", side_effect=PermissionError("denied")):
                with self.assertRaises(PermissionError):
                    handle.load()

            self.assertFalse(handle.is_loaded)
            self.assertEqual(handle.get_files(), [])
            self.assertTrue(handle.is_loaded)


class DirectoryListingSetTests(unittest.TestCase):
    def test_membership_sets_mirror_ordered_names(self) -> None:
        listing = DirectoryListing(files=("b.txt", "a.txt"), directories=("src",))

        self.assertEqual(listing.files, ("b.txt", "a.txt"))
        self.assertEqual(listing.file_set, frozenset({"a.txt", "b.txt"}))
        self.assertEqual(listing.directory_set, frozenset({"src"}))
        self.assertEqual(listing, DirectoryListing(files=("b.txt", "a.txt"), directories=("src",)))


class BackslashSeparatorTests(unittest.TestCase):
    def setUp(self) -> None:
        pathinfo.set_separator("\\")
        self.addCleanup(pathinfo.reset_separator)

    def test_handles_construct_with_backslash_separator(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = str(Path(tmp).resolve())
            (Path(root) / "a.txt").write_text("a\n", encoding="utf-8")

            directory = Directory(root)
            handle = File(str(Path(root) / "a.txt"))
            made = Directory.make(root, IfExists.OPEN)

            self.assertEqual(directory.path, root)
            self.assertEqual(handle.path, str(Path(root) / "a.txt"))
            self.assertEqual(made.path, root)


class DirectoryLookupTests(unittest.TestCase):
    def test_get_file_returns_existing_child(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)

            child = Directory(str(root)).get_file("a.txt")

            self.assertEqual(child.path, str(root / "a.txt"))
            self.assertEqual(child.read(), "a\n")

    def test_get_file_missing_with_throw_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            with self.assertRaises(EntryError) as ctx:
                Directory(str(root)).get_file("missing", IfNotExists.THROW)

            self.assertIs(ctx.exception.kind, ErrorKind.DOES_NOT_EXIST)
            self.assertEqual(ctx.exception.path, str(root / "missing"))
            self.assertFalse((root / "missing").exists())

    def test_get_file_missing_with_create_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            child = Directory(str(root)).get_file("missing", IfNotExists.CREATE)

            self.assertEqual(child.path, str(root / "missing"))
            self.assertTrue((root / "missing").is_file())
            self.assertEqual((root / "missing").stat().st_size, 0)

    def test_get_file_create_opens_file_that_appeared_after_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            handle = Directory(str(root))
            handle.load()
            (root / "late.txt").write_text("late\n", encoding="utf-8")

            child = handle.get_file("late.txt", IfNotExists.CREATE)

            self.assertEqual(child.read(), "late\n")

    def test_get_file_does_not_match_sub_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)

            with self.assertRaises(EntryError) as ctx:
                Directory(str(root)).get_file("docs")
            self.assertIs(ctx.exception.kind, ErrorKind.DOES_NOT_EXIST)

    def test_get_directory_policies(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            handle = Directory(str(root))

            self.assertEqual(handle.get_directory("docs").path, str(root / "docs"))
            with self.assertRaises(EntryError) as ctx:
                handle.get_directory("build")
            self.assertIs(ctx.exception.kind, ErrorKind.DOES_NOT_EXIST)

            created = handle.get_directory("build", IfNotExists.CREATE)
            self.assertTrue((root / "build").is_dir())
            self.assertEqual(created.name, "build")

    def test_lookups_reject_names_that_leave_the_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "inner").mkdir()
            inner = Directory(str(root / "inner"))

            for name in ("", ".", "..", "../escaped.txt", "a/b"):
                with self.subTest(name=name):
                    with self.assertRaises(ValueError):
                        inner.get_file(name, IfNotExists.CREATE)
                    with self.assertRaises(ValueError):
                        inner.get_directory(name, IfNotExists.CREATE)

            self.assertFalse((root / "escaped.txt").exists())
            self.assertEqual(list((root / "inner").iterdir()), [])

    def test_delete_removes_empty_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "empty"
            target.mkdir()

            Directory(str(target)).delete()

            self.assertFalse(target.exists())

    def test_delete_refuses_non_empty_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_fixture(root)
            with self.assertRaises(OSError):
                Directory(str(root / "src")).delete()


if __name__ == "__main__":
    unittest.main()
