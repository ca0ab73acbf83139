"""
Tests for CLI entry points.

These tests focus on:
- exit codes for the main commands
- loading a temporary course file via --file
  (so the bundled data set is never modified)
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from coursecatalog.cli import build_parser, main

COURSES = (
    "bases de datos : SQL Essential Training : 3/12/2019 : principiante\n"
    "bases de datos : MySQL Advanced : 14/04/2020 : avanzado\n"
    "bases de datos : PostgreSQL Tuning : 08/06/2021 : avanzado\n"
    "cms : Drupal Theming : 05/10/2018 : intermedio\n"
    "cms : WordPress Basics : 12/02/2020 : principiante\n"
)


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "courses.csv"
        self.path.write_text(COURSES, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str) -> tuple[int, str]:
        buf = io.StringIO()
        with redirect_stdout(buf):
            with self.assertRaises(SystemExit) as ctx:
                main(["--file", str(self.path), *argv])
        return ctx.exception.code, buf.getvalue()

    def test_show(self) -> None:
        code, out = self._run("show")
        self.assertEqual(code, 0)
        self.assertIn("BASES DE DATOS (3)", out)
        self.assertIn("CMS (2)", out)
        self.assertLess(out.index("BASES DE DATOS"), out.index("CMS"))

    def test_show_table(self) -> None:
        code, out = self._run("show", "--table")
        self.assertEqual(code, 0)
        self.assertIn("Drupal Theming", out)

    def test_categories(self) -> None:
        code, out = self._run("categories")
        self.assertEqual(code, 0)
        self.assertEqual(out.split(), ["BASES", "DE", "DATOS", "CMS"])

    def test_count_known_and_unknown(self) -> None:
        code, out = self._run("count", "cms")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "2")

        code, out = self._run("count", "redes")
        self.assertNotEqual(code, 0)
        self.assertIn("REDES", out)

    def test_oldest(self) -> None:
        code, out = self._run("oldest")
        self.assertEqual(code, 0)
        self.assertIn("Drupal Theming (05/10/2018)", out)

    def test_delete(self) -> None:
        code, out = self._run("delete", "bases de datos", "AVANZADO")
        self.assertEqual(code, 0)
        self.assertIn("Deleted = [MySQL Advanced, PostgreSQL Tuning]", out)
        self.assertIn("BASES DE DATOS (1)", out)

    def test_delete_unknown_category(self) -> None:
        code, out = self._run("delete", "redes", "avanzado")
        self.assertEqual(code, 1)
        self.assertIn("Category not found: REDES", out)

    def test_delete_unknown_level(self) -> None:
        code, out = self._run("delete", "cms", "xyz")
        self.assertEqual(code, 1)
        self.assertIn("Unknown level", out)

    def test_demo(self) -> None:
        code, out = self._run("demo")
        self.assertEqual(code, 0)
        self.assertIn("Oldest course: Drupal Theming", out)
        self.assertIn("BASES DE DATOS (1)", out)
        self.assertIn("CMS (1)", out)

    def test_malformed_file_exits_nonzero(self) -> None:
        self.path.write_text("cms : Broken : 01/01/2020\n", encoding="utf-8")
        code, out = self._run("show")
        self.assertEqual(code, 1)
        self.assertIn("line 1", out)

    def test_non_utf8_file_exits_nonzero(self) -> None:
        self.path.write_bytes(b"cms : Caf\xe9 : 01/01/2020 : intermedio\n")
        code, out = self._run("show")
        self.assertEqual(code, 1)
        self.assertIn("Cannot read course file", out)

    def test_missing_file_exits_nonzero(self) -> None:
        self.path.unlink()
        code, _ = self._run("show")
        self.assertEqual(code, 1)

    def test_build_parser_uses_given_prog(self) -> None:
        parser = build_parser("python -m coursecatalog")
        self.assertTrue(parser.format_usage().startswith("usage: python -m coursecatalog"))

    def test_command_is_required(self) -> None:
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertNotEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
