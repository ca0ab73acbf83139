"""
CLI (Command Line Interface).

Quick terminal commands on top of a course file, e.g.:

    coursecatalog show
    coursecatalog categories
    coursecatalog count "bases de datos"
    coursecatalog oldest
    coursecatalog delete cms intermedio
    coursecatalog demo

Use --file (or $COURSECATALOG_FILE) to load a different course file.
"""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from coursecatalog.catalog import Catalog, CategoryNotFoundError
from coursecatalog.config import configure_logging, resolve_data_path
from coursecatalog.model import DATE_FORMAT, Level
from coursecatalog.parse import CourseParseError

console = Console(highlight=False)


def _println(msg: str = "") -> None:
    console.print(msg, markup=False, soft_wrap=True)


def _print_catalog(catalog: Catalog) -> None:
    text = catalog.render()
    if not text:
        _println("(catalog is empty)")
        return
    _println(text.rstrip("\n"))


def _print_table(catalog: Catalog) -> None:
    table = Table(title="Courses", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Course")
    table.add_column("Published")
    table.add_column("Level")
    for category in catalog.categories():
        for course in catalog.courses_in(category):
            table.add_row(
                category,
                course.name,
                course.publication_date.strftime(DATE_FORMAT),
                str(course.level),
            )
    console.print(table)


def _cmd_show(args: argparse.Namespace, catalog: Catalog) -> int:
    if args.table:
        _print_table(catalog)
    else:
        _print_catalog(catalog)
    return 0


def _cmd_categories(args: argparse.Namespace, catalog: Catalog) -> int:
    for category in catalog.categories():
        _println(category)
    return 0


def _cmd_count(args: argparse.Namespace, catalog: Catalog) -> int:
    n = catalog.count_in(args.category)
    if n < 0:
        _println(f"Category not found: {args.category.upper()}")
        return 1
    _println(str(n))
    return 0


def _report_oldest(catalog: Catalog) -> None:
    oldest = catalog.oldest_course()
    if oldest is None:
        _println("Oldest course: (catalog is empty)")
    else:
        _println(f"Oldest course: {oldest.name} ({oldest.publication_date.strftime(DATE_FORMAT)})")


def _cmd_oldest(args: argparse.Namespace, catalog: Catalog) -> int:
    _report_oldest(catalog)
    return 0


def _delete(catalog: Catalog, category: str, level: Level) -> None:
    _println(f"Deleting courses of {category.upper()} with level {level}")
    removed = catalog.delete_by_level(category, level)
    _println(f"Deleted = [{', '.join(removed)}]")


def _cmd_delete(args: argparse.Namespace, catalog: Catalog) -> int:
    try:
        level = Level.from_token(args.level)
    except ValueError as e:
        _println(str(e))
        return 1

    _delete(catalog, args.category, level)
    _println("")
    _println("After deleting ....")
    _print_catalog(catalog)
    return 0


def _cmd_demo(args: argparse.Namespace, catalog: Catalog) -> int:
    """
    Fixed demonstration: render, oldest course, two deletions, render again.
    """
    _print_catalog(catalog)
    _println("")
    _report_oldest(catalog)
    _println("")
    _println("------------------")
    for category, level in (("bases de datos", Level.ADVANCED), ("cms", Level.INTERMEDIATE)):
        if category not in catalog:
            _println(f"Skipping {category.upper()}: category not in catalog")
            continue
        _delete(catalog, category, level)
        _println("")
    _println("------------------")
    _println("After deleting ....")
    _print_catalog(catalog)
    return 0


COMMANDS = {
    "show": _cmd_show,
    "categories": _cmd_categories,
    "count": _cmd_count,
    "oldest": _cmd_oldest,
    "delete": _cmd_delete,
    "demo": _cmd_demo,
}


def build_parser(prog: str = "coursecatalog") -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog=prog, description="Course catalog CLI")
    parser.add_argument("--file", "-f", type=str, default=None, help="Course file (default: bundled data)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at INFO level")
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Print the catalog")
    p_show.add_argument("--table", action="store_true", help="Print as a table")

    sub.add_parser("categories", help="List categories")

    p_count = sub.add_parser("count", help="Count courses in a category")
    p_count.add_argument("category", type=str, help="Category name (any case)")

    sub.add_parser("oldest", help="Show the oldest course")

    p_delete = sub.add_parser("delete", help="Delete courses of a level from a category")
    p_delete.add_argument("category", type=str, help="Category name (any case)")
    p_delete.add_argument("level", type=str, help="principiante | intermedio | avanzado")

    sub.add_parser("demo", help="Run the demonstration sequence")

    return parser


def main(argv: list[str] | None = None, prog: str = "coursecatalog") -> None:
    """
    CLI entry point. Parses args, loads the catalog, dispatches to the
    command handler and exits via SystemExit with a return code.
    """
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    path = resolve_data_path(args.file)
    try:
        catalog = Catalog.from_file(path)
    except (OSError, UnicodeDecodeError) as e:
        _println(f"Cannot read course file {path}: {e}")
        raise SystemExit(1)
    except CourseParseError as e:
        _println(f"Invalid course file {path}: {e}")
        raise SystemExit(1)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args, catalog))
    except CategoryNotFoundError as e:
        _println(str(e))
        raise SystemExit(1)
