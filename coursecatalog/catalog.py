"""
Course catalog.

A Catalog maps category names to the list of courses in that category, e.g.
'BASES DE DATOS' -> [Course(...), Course(...)].

Rules:
- category keys are always stored upper-cased
- courses keep insertion order inside their category
- every enumeration walks categories in ascending alphabetical order
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from coursecatalog.model import Course, Level
from coursecatalog.parse import parse_lines, read_lines

log = logging.getLogger(__name__)


class CategoryNotFoundError(KeyError):
    """
    Raised when an operation requires a category that is not in the catalog.
    """

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(category)

    def __str__(self) -> str:
        return f"Category not found: {self.category}"


def _normalize(category: str) -> str:
    return category.upper()


class Catalog:
    def __init__(self) -> None:
        self._courses: dict[str, list[Course]] = {}

    @classmethod
    def from_file(cls, path: str | Path) -> "Catalog":
        """
        Build a catalog from a course file (see coursecatalog.parse).
        """
        catalog = cls()
        catalog.load_from_source(read_lines(path))
        return catalog

    def __len__(self) -> int:
        return sum(len(courses) for courses in self._courses.values())

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and _normalize(category) in self._courses

    def __str__(self) -> str:
        return self.render()

    def add_course(self, category: str, course: Course) -> None:
        """
        Append a course to a category, creating the category if needed.
        """
        key = _normalize(category)
        if key in self._courses:
            self._courses[key].append(course)
        else:
            self._courses[key] = [course]

    def count_in(self, category: str) -> int:
        """
        Number of courses in a category, or -1 if the category does not exist.
        """
        courses = self._courses.get(_normalize(category))
        if courses is None:
            return -1
        return len(courses)

    def categories(self) -> list[str]:
        return sorted(self._courses)

    def courses_in(self, category: str) -> tuple[Course, ...]:
        """
        Courses of a category in stored order. Raises CategoryNotFoundError.
        """
        key = _normalize(category)
        if key not in self._courses:
            raise CategoryNotFoundError(key)
        return tuple(self._courses[key])

    def delete_by_level(self, category: str, level: Level) -> list[str]:
        """
        Remove every course of the given level from a category.

        Returns the sorted, de-duplicated names of the removed courses.
        Raises CategoryNotFoundError if the category does not exist.
        """
        key = _normalize(category)
        if key not in self._courses:
            raise CategoryNotFoundError(key)

        kept: list[Course] = []
        removed: set[str] = set()
        for course in self._courses[key]:
            if course.level == level:
                removed.add(course.name)
            else:
                kept.append(course)

        self._courses[key] = kept
        log.info("deleted %d course(s) of level %s from %s", len(removed), level, key)
        return sorted(removed)

    def oldest_course(self) -> Optional[Course]:
        """
        The course with the earliest publication date, None if the catalog is empty.

        Ties go to the first course found (categories in order, then insertion order).
        """
        oldest: Optional[Course] = None
        for key in self.categories():
            for course in self._courses[key]:
                if oldest is None or course.publication_date < oldest.publication_date:
                    oldest = course
        return oldest

    def render(self) -> str:
        """
        Text form of the catalog: one 'CATEGORY (count)' header per category,
        followed by its courses in stored order.
        """
        parts: list[str] = []
        for key in self.categories():
            courses = self._courses[key]
            parts.append(f"{key} ({len(courses)})\n")
            for course in courses:
                parts.append(f"    {course}\n")
        return "".join(parts)

    def load_from_source(self, lines: Iterable[str]) -> int:
        """
        Parse all lines and add the resulting courses. Returns how many were added.

        Every line is parsed before the first course is added, so a
        CourseParseError leaves the catalog unchanged.
        """
        records = list(parse_lines(lines))
        for category, course in records:
            self.add_course(category, course)
        log.info("loaded %d course(s) into %d categories", len(records), len(self._courses))
        return len(records)
