"""
Course catalog: courses grouped by category, loaded from a text file.
"""

from coursecatalog.catalog import Catalog, CategoryNotFoundError
from coursecatalog.model import Course, Level
from coursecatalog.parse import CourseParseError

__all__ = ["Catalog", "CategoryNotFoundError", "Course", "CourseParseError", "Level"]
