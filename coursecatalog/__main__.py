"""
Run the course catalog CLI as a module:

    python -m coursecatalog show
    python -m coursecatalog --file my_courses.csv demo

Usage and error messages name the module invocation instead of the
installed console script.
"""

from coursecatalog.cli import main

if __name__ == "__main__":
    main(prog="python -m coursecatalog")
