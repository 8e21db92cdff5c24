"""glee: search a codebase for functions by type signature."""

__version__ = "0.1.0"
