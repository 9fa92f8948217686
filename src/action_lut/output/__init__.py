"""Output artifact rendering."""

from .cpp_writer import CppWriter, PLACEHOLDER, load_default_template

__all__ = ["CppWriter", "PLACEHOLDER", "load_default_template"]
