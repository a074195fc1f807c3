"""Input loading."""

from cviz.io.input import load_input, parse_input

__all__ = ["load_input", "parse_input"]
