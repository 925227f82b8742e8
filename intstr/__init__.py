"""Integer parsing and formatting with configurable radix, sign, case and grouping."""

__version__ = "1.0.0"

__all__ = ["case", "fmt", "parse", "plus", "pres", "radix"]