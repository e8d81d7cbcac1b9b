"""Building blocks for a lenient JSON and JSONC parser."""

__version__ = "0.4.2"
__all__ = ["config", "lookup", "comment", "fast_float"]