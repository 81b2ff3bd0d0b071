"""Building blocks for turning template syntax trees into Alpine.js-ready node trees."""

__version__ = "0.1.0"

__all__ = [
    "expressions",
    "jsdata",
    "jsutils",
    "nesting",
    "nodes",
    "scope",
    "whitespace",
]