"""In-memory Flask service serving portfolio content: about and services over HTTP, hero and portfolio in Python."""

__version__ = "0.1.0"