"""blitzdoc — BlitzMax command catalog parser and index."""

__version__ = "0.1.0"
