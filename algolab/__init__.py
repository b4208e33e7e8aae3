"""Classic algorithms, data structures and small console programs."""

__version__ = "0.1.0"