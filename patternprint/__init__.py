"""Rectangle, triangle and right-triangle text patterns, with a console command."""

__version__ = "0.1.0"