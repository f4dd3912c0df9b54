"""Classic algorithm drills with a command-line runner."""

__version__ = "0.1.0"