"""A small interactive POSIX-style shell with pipelines, redirection and command suggestions."""

__version__ = "0.1.0"