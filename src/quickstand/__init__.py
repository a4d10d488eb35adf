"""quickstand — track named groups of git repositories for standups."""

__version__ = "1.0.0"
