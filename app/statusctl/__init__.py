"""statusctl - working-tree status for many Git repositories at once."""

__version__ = "0.3.0"
