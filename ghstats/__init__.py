"""Show GitHub release download counts for the current git project."""

__version__ = "0.1.0"
