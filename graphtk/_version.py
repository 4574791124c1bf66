"""Version information for graphtk."""

__version__ = "0.1.0"
