"""League of Legends champion build calculator."""

__version__ = "1.0.0"
