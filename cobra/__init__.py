"""A grid-based snake arcade game with a changeable grid cell size."""

__version__ = "0.1.0"