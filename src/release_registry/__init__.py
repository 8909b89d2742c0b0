"""release-registry — consistency checks for a versioned release registry."""

__version__ = "0.1.0"
