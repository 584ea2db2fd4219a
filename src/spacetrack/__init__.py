"""spacetrack: fetch satellite catalog data from www.space-track.org."""

__all__ = ["__version__"]

__version__ = "0.0.1"
