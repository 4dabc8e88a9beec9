"""Virtual pet simulation with a small monochrome canvas UI toolkit."""

__version__ = "0.1.0"