"""A lunar lander game on pygame with generated terrain and starfields."""

__version__ = "1.0.0"