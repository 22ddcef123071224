"""Scene-file checks for a small ray tracer, with character, string, byte and output helpers."""

__version__ = "0.1.0"