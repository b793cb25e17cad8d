"""A small ray tracer that reads .rt scene files and renders them to PPM images."""

__version__ = "0.1.0"