"""buildsweep - remove build-artifact directories from a source tree."""

__version__ = "0.1.0"
