"""Bundled data files for buildsweep."""
