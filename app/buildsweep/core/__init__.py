"""Core infrastructure: paths and theming."""
