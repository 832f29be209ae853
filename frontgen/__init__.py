"""frontgen - generate a new front-end project from the starter template."""

__version__ = "1.2.0"
