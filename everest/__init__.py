"""A terminal simulation of a simple feature phone with a menu and built-in apps."""

__version__ = "0.1.0"