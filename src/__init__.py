"""ostack - OpenStack flavor and image browser."""

__version__ = "0.1.0"
