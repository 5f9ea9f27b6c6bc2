"""roleidm - role and attribute identity management."""

__version__ = "0.1.0"
