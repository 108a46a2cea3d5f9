"""Component Builder: compose catalog snippets into downloadable web projects."""

__version__ = "0.1.0"
