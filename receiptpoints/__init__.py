"""Score shopping receipts and serve their points over HTTP."""

__version__ = "0.1.0"