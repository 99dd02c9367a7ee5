"""Universal Links Test file hosting backend."""

__version__ = "0.1.0"
