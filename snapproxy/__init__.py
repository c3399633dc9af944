"""Building blocks for remote snapshotter proxy plugins: interface, messages, conversions and a request wrapper."""

__version__ = "0.1.0"

__all__ = ["__version__"]