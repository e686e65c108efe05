"""brandkit: brand asset export and verified downloads."""

__version__ = "0.3.0"

__all__ = ["__version__"]
