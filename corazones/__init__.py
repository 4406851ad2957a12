"""Heart-disease CSV loading, categorisation and entropy measures."""

__version__ = "0.1.0"
__all__ = ["csvdata", "heart", "cli"]