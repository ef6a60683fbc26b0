"""Solutions to short warm-up problems on strings, arithmetic and sequences, with a small command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]