"""BLAKE2b F compression, alt_bn128 arithmetic, precompile gas pricing and JSON hex parsing."""

__version__ = "0.1.0"