"""Field and group arithmetic, SEC1 point encoding and hash-to-curve for the NIST P-256 curve."""

__version__ = "0.1.0"
__all__ = ["field", "affine", "projective", "hash2curve"]