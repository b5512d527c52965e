"""Square matrices of floats with arithmetic, transpose, determinant and a demo."""

__version__ = "1.0.0"
__all__ = ["matrix", "demo"]