"""A 96-bit decimal type with arithmetic, comparison, rounding and int/float conversion."""

__version__ = "0.1.0"
__all__ = ["core", "compare", "rounding", "arithmetic", "convert"]