"""Correctly rounded conversion of decimal significands and exponents to floats."""

__all__ = ["common", "limits", "number", "table", "binary", "bigdecimal", "simple"]