"""
Smart calculator for arbitrary-precision integer expressions with variables.
"""

__version__ = "0.1.0"
