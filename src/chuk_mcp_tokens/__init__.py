"""
CHUK Tokens - design token collections and modes to themed CSS.
"""

__version__ = "0.1.0"
