"""
Typed HTTP header handlers.
"""

__version__ = "0.1.0"
