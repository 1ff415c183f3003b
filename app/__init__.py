"""
Movies API application package.

This package contains the HTTP layer, movie validation, and the in-memory
movie store seeded from a bundled JSON file.
"""

__version__ = "1.0.0"
