"""Version information for linesort"""

__version__ = "0.1.0"
