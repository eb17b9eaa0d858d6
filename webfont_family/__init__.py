"""
Browser-ready web font distributions for a type family.
"""

__version__ = "1.0.0"
