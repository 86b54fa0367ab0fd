"""
Rendering of query results.
"""

from .output_generator import OutputGenerator

__all__ = ['OutputGenerator']
