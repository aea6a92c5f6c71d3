"""
Configuration for grid meshing runs.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
