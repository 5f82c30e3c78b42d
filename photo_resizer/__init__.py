# photo_resizer/__init__.py
"""
Photo Resizer

Stores uploaded photos and derives fixed-size display variants for each one.
"""

__version__ = "0.1.0"
