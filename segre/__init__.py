"""
Segre - organize a directory into category or date folders, with undo.
"""

__version__ = "1.0.2"
