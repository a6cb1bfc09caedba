"""Noteorg: a small local note organizer.

Notes live in a single JSON document and are managed through a numbered
text menu (add, list, read, delete, update).
"""

__version__ = "0.1.0"
