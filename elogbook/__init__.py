"""
elogbook backend

Personal journal API with single-use, short-lived attachment download links.
"""

__version__ = "0.1.0"
