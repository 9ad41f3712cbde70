"""
QWSTabs - a redirecting tab panel for PySide6 applications.
"""

__version__ = "0.1.0"
