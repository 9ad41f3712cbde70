"""
Widgets for QWSTabs.
"""

from .tab_panel import TabPanel
from .shell_window import ShellWindow

__all__ = [
    'TabPanel',
    'ShellWindow',
]
