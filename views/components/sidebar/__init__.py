"""
Sidebar components.
"""

from views.components.sidebar.account import render_account_sidebar

__all__ = [
    "render_account_sidebar",
]
