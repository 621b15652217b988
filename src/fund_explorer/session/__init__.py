"""
Session Package - Stateful Front for the Pure Pipeline.

Components:
    - ExplorerSession: Loaded dataset, facets, current query, last result
"""

from fund_explorer.session.explorer_session import ExplorerSession

__all__ = [
    "ExplorerSession",
]
