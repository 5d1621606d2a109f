"""
unistate CLI - Unidirectional State Container

Commands:
- unistate counter - Dispatch counter operations and render each state change
- unistate version - Show version information
"""

from unistate import __version__

__all__ = ["__version__"]
