"""
UI Package

Curses rendering and the interactive key loop.
"""

from .terminal import run

__all__ = ['run']
