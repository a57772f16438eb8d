"""
termsnake - a snake game drawn straight onto the terminal.
"""

__version__ = "0.1.0"
