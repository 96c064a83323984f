"""Controller layer for the cardpile preview.

- Controller: Main application coordinator
"""

from cardpile.controller.controller import Controller

__all__ = ["Controller"]
