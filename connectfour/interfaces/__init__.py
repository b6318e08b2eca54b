"""
connectfour.interfaces - User interfaces for Connect Four

Presentation layers that sit on top of GameEngine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
