"""
MoodLens - Describe how you feel, see the world through that mood.

This package provides a keyword-based mood classifier, a four-screen session
controller that keeps an in-memory mood history, and a terminal front end
that renders mood-tinted placeholder search results.
"""

__version__ = "0.1.0"
