"""
wordsolver: narrows a fixed-length word bank toward a hidden objective using
Wordle-style feedback, choosing each guess to eliminate as many candidates as
possible.
"""

__version__ = "0.1.0"
