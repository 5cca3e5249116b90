"""
Coping Recommender - An explainable coping technique recommendation engine.

This package ranks a fixed catalog of coping techniques for a user from their
most recent mood check-in and recent chat text, and explains every ranking in
plain language. It ships an HTTP service and a CLI around the engine.
"""

__version__ = "0.1.0"
