"""
Exceptions raised by the coping recommender.
"""


class CopingRecommenderError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(CopingRecommenderError, ValueError):
    """A caller supplied a record that breaks the input contract."""


class CatalogError(CopingRecommenderError):
    """The coping tool catalog could not be loaded."""
