"""
Domain exceptions for the esport data generator.
"""

class EsportFakerException(Exception):
    """Base exception for esport data errors."""
    pass

class EmptyCategoryException(EsportFakerException, ValueError):
    """Raised when a locale definition is built with an empty category list or value."""
    pass
