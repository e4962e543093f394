"""
Exceptions raised by the designer course format.
"""

from django.core.exceptions import ObjectDoesNotExist


class SectionNotFound(ObjectDoesNotExist):
    """
    The requested section is not part of the course.
    """
    pass  # lint-amnesty, pylint: disable=unnecessary-pass


class ModuleNotFound(ObjectDoesNotExist):
    """
    The requested course module is not part of the course.
    """
    pass  # lint-amnesty, pylint: disable=unnecessary-pass


class UnsupportedSectionAction(ValueError):
    """
    A section action this format does not implement was requested.
    """
    pass  # lint-amnesty, pylint: disable=unnecessary-pass
