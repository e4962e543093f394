"""
Course structure value objects and the provider the host platform plugs in.

The designer format does not own sections or modules. The platform describes
a course through a ``CourseStructureProvider`` named by
``DESIGNER_FORMAT['STRUCTURE_PROVIDER']``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .constants import CompletionTracking
from .exceptions import ModuleNotFound, SectionNotFound
from .utils import designer_setting


@dataclass(frozen=True)
class ModuleInfo:
    """
    A course module (activity) as seen by the current user.
    """
    id: int
    section_id: int
    name: str
    modname: str
    url: str = ''
    visible: bool = True
    completion: int = CompletionTracking.none
    deletion_in_progress: bool = False
    due: datetime | None = None

    @property
    def tracks_completion(self) -> bool:
        return self.completion != CompletionTracking.none


@dataclass(frozen=True)
class SectionInfo:
    """
    A course section with its modules in display order.
    """
    id: int
    section: int
    name: str = ''
    visible: bool = True
    modules: tuple[ModuleInfo, ...] = ()


@dataclass(frozen=True)
class CourseStructure:
    """
    The sections of a course plus the data completion criteria are computed from.
    """
    course_key: object
    sections: tuple[SectionInfo, ...] = ()
    completion_enabled: bool = True
    # Module ids the course completion criteria require.
    criteria_module_ids: tuple[int, ...] = ()
    # Course keys whose completion the course completion criteria require.
    criteria_course_keys: tuple = ()

    def get_section(self, section_id):
        """
        Return the section with the given id, raising SectionNotFound otherwise.
        """
        for section in self.sections:
            if section.id == section_id:
                return section
        raise SectionNotFound(f'Section {section_id} is not part of {self.course_key}')

    def get_section_by_number(self, number):
        for section in self.sections:
            if section.section == number:
                return section
        raise SectionNotFound(f'Section number {number} is not part of {self.course_key}')

    def get_module(self, module_id):
        """
        Return the module with the given id, raising ModuleNotFound otherwise.
        """
        for module in self.modules:
            if module.id == module_id:
                return module
        raise ModuleNotFound(f'Module {module_id} is not part of {self.course_key}')

    @property
    def modules(self):
        return [module for section in self.sections for module in section.modules]


class CourseStructureProvider:
    """
    Interface the host platform implements to describe its courses.
    """

    def get_structure(self, course_key) -> CourseStructure:
        raise NotImplementedError

    def get_completion_states(self, course_key, user_id) -> dict:
        """
        Return ``{module_id: CompletionState}`` for the user's tracked modules.
        """
        raise NotImplementedError

    def is_course_complete(self, course_key, user_id) -> bool:
        raise NotImplementedError

    def get_course(self, course_key) -> dict:
        """
        Return the course record fields the format reads (``format``, ``enablecompletion`` ...).
        """
        return {'format': 'designer'}


def get_structure_provider():
    """
    Instantiate the configured CourseStructureProvider.
    """
    path = designer_setting('STRUCTURE_PROVIDER')
    if not path:
        raise ImproperlyConfigured("DESIGNER_FORMAT['STRUCTURE_PROVIDER'] must name a CourseStructureProvider")
    return import_string(path)()
