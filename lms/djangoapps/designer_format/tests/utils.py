"""
Test helpers: an in-memory course structure provider and builders for its structures.
"""

from opaque_keys.edx.keys import CourseKey

from lms.djangoapps.designer_format.constants import FORMAT_NAME, CompletionTracking
from lms.djangoapps.designer_format.structure import (
    CourseStructure,
    CourseStructureProvider,
    ModuleInfo,
    SectionInfo,
)

COURSE_KEY = CourseKey.from_string('course-v1:edX+Designer+2024')
PROVIDER_PATH = 'lms.djangoapps.designer_format.tests.utils.InMemoryStructureProvider'


class InMemoryStructureProvider(CourseStructureProvider):
    """
    CourseStructureProvider backed by class level dicts the tests fill in.
    """
    structures = {}
    courses = {}
    completion_states = {}
    completed_courses = set()

    @classmethod
    def reset(cls):
        cls.structures.clear()
        cls.courses.clear()
        cls.completion_states.clear()
        cls.completed_courses.clear()

    @classmethod
    def add_course(cls, structure, **course):
        course.setdefault('format', FORMAT_NAME)
        cls.structures[str(structure.course_key)] = structure
        cls.courses[str(structure.course_key)] = course
        return structure

    @classmethod
    def set_completion(cls, course_key, user_id, module_id, state):
        cls.completion_states.setdefault((str(course_key), user_id), {})[module_id] = state

    @classmethod
    def complete_course(cls, course_key, user_id):
        cls.completed_courses.add((str(course_key), user_id))

    def get_structure(self, course_key):
        return self.structures[str(course_key)]

    def get_completion_states(self, course_key, user_id):
        return dict(self.completion_states.get((str(course_key), user_id), {}))

    def is_course_complete(self, course_key, user_id):
        return (str(course_key), user_id) in self.completed_courses

    def get_course(self, course_key):
        return self.courses.get(str(course_key), {'format': FORMAT_NAME})


def make_module(module_id, section_id, tracked=True, **kwargs):
    kwargs.setdefault('name', f'Activity {module_id}')
    kwargs.setdefault('modname', 'page')
    kwargs.setdefault('url', f'/modules/{module_id}/')
    if tracked:
        kwargs.setdefault('completion', CompletionTracking.manual)
    return ModuleInfo(id=module_id, section_id=section_id, **kwargs)


def make_structure(course_key=COURSE_KEY, sections=3, modules_per_section=2, **kwargs):
    """
    Build a course with a general section 0 and ``sections - 1`` numbered sections.

    Section ids are ``100 + number`` and module ids ``section_id * 10 + n``.
    """
    built = []
    for number in range(sections):
        section_id = 100 + number
        modules = tuple(
            make_module(section_id * 10 + index, section_id)
            for index in range(1, modules_per_section + 1)
        )
        built.append(SectionInfo(id=section_id, section=number, modules=modules))
    return CourseStructure(course_key=course_key, sections=tuple(built), **kwargs)
