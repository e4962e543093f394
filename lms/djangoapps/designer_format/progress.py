"""
Completion aggregates of designer courses.

Every aggregate is cached through ``DesignerCache`` and invalidated by the
signal handlers when completion state, sections or modules change.
"""

from django.utils import timezone

from . import cache as designer_cache
from .cache import aggregate_key, get_designer_cache
from .constants import CourseProgressCalculation
from .options import is_mod_completed, is_section_completed


def get_completion_activities(course_format):
    """
    Return the visible, completion tracked modules of the course in display order.
    """
    def compute():
        return [
            module for module in course_format.get_structure().modules
            if module.tracks_completion and not module.deletion_in_progress and module.visible
        ]

    key, scopes = aggregate_key(designer_cache.COMPLETION_ACTIVITIES, course_format.course_key)
    return get_designer_cache().get_or_set(key, compute, scopes)


def section_has_tracked_modules(course_format, section):
    """
    Return whether the section holds a module its learners can complete.
    """
    def compute():
        return section.visible and any(
            module.visible and module.tracks_completion for module in section.modules
        )

    key, scopes = aggregate_key(
        designer_cache.VALID_SECTION_COMPLETED, course_format.course_key, section_id=section.id,
    )
    return get_designer_cache().get_or_set(key, compute, scopes)


def get_section_completion(course_format, section, user_id):
    """
    Return the ``(has_tracked_modules, progress, is_complete)`` triple of a section for a user.
    """
    def compute():
        states = course_format.provider.get_completion_states(course_format.course_key, user_id)
        return is_section_completed(section, states)

    key, scopes = aggregate_key(
        designer_cache.SECTION_COMPLETED, course_format.course_key, section_id=section.id, user_id=user_id,
    )
    return get_designer_cache().get_or_set(key, compute, scopes)


def is_prerequisite_complete(course_format, prerequisite_key, user_id):
    def compute():
        return course_format.provider.is_course_complete(prerequisite_key, user_id)

    key, scopes = aggregate_key(designer_cache.PREREQUISITE_COURSES, prerequisite_key, user_id=user_id)
    return get_designer_cache().get_or_set(key, compute, scopes)


def criteria_progress(course_format, user_id):
    """
    Return the user's progress through the course completion criteria.

    The criteria are the course's activity criteria plus its prerequisite
    courses, or every completion tracked activity when the course counts
    progress over all activities. Activity criteria that are hidden or no
    longer tracked still count but are never completed.

    Returns None when completion is disabled or nothing counts towards it,
    otherwise a dict with the ``count`` of criteria, how many are
    ``completed``, the rounded ``percent``, the ``remain`` percentage, and
    the ``completed_criteria`` / ``uncompleted_criteria`` lists.
    """
    def compute():
        structure = course_format.get_structure()
        if not structure.completion_enabled:
            return None

        modules = {module.id: module for module in get_completion_activities(course_format)}
        calculation = course_format.get_course_options().get('calcourseprogress')
        if calculation == CourseProgressCalculation.all_activities:
            module_ids = list(modules)
            course_keys = ()
        else:
            module_ids = list(structure.criteria_module_ids)
            course_keys = structure.criteria_course_keys

        count = len(module_ids) + len(course_keys)
        if not count:
            return None

        states = course_format.provider.get_completion_states(course_format.course_key, user_id)
        completed = 0
        completed_criteria = []
        uncompleted_criteria = []
        for module_id in module_ids:
            module = modules.get(module_id)
            if module is None:
                continue
            criterion = {'type': 'activity', 'name': module.name, 'url': module.url}
            if is_mod_completed(module, states):
                completed += 1
                completed_criteria.append(criterion)
            else:
                uncompleted_criteria.append(criterion)

        for course_key in course_keys:
            criterion = {'type': 'course', 'name': str(course_key), 'url': ''}
            if is_prerequisite_complete(course_format, course_key, user_id):
                completed += 1
                completed_criteria.append(criterion)
            else:
                uncompleted_criteria.append(criterion)

        percent = completed / count * 100
        return {
            'count': count,
            'completed': completed,
            'percent': round(percent),
            'remain': 100 - percent,
            'completed_criteria': completed_criteria,
            'uncompleted_criteria': uncompleted_criteria,
        }

    key, scopes = aggregate_key(designer_cache.CRITERIA_PROGRESS, course_format.course_key, user_id=user_id)
    return get_designer_cache().get_or_set(key, compute, scopes)


def get_uncompleted_criteria(course_format, user_id):
    def compute():
        progress = criteria_progress(course_format, user_id)
        return progress['uncompleted_criteria'] if progress else []

    key, scopes = aggregate_key(designer_cache.UNCOMPLETED_CRITERIA, course_format.course_key, user_id=user_id)
    return get_designer_cache().get_or_set(key, compute, scopes)


def due_overdue_activities_count(course_format, user_id):
    """
    Count the user's incomplete visible modules that are due today or overdue.
    """
    def compute():
        now = timezone.now()
        states = course_format.provider.get_completion_states(course_format.course_key, user_id)
        dues = overdues = 0
        for module in course_format.get_structure().modules:
            if module.deletion_in_progress or not module.visible or module.due is None:
                continue
            if is_mod_completed(module, states):
                continue
            if module.due < now:
                overdues += 1
            if module.due.astimezone(now.tzinfo).date() == now.date():
                dues += 1
        return {'dues': dues, 'overdues': overdues}

    key, scopes = aggregate_key(designer_cache.DUE_OVERDUE_ACTIVITIES, course_format.course_key, user_id=user_id)
    return get_designer_cache().get_or_set(key, compute, scopes)
