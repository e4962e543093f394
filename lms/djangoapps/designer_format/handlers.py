"""
Signal handlers of the designer format.

Keeps the cached completion aggregates in step with the course and stores
the site wide section defaults on new sections.
"""

import logging

from django.db.models.signals import post_save
from django.dispatch import receiver
from eventtracking import tracker

from .cache import get_designer_cache
from .course_format import get_course_format
from .models import CourseFormatOption, DesignerModuleOption
from .options import delete_module_options, get_default_options
from .signals import (
    COURSE_COMPLETION_UPDATED,
    COURSE_MODULE_COMPLETION_UPDATED,
    COURSE_MODULE_CREATED,
    COURSE_MODULE_DELETED,
    COURSE_MODULE_UPDATED,
    COURSE_SECTION_CREATED,
    COURSE_SECTION_DELETED,
    COURSE_SECTION_UPDATED,
)

log = logging.getLogger(__name__)


@receiver(COURSE_SECTION_CREATED, dispatch_uid="designer_format_section_created")
def store_section_defaults(sender, course_key=None, section_id=None, **kwargs):  # pylint: disable=unused-argument
    """
    New sections carry no format options. Store the site wide defaults on them.
    """
    if course_key is None or section_id is None:
        log.exception('Section created signal sent without a course and section: %s', kwargs)
        return

    course_format = get_course_format(course_key)
    if course_format.is_designer_course():
        defaults = get_default_options()
        data = {'id': section_id}
        for name in course_format.section_format_options_list():
            if name in defaults:
                data[name] = defaults[name]
        course_format.update_section_format_options(data)

    invalidate_course_aggregates(course_key)


@receiver(COURSE_SECTION_UPDATED, dispatch_uid="designer_format_section_updated")
@receiver(COURSE_SECTION_DELETED, dispatch_uid="designer_format_section_deleted")
@receiver(COURSE_MODULE_CREATED, dispatch_uid="designer_format_module_created")
@receiver(COURSE_MODULE_UPDATED, dispatch_uid="designer_format_module_updated")
def course_content_changed(sender, course_key=None, **kwargs):  # pylint: disable=unused-argument
    if course_key is None:
        log.exception('Course content signal sent without a course: %s', kwargs)
        return
    invalidate_course_aggregates(course_key)


@receiver(COURSE_MODULE_DELETED, dispatch_uid="designer_format_module_deleted")
def module_deleted(sender, course_key=None, module_id=None, **kwargs):  # pylint: disable=unused-argument
    """
    Drop the design options of a deleted module along with the course aggregates.
    """
    if course_key is None or module_id is None:
        log.exception('Module deleted signal sent without a course and module: %s', kwargs)
        return
    deleted = delete_module_options(module_id)
    if deleted:
        log.info('Deleted %d designer options of module %s in course %s', deleted, module_id, course_key)
    invalidate_course_aggregates(course_key)


@receiver(COURSE_MODULE_COMPLETION_UPDATED, dispatch_uid="designer_format_module_completion_updated")
def module_completion_updated(sender, course_key=None, user_id=None, **kwargs):  # pylint: disable=unused-argument
    if course_key is None or user_id is None:
        log.exception('Module completion signal sent without a course and user: %s', kwargs)
        return
    invalidate_user_aggregates(course_key, user_id)


@receiver(COURSE_COMPLETION_UPDATED, dispatch_uid="designer_format_course_completion_updated")
def course_completion_updated(sender, course_key=None, user_id=None, **kwargs):  # pylint: disable=unused-argument
    """
    A completed course may be the prerequisite of other courses, so the
    user's criteria progress is dropped in every course.
    """
    if course_key is None or user_id is None:
        log.exception('Course completion signal sent without a course and user: %s', kwargs)
        return
    invalidate_user_aggregates(course_key, user_id)
    cache = get_designer_cache()
    cache.delete_prerequisites_courses()
    cache.delete_user_criteria_cache(user_id)


@receiver(post_save, sender=CourseFormatOption, dispatch_uid="emit_designer_section_option_event")
def emit_section_option_event(sender, instance, **kwargs):  # lint-amnesty, pylint: disable=unused-argument
    name = 'edx.designer_format.section_option.added' if kwargs.get('created', False) \
        else 'edx.designer_format.section_option.updated'
    tracker.emit(
        name,
        {
            'course_id': str(instance.course_key),
            'section_id': instance.section_id,
            'name': instance.name,
        }
    )


@receiver(post_save, sender=DesignerModuleOption, dispatch_uid="emit_designer_module_option_event")
def emit_module_option_event(sender, instance, **kwargs):  # lint-amnesty, pylint: disable=unused-argument
    name = 'edx.designer_format.module_option.added' if kwargs.get('created', False) \
        else 'edx.designer_format.module_option.updated'
    tracker.emit(
        name,
        {
            'course_id': str(instance.course_key),
            'module_id': instance.module_id,
            'name': instance.name,
        }
    )


def invalidate_course_aggregates(course_key):
    """
    Forget every cached aggregate derived from the course's sections and modules.
    """
    cache = get_designer_cache()
    cache.delete_valid_section_completed_cache(course_key)
    cache.delete_user_section_completed_cache(course_key)
    cache.delete_due_overdue_activities_count(course_key)
    cache.delete_course_progress_uncompletion_criteria(course_key)
    cache.delete_criteria_progress(course_key)
    cache.delete_completion_activities(course_key)


def invalidate_user_aggregates(course_key, user_id):
    cache = get_designer_cache()
    cache.delete_due_overdue_activities_count(course_key, user_id)
    cache.delete_course_progress_uncompletion_criteria(course_key, user_id)
    cache.delete_criteria_progress(course_key, user_id)
    cache.delete_user_section_completed_cache(course_key)
    cache.delete_valid_section_completed_cache(course_key)
