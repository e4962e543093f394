"""
HTML fragments the designer format returns to its front end scripts.
"""

from django.template.loader import render_to_string

from .options import get_activity_element_classes
from .progress import get_section_completion, section_has_tracked_modules
from .utils import format_date, section_width_classes


def _user_id(user):
    if user is None or not user.is_authenticated:
        return None
    return user.id


def get_module_context(course_format, module, user=None, completion_states=None):
    """
    Return the template context of a module card.
    """
    user_id = _user_id(user)
    if completion_states is None and user_id is not None and module.tracks_completion:
        completion_states = course_format.provider.get_completion_states(course_format.course_key, user_id)
    return {
        'module': module,
        'element_classes': get_activity_element_classes(module.id),
        'completion_state': (completion_states or {}).get(module.id),
        'due_date': format_date(module.due.timestamp()) if module.due else '',
    }


def render_module(course_format, module, user=None):
    """
    Render a module card on its own, laid out like the other cards of its section.
    """
    section = course_format.get_structure().get_section(module.section_id)
    context = get_module_context(course_format, module, user)
    context['layout_class'] = course_format.get_module_layout_class(section)
    return render_to_string('designer_format/module.html', context)


def render_section(course_format, section, user=None):
    """
    Render a section and the modules the user can see in it.
    """
    user_id = _user_id(user)
    section_options = course_format.get_section_options(section.id)
    completion_states = None
    progress = None
    if user_id is not None and section_has_tracked_modules(course_format, section):
        completion_states = course_format.provider.get_completion_states(course_format.course_key, user_id)
        __, percent, is_complete = get_section_completion(course_format, section, user_id)
        progress = {'percent': round(percent), 'complete': is_complete}

    modules = [
        get_module_context(course_format, module, user, completion_states or {})
        for module in section.modules
        if module.visible and not module.deletion_in_progress
    ]
    return render_to_string('designer_format/section.html', {
        'section': section,
        'section_name': course_format.get_section_name(section),
        'section_url': course_format.get_view_url(section, navigation=True),
        'section_type': section_options.get('sectiontype', 'default'),
        'width_classes': section_width_classes(section_options),
        'layout_class': course_format.get_module_layout_class(section),
        'modules': modules,
        'progress': progress,
    })
