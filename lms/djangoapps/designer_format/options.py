"""
Design options of course modules, and the site wide design defaults.
"""

import json
import logging

from opaque_keys.edx.keys import CourseKey

from .constants import ACTIVITY_ELEMENTS, ELEMENT_VISIBILITY_CLASSES, CompletionState
from .models import DesignerModuleOption
from .utils import designer_setting

log = logging.getLogger(__name__)

BACKGROUND_STYLE_FIELDS = ('size', 'size_adv', 'position', 'position_adv', 'repeat', 'repeat_adv')
MASK_STYLE_FIELDS = ('size', 'size_adv', 'position', 'position_adv', 'image')


def is_json(value):
    """
    Return True when ``value`` is a JSON document other than ``null``.
    """
    try:
        return json.loads(value) is not None
    except (TypeError, ValueError):
        return False


def get_option(module_id, name):
    """
    Return the raw stored value of a module option, or None.
    """
    value = DesignerModuleOption.objects.filter(
        module_id=module_id, name=name
    ).values_list('value', flat=True).first()
    return value or None


def get_options(module_id):
    """
    Return every option of a module, decoding the JSON encoded ones.
    """
    options = {}
    for option in DesignerModuleOption.objects.filter(module_id=module_id):
        options[option.name] = json.loads(option.value) if is_json(option.value) else option.value
    return options


def insert_option(module_id, course_key, name, value):
    """
    Create or update a module option. Empty values are stored as ''.
    """
    course_key = CourseKey.from_string(str(course_key))
    option, created = DesignerModuleOption.objects.update_or_create(
        module_id=module_id,
        course_key=course_key,
        name=name,
        defaults={'value': value or ''},
    )
    log.info(
        '%s designer option %s of module %s in course %s',
        'Created' if created else 'Updated', name, module_id, course_key,
    )
    return option


def delete_module_options(module_id):
    deleted, __ = DesignerModuleOption.objects.filter(module_id=module_id).delete()
    return deleted


def get_default_options():
    """
    Assemble the site wide design defaults of courses, sections and modules.

    Flat ``bgimagestyle_*``, ``maskstyle_*`` and ``activityelements_*``
    settings are grouped into dicts of the same name.
    """
    design = dict(designer_setting('DEFAULTS'))
    design['bgimagestyle'] = {
        name: design.get('bgimagestyle_' + name, '') for name in BACKGROUND_STYLE_FIELDS
    }
    design['maskstyle'] = {
        name: design.get('maskstyle_' + name, 0 if name.endswith('_adv') else '') for name in MASK_STYLE_FIELDS
    }
    design['activityelements'] = {
        element: design.get('activityelements_' + element, '') for element in ACTIVITY_ELEMENTS
    }
    design.pop('sectiondesignerbackgroundimage', None)
    return design


def save_module_design(module_id, course_key, data):
    """
    Store the designer fields submitted with a module's edit form.

    Only ``designer_*`` fields are stored, under the name without the prefix.
    Dict values are stored JSON encoded.
    """
    for field in ('designer_activityelements',):
        if field not in data:
            continue
        value = data[field]
        if isinstance(value, dict):
            value = json.dumps(value)
        insert_option(module_id, course_key, field[len('designer_'):], value)
    return data


def get_activity_element_classes(module_id):
    """
    Map the element visibility chosen for a module to the css classes rendered for it.
    """
    option = get_option(module_id, 'activityelements')
    if not option:
        return {}
    elements = json.loads(option)
    return {
        element: ELEMENT_VISIBILITY_CLASSES.get(_as_int(visibility), visibility)
        for element, visibility in elements.items()
    }


def is_mod_completed(module, completion_states):
    """
    Return True when the user completed ``module`` (or completed it with a pass).
    """
    return completion_states.get(module.id, CompletionState.incomplete) in CompletionState.COMPLETED


def is_section_completed(section, completion_states, result=False):
    """
    Compute the user's completion of the tracked modules of a section.

    With ``result`` only the bool "every tracked module is complete" is
    returned. Otherwise the triple ``(has_tracked_modules, progress, is_complete)``
    where progress is a percentage.
    """
    total = completed = 0
    if section.visible:
        for module in section.modules:
            if module.visible and module.tracks_completion:
                total += 1
                if is_mod_completed(module, completion_states):
                    completed += 1

    progress = completed / total * 100 if total else 0
    is_complete = progress == 100
    if result:
        return is_complete
    return bool(total), progress, is_complete


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return value
