"""
The designer course format: course and section options, section naming and layout.
"""

import logging

from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy
from opaque_keys.edx.keys import CourseKey

from .constants import (
    DEVICE_WIDTH_CHOICES,
    FORMAT_NAME,
    HIDE_EVERYWHERE,
    HIDE_ON_COURSEPAGE,
    SECTION_WIDTHS,
    CourseDisplay,
    CourseProgressCalculation,
    CourseType,
)
from .cache import get_designer_cache
from .exceptions import UnsupportedSectionAction
from .models import CourseFormatOption
from .options import get_default_options
from .rendering import render_section
from .structure import get_structure_provider
from .toggles import ENABLE_POPUP_ACTIVITIES
from .utils import designer_setting

log = logging.getLogger(__name__)

COMPLETION_TRACKING_MISSING = gettext_lazy('Turn on completion tracking to display completion date.')
TIME_MANAGEMENT_MISSING = gettext_lazy('Time management tools are required for this feature.')
POPUP_ACTIVITIES_MISSING = gettext_lazy('Popup activities are not enabled on this site.')

DEVICE_WIDTH_LABELS = {
    'desktopwidth': gettext_lazy('Section width in desktop size'),
    'tabletwidth': gettext_lazy('Section width in tablet size'),
    'mobilewidth': gettext_lazy('Section width in phone size'),
}

# Options that only carry help text for the course settings form.
INFORMATIONAL_OPTIONS = {
    'courseduedateinfo': TIME_MANAGEMENT_MISSING,
    'coursecompletiondateinfo': COMPLETION_TRACKING_MISSING,
}


class DesignerCourseFormat:
    """
    The designer format of a single course.

    ``course_key`` may be None for the site wide settings page, where the
    section options of every course type are offered.
    """
    name = FORMAT_NAME

    uses_sections = True
    uses_indentation = False
    supports_components = True
    supports_ajax = True
    supports_news = True

    def __init__(self, course_key=None, provider=None):
        if course_key is not None and not isinstance(course_key, CourseKey):
            course_key = CourseKey.from_string(str(course_key))
        self.course_key = course_key
        self._provider = provider

    @property
    def provider(self):
        if self._provider is None:
            self._provider = get_structure_provider()
        return self._provider

    def get_structure(self):
        return self.provider.get_structure(self.course_key)

    def get_course(self):
        """
        Return the course record with the designer course options merged in.
        """
        course = dict(self.provider.get_course(self.course_key))
        course.update(self.get_course_options())
        return course

    def is_designer_course(self):
        return self.provider.get_course(self.course_key).get('format', FORMAT_NAME) == FORMAT_NAME

    def uses_course_index(self, on_module_page=False):
        courseindex = self.get_course_options().get('courseindex')
        if courseindex == HIDE_EVERYWHERE:
            return False
        if courseindex == HIDE_ON_COURSEPAGE and not on_module_page:
            return False
        return True

    def can_delete_section(self, section):  # pylint: disable=unused-argument
        return True

    def allow_stealth_module_visibility(self, section):
        return not section.section or section.visible

    def get_section_name(self, section):
        if section.name:
            return section.name
        return self.get_default_section_name(section)

    def get_default_section_name(self, section):
        if section.section == 0:
            return _('General')
        return '{name} {number}'.format(name=_('Designer section'), number=section.section)

    def get_view_url(self, section=None, sr=None, navigation=False):
        """
        Return the URL of the course page showing ``section``.

        ``section`` is a SectionInfo or a section number. ``sr`` overrides the
        course display: a truthy value opens that section on its own page, 0
        keeps every section on one page. Returns None for navigation links
        when sections are not linked on this site.
        """
        url = designer_setting('COURSE_VIEW_URL').format(course_key=self.course_key)
        section_number = getattr(section, 'section', section)
        if section_number is None:
            return url

        if sr is not None:
            if sr:
                course_display = CourseDisplay.multi_page
                section_number = sr
            else:
                course_display = CourseDisplay.single_page
        else:
            course_display = self.get_course_options().get('coursedisplay')

        if section_number != 0 and course_display == CourseDisplay.multi_page:
            return '{url}?section={number}'.format(url=url, number=section_number)
        if navigation and not designer_setting('LINK_COURSE_SECTIONS'):
            return None
        return '{url}#section-{number}'.format(url=url, number=section_number)

    @staticmethod
    def course_format_options_list():
        """
        Return the course options of the format as ``{name: {'default', 'type'}}``.
        """
        return {
            'coursetype': {'default': CourseType.normal, 'type': int},
            'popupactivities': {'default': 0, 'type': int},
            'popupactivitiesinfo': {'default': str(POPUP_ACTIVITIES_MISSING), 'type': str},
            'coursedisplay': {'default': designer_setting('COURSE_DISPLAY'), 'type': int},
            'hiddensections': {'default': designer_setting('HIDDEN_SECTIONS'), 'type': int},
            'showanimation': {'default': 1, 'type': int},
            'accordion': {'default': 0, 'type': int},
            'initialstate': {'default': 3, 'type': int},
            'listwidth': {'default': '400px', 'type': str},
            'courseheader': {'default': _('Course header'), 'type': str},
            'activityprogress': {'default': 0, 'type': int},
            'calcourseprogress': {'default': CourseProgressCalculation.criteria, 'type': str},
            'enrolmentstartdate': {'default': 0, 'type': int},
            'enrolmentenddate': {'default': 0, 'type': int},
            'coursecompletiondate': {'default': 0, 'type': int},
            'coursecompletiondateinfo': {'default': str(COMPLETION_TRACKING_MISSING), 'type': str},
            'courseduedate': {'default': 0, 'type': int},
            'courseduedateinfo': {'default': str(TIME_MANAGEMENT_MISSING), 'type': str},
            'courseindex': {'default': 0, 'type': int},
        }

    def section_format_options_list(self, for_edit_form=False):
        """
        Return the section options of the format.

        Flow courses place sections themselves, so they get no width options.
        """
        design = get_default_options()
        options = {
            'sectiontype': {
                'type': str,
                'label': '',
                'element_type': 'hidden',
                'default': 'default',
            },
            'sectionlayoutheader': {
                'type': str,
                'label': '',
                'element_type': 'header',
                'default': _('Layouts'),
            },
        }

        settings_page = self.course_key is None
        if settings_page or self.get_course_options().get('coursetype') != CourseType.flow:
            for device, size in DEVICE_WIDTH_CHOICES:
                name = device + 'width'
                options[name] = {
                    'type': int,
                    'label': DEVICE_WIDTH_LABELS[name],
                    'element_type': 'select',
                    'choices': list(enumerate(SECTION_WIDTHS[:size])),
                    'default': design.get(name, 0) if for_edit_form else 0,
                }
                if design.get(name + '_adv'):
                    options[name]['adv'] = True
        return options

    def get_course_options(self):
        """
        Return the course options, stored values overriding the defaults.
        """
        option_list = self.course_format_options_list()
        values = {name: spec['default'] for name, spec in option_list.items()}
        if self.course_key is None:
            return values
        for name, value in self.get_section_options(0).items():
            if name in option_list:
                values[name] = _cast(option_list[name]['type'], value, values[name])
        return values

    def get_config_for_external(self):
        return self.get_course_options()

    def update_course_format_options(self, data, old_course=None):
        """
        Store the course options found in ``data``.

        When called for an existing course, ``old_course`` holds its previous
        record: options missing from ``data`` keep their old value. Switching
        a course to the kanban type turns every section into a card column.
        Returns whether any stored value changed.
        """
        data = dict(data)
        if old_course is not None:
            old_course = dict(old_course)
            for name in self.course_format_options_list():
                if name not in data and name in old_course:
                    data[name] = old_course[name]
                if name in INFORMATIONAL_OPTIONS:
                    data[name] = str(INFORMATIONAL_OPTIONS[name])
                if name == 'popupactivities' and not ENABLE_POPUP_ACTIVITIES.is_enabled():
                    data[name] = 0
            if 'coursetype' in data:
                is_kanban = _cast(int, data['coursetype'], None) == CourseType.kanban
                if is_kanban and _cast(int, old_course.get('coursetype'), None) != CourseType.kanban:
                    self.setup_kanban_layouts()
                if is_kanban:
                    data['coursedisplay'] = CourseDisplay.single_page
        elif _cast(int, data.get('coursetype'), None) == CourseType.kanban:
            self.setup_kanban_layouts()
            data['coursedisplay'] = CourseDisplay.single_page

        data.pop('courseheader', None)
        data.pop('popupactivitiesinfo', None)
        return self.update_format_options(data)

    def update_section_format_options(self, data):
        """
        Store the section options found in ``data``; ``data['id']`` names the section.
        """
        data = dict(data)
        if not data.get('sectionlayoutheader'):
            data['sectionlayoutheader'] = _('Layouts')
        return self.update_format_options(data, data['id'])

    def update_format_options(self, data, section_id=0):
        """
        Store the known options present in ``data`` for the course (section 0) or a section.
        """
        if section_id:
            option_list = self.section_format_options_list()
        else:
            option_list = self.course_format_options_list()
        stored = self.get_section_options(section_id)
        changed = False
        for name, spec in option_list.items():
            if name not in data:
                continue
            value = _cast(spec['type'], data[name], spec['default'])
            if stored.get(name) != str(value):
                self.set_section_option(section_id, name, str(value))
                changed = True
        if changed and not section_id:
            # Course progress is counted according to the course options.
            cache = get_designer_cache()
            cache.delete_criteria_progress(self.course_key)
            cache.delete_course_progress_uncompletion_criteria(self.course_key)
        return changed

    def setup_kanban_layouts(self):
        """
        Lay every section but the general one out as a single card column.
        """
        log.info('Switching the sections of %s to kanban card layouts', self.course_key)
        for section in self.get_structure().sections:
            if section.section == 0:
                continue
            self.set_section_option(section.id, 'sectiontype', 'cards')
            self.set_section_option(section.id, 'layoutmobilecolumn', '1')
            self.set_section_option(section.id, 'layouttabletcolumn', '1')
            self.set_section_option(section.id, 'layoutdesktopcolumn', '1')

    def set_section_option(self, section_id, name, value):
        """
        Create or update an option of a section and return the option's id.
        """
        option, __ = CourseFormatOption.objects.update_or_create(
            course_key=self.course_key,
            format=FORMAT_NAME,
            section_id=section_id,
            name=name,
            defaults={'value': value},
        )
        return option.id

    def get_section_option(self, section_id, name):
        value = CourseFormatOption.objects.filter(
            course_key=self.course_key, format=FORMAT_NAME, section_id=section_id, name=name,
        ).values_list('value', flat=True).first()
        return value or None

    def get_section_options(self, section_id):
        return dict(
            CourseFormatOption.objects.filter(
                course_key=self.course_key, format=FORMAT_NAME, section_id=section_id,
            ).values_list('name', 'value')
        )

    def get_module_layout_class(self, section):
        section_type = self.get_section_option(section.id, 'sectiontype') or 'default'
        if section_type == 'list':
            return ' position-relative '
        if section_type == 'cards':
            return ' card '
        return ''

    def section_action(self, section, action, user=None):
        """
        Run an AJAX section action. Only ``refresh`` is handled by the format.
        """
        if action == 'refresh':
            return {'content': render_section(self, section, user)}
        raise UnsupportedSectionAction(action)


def get_course_format(course_key, provider=None):
    return DesignerCourseFormat(course_key, provider=provider)


def _cast(cast, value, default):
    try:
        return cast(value)
    except (TypeError, ValueError):
        return default
