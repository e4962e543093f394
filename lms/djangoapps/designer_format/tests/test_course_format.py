"""
Tests for the designer course format.
"""

import ddt
import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase, override_settings

from lms.djangoapps.designer_format.constants import (
    HIDE_EVERYWHERE,
    HIDE_ON_COURSEPAGE,
    CourseDisplay,
    CourseType,
)
from lms.djangoapps.designer_format.course_format import DesignerCourseFormat, get_course_format
from lms.djangoapps.designer_format.exceptions import UnsupportedSectionAction
from lms.djangoapps.designer_format.models import CourseFormatOption
from lms.djangoapps.designer_format.structure import SectionInfo

from .utils import COURSE_KEY, InMemoryStructureProvider, make_structure

VIEW_URL = f'/courses/{COURSE_KEY}/course/'


class DesignerFormatTestCase(TestCase):
    """
    Base class registering a three section designer course.
    """

    def setUp(self):
        super().setUp()
        InMemoryStructureProvider.reset()
        self.addCleanup(InMemoryStructureProvider.reset)
        self.structure = InMemoryStructureProvider.add_course(make_structure())
        self.course_format = get_course_format(COURSE_KEY)


@ddt.ddt
class SectionNameTestCase(DesignerFormatTestCase):
    """
    Tests for section naming.
    """

    @ddt.data((0, 'General'), (1, 'Designer section 1'), (2, 'Designer section 2'))
    @ddt.unpack
    def test_default_section_name(self, number, expected):
        section = self.structure.get_section_by_number(number)
        assert self.course_format.get_default_section_name(section) == expected
        assert self.course_format.get_section_name(section) == expected

    def test_customised_section_name(self):
        section = SectionInfo(id=101, section=1, name='Getting started')
        assert self.course_format.get_section_name(section) == 'Getting started'


class ViewUrlTestCase(DesignerFormatTestCase):
    """
    Tests for get_view_url.
    """

    def test_course_url(self):
        assert self.course_format.get_view_url() == VIEW_URL
        assert self.course_format.get_view_url(None) == VIEW_URL

    def test_single_page(self):
        assert self.course_format.get_view_url(0) == VIEW_URL + '#section-0'
        assert self.course_format.get_view_url(self.structure.get_section_by_number(1)) == VIEW_URL + '#section-1'

    def test_multi_page(self):
        self.course_format.update_course_format_options({'coursedisplay': CourseDisplay.multi_page})

        assert self.course_format.get_view_url(1) == VIEW_URL + '?section=1'
        assert self.course_format.get_view_url(0) == VIEW_URL + '#section-0'

    def test_section_return(self):
        assert self.course_format.get_view_url(1, sr=2) == VIEW_URL + '?section=2'
        self.course_format.update_course_format_options({'coursedisplay': CourseDisplay.multi_page})
        assert self.course_format.get_view_url(1, sr=0) == VIEW_URL + '#section-1'

    def test_navigation(self):
        with override_settings(DESIGNER_FORMAT={'LINK_COURSE_SECTIONS': False}):
            assert self.course_format.get_view_url(1, navigation=True) is None
            assert self.course_format.get_view_url(0, navigation=True) is None
            assert self.course_format.get_view_url(1) == VIEW_URL + '#section-1'
        assert self.course_format.get_view_url(1, navigation=True) == VIEW_URL + '#section-1'
        assert self.course_format.get_view_url(0, navigation=True) == VIEW_URL + '#section-0'


@ddt.ddt
class CourseOptionsTestCase(DesignerFormatTestCase):
    """
    Tests for the course level options.
    """

    def test_defaults(self):
        options = self.course_format.get_course_options()
        assert options['coursetype'] == CourseType.normal
        assert options['coursedisplay'] == CourseDisplay.single_page
        assert options['initialstate'] == 3
        assert options['listwidth'] == '400px'
        assert options['calcourseprogress'] == 'criteria'

    def test_stored_values_are_cast(self):
        self.course_format.set_section_option(0, 'coursetype', '3')
        self.course_format.set_section_option(0, 'accordion', 'not a number')
        self.course_format.set_section_option(0, 'unknown', 'ignored')

        options = self.course_format.get_course_options()

        assert options['coursetype'] == CourseType.flow
        assert options['accordion'] == 0
        assert 'unknown' not in options

    def test_update_returns_whether_changed(self):
        assert self.course_format.update_course_format_options({'accordion': 1})
        assert not self.course_format.update_course_format_options({'accordion': '1'})
        assert self.course_format.get_section_option(0, 'accordion') == '1'

    def test_header_options_are_not_stored(self):
        self.course_format.update_course_format_options({'courseheader': 'Header', 'popupactivitiesinfo': 'Info'})
        assert self.course_format.get_section_options(0) == {}

    def test_missing_values_copied_from_old_course(self):
        self.course_format.update_course_format_options({'accordion': 0}, old_course={'accordion': 1, 'showanimation': 0})

        stored = self.course_format.get_section_options(0)
        assert stored['accordion'] == '0'
        assert stored['showanimation'] == '0'
        assert stored['courseduedateinfo'] == 'Time management tools are required for this feature.'

    def test_popup_activities_disabled(self):
        self.course_format.update_course_format_options({'popupactivities': 1}, old_course={})
        assert self.course_format.get_course_options()['popupactivities'] == 0

    def test_popup_activities_enabled(self):
        with override_settings(DESIGNER_FORMAT={'ENABLE_POPUP_ACTIVITIES': True}):
            self.course_format.update_course_format_options({'popupactivities': 1}, old_course={})
        assert self.course_format.get_course_options()['popupactivities'] == 1

    def test_kanban_setup(self):
        self.course_format.update_course_format_options({'coursedisplay': CourseDisplay.multi_page})

        self.course_format.update_course_format_options({'coursetype': CourseType.kanban}, old_course={'coursetype': 0})

        for section in self.structure.sections[1:]:
            assert self.course_format.get_section_option(section.id, 'sectiontype') == 'cards'
            for device in ('mobile', 'tablet', 'desktop'):
                assert self.course_format.get_section_option(section.id, f'layout{device}column') == '1'
        assert self.course_format.get_section_option(self.structure.sections[0].id, 'sectiontype') is None
        assert self.course_format.get_course_options()['coursedisplay'] == CourseDisplay.single_page

    def test_new_kanban_course(self):
        self.course_format.update_course_format_options({'coursetype': CourseType.kanban})
        assert self.course_format.get_section_option(101, 'sectiontype') == 'cards'

    @ddt.data(
        (0, False, True),
        (0, True, True),
        (HIDE_ON_COURSEPAGE, False, False),
        (HIDE_ON_COURSEPAGE, True, True),
        (HIDE_EVERYWHERE, True, False),
    )
    @ddt.unpack
    def test_uses_course_index(self, courseindex, on_module_page, expected):
        self.course_format.update_course_format_options({'courseindex': courseindex})
        assert self.course_format.uses_course_index(on_module_page) is expected

    def test_config_for_external(self):
        self.course_format.update_course_format_options({'coursetype': CourseType.collapsible})
        assert self.course_format.get_config_for_external()['coursetype'] == CourseType.collapsible

    def test_get_course(self):
        course = self.course_format.get_course()
        assert course['format'] == 'designer'
        assert course['coursetype'] == CourseType.normal


class SectionOptionsTestCase(DesignerFormatTestCase):
    """
    Tests for the section level options.
    """

    def test_set_section_option(self):
        option_id = self.course_format.set_section_option(101, 'sectiontype', 'list')
        assert self.course_format.set_section_option(101, 'sectiontype', 'cards') == option_id
        assert self.course_format.get_section_option(101, 'sectiontype') == 'cards'
        assert CourseFormatOption.objects.filter(section_id=101).count() == 1

    def test_get_section_options(self):
        self.course_format.set_section_option(101, 'sectiontype', 'list')
        self.course_format.set_section_option(101, 'desktopwidth', '2')
        self.course_format.set_section_option(102, 'sectiontype', 'cards')

        assert self.course_format.get_section_options(101) == {'sectiontype': 'list', 'desktopwidth': '2'}

    def test_missing_section_option(self):
        assert self.course_format.get_section_option(101, 'sectiontype') is None

    def test_options_list(self):
        options = self.course_format.section_format_options_list()

        assert set(options) == {'sectiontype', 'sectionlayoutheader', 'desktopwidth', 'tabletwidth', 'mobilewidth'}
        assert [label for __, label in options['desktopwidth']['choices']] == ['100%', '50%', '33%', '25%', '20%']
        assert len(options['tabletwidth']['choices']) == 3
        assert len(options['mobilewidth']['choices']) == 2

    def test_flow_course_has_no_widths(self):
        self.course_format.update_course_format_options({'coursetype': CourseType.flow})
        assert set(self.course_format.section_format_options_list()) == {'sectiontype', 'sectionlayoutheader'}

    def test_settings_page_offers_widths(self):
        assert 'desktopwidth' in DesignerCourseFormat().section_format_options_list()

    @override_settings(DESIGNER_FORMAT={'DEFAULTS': {'desktopwidth': 2}})
    def test_edit_form_defaults(self):
        options = self.course_format.section_format_options_list(for_edit_form=True)
        assert options['desktopwidth']['default'] == 2
        assert options['tabletwidth']['default'] == 0

    def test_update_section_format_options(self):
        changed = self.course_format.update_section_format_options({'id': 101, 'desktopwidth': '3', 'other': 'x'})

        assert changed
        assert self.course_format.get_section_options(101) == {
            'desktopwidth': '3',
            'sectionlayoutheader': 'Layouts',
        }

    def test_update_section_format_options_requires_id(self):
        with pytest.raises(KeyError):
            self.course_format.update_section_format_options({'desktopwidth': '3'})


class LayoutTestCase(DesignerFormatTestCase):
    """
    Tests for the layout helpers and section actions.
    """

    def test_module_layout_class(self):
        section = self.structure.get_section(101)
        assert self.course_format.get_module_layout_class(section) == ''
        self.course_format.set_section_option(101, 'sectiontype', 'list')
        assert self.course_format.get_module_layout_class(section) == ' position-relative '
        self.course_format.set_section_option(101, 'sectiontype', 'cards')
        assert self.course_format.get_module_layout_class(section) == ' card '

    def test_capabilities(self):
        assert self.course_format.uses_sections
        assert not self.course_format.uses_indentation
        assert self.course_format.supports_ajax
        assert self.course_format.can_delete_section(self.structure.get_section(101))

    def test_stealth_module_visibility(self):
        assert self.course_format.allow_stealth_module_visibility(SectionInfo(id=1, section=0, visible=False))
        assert self.course_format.allow_stealth_module_visibility(SectionInfo(id=2, section=1))
        assert not self.course_format.allow_stealth_module_visibility(SectionInfo(id=3, section=1, visible=False))

    def test_refresh_section(self):
        self.course_format.update_section_format_options({'id': 101, 'desktopwidth': 2, 'tabletwidth': 1})

        result = self.course_format.section_action(self.structure.get_section(101), 'refresh')

        assert 'Designer section 1' in result['content']
        assert 'col-md-4 col-sm-6 col-12' in result['content']
        assert 'Activity 1011' in result['content']

    def test_unsupported_action(self):
        with pytest.raises(UnsupportedSectionAction):
            self.course_format.section_action(self.structure.get_section(101), 'move')

    def test_is_designer_course(self):
        assert self.course_format.is_designer_course()
        InMemoryStructureProvider.courses[str(COURSE_KEY)]['format'] = 'topics'
        assert not self.course_format.is_designer_course()


class ProviderTestCase(TestCase):
    """
    Tests for the structure provider configuration.
    """

    @override_settings(DESIGNER_FORMAT={'STRUCTURE_PROVIDER': None})
    def test_missing_provider(self):
        with pytest.raises(ImproperlyConfigured):
            get_course_format(COURSE_KEY).get_structure()

    def test_configured_provider(self):
        assert isinstance(get_course_format(COURSE_KEY).provider, InMemoryStructureProvider)
