"""
Edit forms of designer sections and activities.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from .constants import ACTIVITY_ELEMENTS

VISIBILITY_CHOICES = (
    (0, _('Hide')),
    (1, _('Show')),
    (2, _('Show on hover')),
    (3, _('Hide on hover')),
    (4, _('Remove')),
)

ELEMENT_LABELS = {
    'icon': _('Activity icon'),
    'visits': _('Visits'),
    'calltoaction': _('Call to action'),
    'title': _('Activity title'),
    'description': _('Activity description'),
    'modname': _('Module name'),
    'completionbadge': _('Completion badge'),
}


class SectionOptionsForm(forms.Form):
    """
    The designer fields of a section's edit form, built from the format's section options.

    Header and hidden options are not editable and get no field.
    """

    def __init__(self, *args, course_format=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.course_format = course_format
        for name, option in course_format.section_format_options_list(for_edit_form=True).items():
            element_type = option.get('element_type')
            if element_type == 'select':
                self.fields[name] = forms.TypedChoiceField(
                    label=option['label'],
                    choices=option['choices'],
                    coerce=option['type'],
                    initial=option['default'],
                    required=False,
                )
            elif element_type == 'hidden':
                self.fields[name] = forms.CharField(
                    initial=option['default'],
                    required=False,
                    widget=forms.HiddenInput,
                )

    def save(self, section_id):
        """
        Store the cleaned options on the section. Returns whether anything changed.
        """
        data = {
            name: value for name, value in self.cleaned_data.items()
            if value not in (None, '')
        }
        data['id'] = section_id
        return self.course_format.update_section_format_options(data)


class ActivityDesignForm(forms.Form):
    """
    One visibility select per activity element.
    """

    def __init__(self, *args, defaults=None, **kwargs):
        super().__init__(*args, **kwargs)
        defaults = defaults or {}
        for element in ACTIVITY_ELEMENTS:
            self.fields[element] = forms.TypedChoiceField(
                label=ELEMENT_LABELS[element],
                choices=VISIBILITY_CHOICES,
                coerce=int,
                initial=defaults.get(element, 1),
                required=False,
                empty_value=None,
            )

    def get_activity_elements(self):
        return {
            element: value for element, value in self.cleaned_data.items()
            if value is not None
        }
