"""
Designer course format models.
"""

from django.db import models
from model_utils.models import TimeStampedModel
from opaque_keys.edx.django.models import CourseKeyField

from .constants import FORMAT_NAME


class CourseFormatOption(models.Model):
    """
    A named option of a designer course, or of one of its sections.

    Course level options are stored with a ``section_id`` of 0.

    .. no_pii:
    """
    course_key = CourseKeyField(max_length=255, db_index=True)
    format = models.CharField(max_length=21, default=FORMAT_NAME)
    section_id = models.PositiveIntegerField(default=0)
    name = models.CharField(max_length=255)
    value = models.TextField(blank=True, null=True)

    class Meta:
        app_label = 'designer_format'
        unique_together = (
            ('course_key', 'format', 'section_id', 'name'),
        )
        indexes = [models.Index(fields=['course_key', 'section_id'], name='designer_course_section_idx')]
        permissions = (
            ('change_section_options', 'Can change designer section options'),
        )

    def __str__(self):
        return 'CourseFormatOption: {name}={value} for section {section} of {course}'.format(
            name=self.name,
            value=self.value,
            section=self.section_id,
            course=self.course_key,
        )


class DesignerModuleOption(TimeStampedModel):
    """
    A named design option of a single course module (activity).

    Structured values are stored JSON encoded.

    .. no_pii:
    """
    course_key = CourseKeyField(max_length=255, db_index=True)
    module_id = models.PositiveIntegerField(db_index=True)
    name = models.CharField(max_length=255)
    value = models.TextField(blank=True, default='')

    class Meta:
        app_label = 'designer_format'
        unique_together = (
            ('course_key', 'module_id', 'name'),
        )

    def __str__(self):
        return 'DesignerModuleOption: {name} for module {module} of {course}'.format(
            name=self.name,
            module=self.module_id,
            course=self.course_key,
        )
