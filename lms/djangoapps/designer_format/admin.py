"""Django admin for designer_format"""

from django.contrib import admin

from .models import CourseFormatOption, DesignerModuleOption


@admin.register(CourseFormatOption)
class CourseFormatOptionAdmin(admin.ModelAdmin):
    """Admin for CourseFormatOption"""
    list_display = ('id',
                    'course_key',
                    'section_id',
                    'name',
                    'value')
    list_filter = ('name',)
    search_fields = ('course_key', 'name')


@admin.register(DesignerModuleOption)
class DesignerModuleOptionAdmin(admin.ModelAdmin):
    """Admin for DesignerModuleOption"""
    list_display = ('id',
                    'course_key',
                    'module_id',
                    'name',
                    'modified')
    search_fields = ('course_key', 'module_id', 'name')
