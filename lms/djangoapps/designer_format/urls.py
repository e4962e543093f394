"""
Designer format API URLs
"""

from django.urls import path

from .views import ModuleHtmlView, SectionOptionsView, SectionRefreshView

app_name = 'designer_format'

urlpatterns = [
    path(
        'v1/courses/<str:course_id>/sections/<int:section_id>/options/',
        SectionOptionsView.as_view(),
        name='section-options',
    ),
    path(
        'v1/courses/<str:course_id>/sections/<int:section_id>/refresh/',
        SectionRefreshView.as_view(),
        name='section-refresh',
    ),
    path(
        'v1/courses/<str:course_id>/modules/<int:module_id>/',
        ModuleHtmlView.as_view(),
        name='module-html',
    ),
]
