"""
URLs for LMS
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/designer_format/', include('lms.djangoapps.designer_format.urls', namespace='designer_format')),
]
