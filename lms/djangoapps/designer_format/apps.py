"""
Designer Format Application Configuration

Signal handlers are connected here.
"""

from django.apps import AppConfig
from edx_django_utils.plugins import PluginSettings, PluginURLs

LMS = 'lms.djangoapp'
CMS = 'cms.djangoapp'
COMMON_SETTINGS = 'common'


class DesignerFormatConfig(AppConfig):
    """
    Application Configuration for the designer course format.
    """
    name = 'lms.djangoapps.designer_format'
    label = 'designer_format'
    verbose_name = 'Designer course format'
    default_auto_field = 'django.db.models.AutoField'

    plugin_app = {
        PluginURLs.CONFIG: {
            LMS: {
                PluginURLs.NAMESPACE: 'designer_format',
                PluginURLs.REGEX: '^api/designer_format/',
                PluginURLs.RELATIVE_PATH: 'urls',
            },
            CMS: {
                PluginURLs.NAMESPACE: 'designer_format',
                PluginURLs.REGEX: '^api/designer_format/',
                PluginURLs.RELATIVE_PATH: 'urls',
            },
        },
        PluginSettings.CONFIG: {
            LMS: {
                COMMON_SETTINGS: {PluginSettings.RELATIVE_PATH: 'settings.common'},
            },
            CMS: {
                COMMON_SETTINGS: {PluginSettings.RELATIVE_PATH: 'settings.common'},
            },
        },
    }

    def ready(self):
        """
        Connect signal handlers.
        """
        from . import handlers  # pylint: disable=unused-import
