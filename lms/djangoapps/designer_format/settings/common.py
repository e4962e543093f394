"""
Common settings for the designer course format.
"""

DEFAULT_DESIGNER_FORMAT = {
    # Cache alias holding the completion aggregates.
    'CACHE_ALIAS': 'default',
    'CACHE_TIMEOUT': 60 * 60 * 24,
    # Dotted path of the CourseStructureProvider the host platform supplies.
    'STRUCTURE_PROVIDER': None,
    'DATE_FORMAT': 'monthandday',
    'FLOW_ANIMATION_DURATION': 0.5,
    'LINK_COURSE_SECTIONS': True,
    'COURSE_VIEW_URL': '/courses/{course_key}/course/',
    'COURSE_DISPLAY': 0,
    'HIDDEN_SECTIONS': 0,
    'ENABLE_POPUP_ACTIVITIES': False,
    # Site wide design defaults for new sections and modules.
    'DEFAULTS': {
        'desktopwidth': 0,
        'tabletwidth': 0,
        'mobilewidth': 0,
        'sectiontype': 'default',
    },
}


def plugin_settings(settings):
    """
    Merge the designer format defaults under any DESIGNER_FORMAT the platform already defines.
    """
    configured = getattr(settings, 'DESIGNER_FORMAT', {})
    merged = dict(DEFAULT_DESIGNER_FORMAT, **configured)
    merged['DEFAULTS'] = dict(DEFAULT_DESIGNER_FORMAT['DEFAULTS'], **configured.get('DEFAULTS', {}))
    settings.DESIGNER_FORMAT = merged
