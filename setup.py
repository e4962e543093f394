"""  # lint-amnesty, pylint: disable=django-not-configured
Setup script for the designer course format package.
"""

from setuptools import setup

setup(
    name="openedx-designer-format",
    version='0.1.0',
    install_requires=[
        "setuptools",
        "Django",
        "djangorestframework",
        "django-model-utils",
        "edx-django-utils",
        "edx-drf-extensions",
        "edx-opaque-keys[django]",
        "edx-toggles",
        "event-tracking",
    ],
    extras_require={
        "test": [
            "ddt",
            "factory-boy",
            "pytest",
            "pytest-django",
        ],
    },
    requires=[],
    packages=[
        "lms",
        "lms.djangoapps",
        "lms.djangoapps.designer_format",
        "lms.djangoapps.designer_format.migrations",
        "lms.djangoapps.designer_format.settings",
        "lms.envs",
    ],
    package_data={
        'lms.djangoapps.designer_format': ['templates/designer_format/*.html'],
    },
    entry_points={
        "lms.djangoapp": [
            "designer_format = lms.djangoapps.designer_format.apps:DesignerFormatConfig",
        ],
        "cms.djangoapp": [
            "designer_format = lms.djangoapps.designer_format.apps:DesignerFormatConfig",
        ],
    },
)
