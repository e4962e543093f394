"""  # lint-amnesty, pylint: disable=django-not-configured
Default unit test configuration and fixtures.
"""

from unittest import TestCase

import pytest

# When using self.assertEquals, diffs are truncated. We don't want that, always
# show the whole diff.
TestCase.maxDiff = None


@pytest.fixture(autouse=True)
def clear_designer_cache():
    """
    Start every test with an empty cache so cached aggregates never leak between tests.
    """
    from django.core.cache import caches  # pylint: disable=import-outside-toplevel
    for cache in caches.all():
        cache.clear()
    yield
