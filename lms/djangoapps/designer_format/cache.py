"""
Cache of the completion aggregates rendered by the designer format.

Aggregates are stored under composite keys (``<kind>:<course>:u:<user>:``)
so that every entry derived from a course, a section or a user can be
invalidated at once by deleting the keys starting with a given prefix.
Django's cache API cannot list keys, so the keys written through
``DesignerCache`` are recorded in a registry entry of the same cache.

The registry is a single entry rewritten by every worker, so it can lose
keys to concurrent writes or to eviction. Entries therefore also carry the
generation of each scope they belong to. Invalidating a scope increments
its generation counter with the backend's atomic ``incr``, and an entry
read under an older generation is treated as a miss.
"""

import logging
import time

from django.core.cache import caches

from .utils import designer_setting

log = logging.getLogger(__name__)

KEY_SEPARATOR = ':'
REGISTRY_KEY = 'designer_format.registry'
GENERATION_KEY_PREFIX = 'designer_format.generation:'

VALID_SECTION_COMPLETED = 'v_s_c_c'
SECTION_COMPLETED = 's_c_c'
DUE_OVERDUE_ACTIVITIES = 'd_o_a_c'
UNCOMPLETED_CRITERIA = 'u_c_c_s'
CRITERIA_PROGRESS = 'c_p_c'
COMPLETION_ACTIVITIES = 'g_c_a'
PREREQUISITE_COURSES = 'data_prereq_main_c'


def make_key(*parts):
    """
    Join ``parts`` into a cache key or key prefix.

    The trailing separator keeps ``c_p_c:course:u:1:`` from matching the
    keys of user 12.
    """
    return KEY_SEPARATOR.join(str(part) for part in parts) + KEY_SEPARATOR


def aggregate_key(kind, course_key, section_id=None, user_id=None):
    """
    Return the key of an aggregate and the scopes whose invalidation drops it.

    The scopes are the prefixes the invalidators of ``kind`` delete: every
    entry of the kind, of the course, of the section and of the user.
    """
    parts = [kind, course_key]
    scopes = [make_key(kind), make_key(kind, course_key)]
    if section_id is not None:
        parts += ['s', section_id]
        scopes.append(make_key(kind, course_key, 's', section_id))
    if user_id is not None:
        parts += ['u', user_id]
        scopes.append(make_key(kind, course_key, 'u', user_id))
        scopes.append(make_key(kind, 'u', user_id))
    return make_key(*parts), scopes


def _generation_seed():
    # Reseeding an evicted counter from the clock keeps it from matching
    # the generations of entries written before the eviction.
    return int(time.time() * 1000)


class DesignerCache:
    """
    Thin wrapper over a Django cache that can delete entries by key prefix.
    """

    def __init__(self, alias=None, timeout=None):
        self.alias = alias or designer_setting('CACHE_ALIAS')
        self.timeout = designer_setting('CACHE_TIMEOUT') if timeout is None else timeout

    @property
    def store(self):
        return caches[self.alias]

    def get(self, key, default=None, scopes=()):
        entry = self.store.get(key)
        if entry is None:
            return default
        generations, value = entry
        if tuple(generations) != self.generations(scopes):
            return default
        return value

    def set(self, key, value, scopes=()):
        self.store.set(key, (self.generations(scopes), value), self.timeout)
        registry = self._registry()
        if key not in registry:
            registry.add(key)
            self.store.set(REGISTRY_KEY, registry, None)

    def get_or_set(self, key, compute, scopes=()):
        """
        Return the cached value of ``key``, storing ``compute()`` first on a miss.

        ``None`` results are cached too, so an empty aggregate is not recomputed.
        """
        sentinel = object()
        value = self.get(key, sentinel, scopes)
        if value is sentinel:
            value = compute()
            self.set(key, value, scopes)
        return value

    def generations(self, scopes):
        """
        Return the current generation of each scope, seeding the missing counters.
        """
        keys = [GENERATION_KEY_PREFIX + scope for scope in scopes]
        if not keys:
            return ()
        current = self.store.get_many(keys)
        missing = [key for key in keys if key not in current]
        if missing:
            for key in missing:
                self.store.add(key, _generation_seed(), None)
            current.update(self.store.get_many(missing))
        return tuple(current.get(key) for key in keys)

    def bump_generation(self, scope):
        """
        Invalidate every entry stored under ``scope``.
        """
        key = GENERATION_KEY_PREFIX + scope
        try:
            self.store.incr(key)
        except ValueError:
            self.store.add(key, _generation_seed(), None)

    def find_by_prefix(self, prefix):
        """
        Return the recorded keys starting with ``prefix``.
        """
        return sorted(key for key in self._registry() if key.startswith(prefix))

    def delete_many(self, keys):
        keys = list(keys)
        if not keys:
            return
        self.store.delete_many(keys)
        registry = self._registry()
        registry.difference_update(keys)
        self.store.set(REGISTRY_KEY, registry, None)

    def delete_prefix_cache(self, prefix):
        """
        Delete every entry whose key starts with ``prefix``.
        """
        self.bump_generation(prefix)
        keys = self.find_by_prefix(prefix)
        if keys:
            log.info('Invalidating %d designer cache entries with prefix %s', len(keys), prefix)
            self.delete_many(keys)
        return keys

    def delete_valid_section_completed_cache(self, course_key, section_id=0):
        if section_id:
            prefix = make_key(VALID_SECTION_COMPLETED, course_key, 's', section_id)
        else:
            prefix = make_key(VALID_SECTION_COMPLETED, course_key)
        return self.delete_prefix_cache(prefix)

    def delete_user_section_completed_cache(self, course_key):
        return self.delete_prefix_cache(make_key(SECTION_COMPLETED, course_key))

    def delete_due_overdue_activities_count(self, course_key, user_id=0):
        return self.delete_prefix_cache(self._course_user_prefix(DUE_OVERDUE_ACTIVITIES, course_key, user_id))

    def delete_course_progress_uncompletion_criteria(self, course_key, user_id=0):
        return self.delete_prefix_cache(self._course_user_prefix(UNCOMPLETED_CRITERIA, course_key, user_id))

    def delete_criteria_progress(self, course_key, user_id=0):
        return self.delete_prefix_cache(self._course_user_prefix(CRITERIA_PROGRESS, course_key, user_id))

    def delete_completion_activities(self, course_key):
        return self.delete_prefix_cache(make_key(COMPLETION_ACTIVITIES, course_key))

    def delete_prerequisites_courses(self):
        return self.delete_prefix_cache(make_key(PREREQUISITE_COURSES))

    def delete_user_criteria_cache(self, user_id):
        """
        Delete the user's criteria progress in every course.

        Completing a course changes the progress of each course listing it as
        a prerequisite.
        """
        user_suffix = KEY_SEPARATOR + make_key('u', user_id)
        deleted = []
        for kind in (CRITERIA_PROGRESS, UNCOMPLETED_CRITERIA):
            self.bump_generation(make_key(kind, 'u', user_id))
            deleted += [key for key in self.find_by_prefix(make_key(kind)) if key.endswith(user_suffix)]
        if deleted:
            log.info('Invalidating %d designer criteria entries of user %s', len(deleted), user_id)
            self.delete_many(deleted)
        return deleted

    def _course_user_prefix(self, kind, course_key, user_id):
        if user_id:
            return make_key(kind, course_key, 'u', user_id)
        return make_key(kind, course_key)

    def _registry(self):
        return set(self.store.get(REGISTRY_KEY) or ())


def get_designer_cache():
    return DesignerCache()
