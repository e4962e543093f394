"""
Course lifecycle signals the host platform sends to the designer format.
"""

from django.dispatch import Signal

# A signal sent after a section was added to a course
# providing_args=["course_key", "section_id", "section_number"]
COURSE_SECTION_CREATED = Signal()

# providing_args=["course_key", "section_id"]
COURSE_SECTION_UPDATED = Signal()

# providing_args=["course_key", "section_id"]
COURSE_SECTION_DELETED = Signal()

# providing_args=["course_key", "module_id"]
COURSE_MODULE_CREATED = Signal()

# providing_args=["course_key", "module_id"]
COURSE_MODULE_UPDATED = Signal()

# A signal sent after a module was removed, its design options are dropped too
# providing_args=["course_key", "module_id"]
COURSE_MODULE_DELETED = Signal()

# A signal sent when a user's completion state of a module changed
# providing_args=["course_key", "module_id", "user_id"]
COURSE_MODULE_COMPLETION_UPDATED = Signal()

# A signal sent when a user completed a course
# providing_args=["course_key", "user_id"]
COURSE_COMPLETION_UPDATED = Signal()
