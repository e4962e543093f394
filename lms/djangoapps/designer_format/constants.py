"""
Constants used by the designer course format.
"""

FORMAT_NAME = 'designer'

# Values of the ``courseindex`` course option.
HIDE_ON_COURSEPAGE = 1
HIDE_EVERYWHERE = 2


class CourseType:
    """
    Values of the ``coursetype`` course option.
    """
    normal = 0
    kanban = 1
    collapsible = 2
    flow = 3


class CourseDisplay:
    """
    Values of the ``coursedisplay`` course option.
    """
    single_page = 0
    multi_page = 1


class CompletionState:
    """
    Completion states reported by the host for a single module.
    """
    incomplete = 0
    complete = 1
    complete_pass = 2
    complete_fail = 3

    COMPLETED = (complete, complete_pass)


class CompletionTracking:
    """
    Completion tracking modes of a module.
    """
    none = 0
    manual = 1
    automatic = 2


class CourseProgressCalculation:
    """
    Values of the ``calcourseprogress`` course option.
    """
    criteria = 'criteria'
    all_activities = 'allactivities'


# Activity elements whose visibility can be chosen per module.
ACTIVITY_ELEMENTS = ('icon', 'visits', 'calltoaction', 'title', 'description', 'modname', 'completionbadge')

# Visibility codes of an activity element mapped to the css class rendered for it.
ELEMENT_VISIBILITY_CLASSES = {
    0: 'content-hide',
    1: 'content-show',
    2: 'content-show-hover',
    3: 'content-hide-hover',
    4: 'content-remove',
}

# Section widths offered in the section settings, in order.
SECTION_WIDTHS = ('100%', '50%', '33%', '25%', '20%')

# Number of SECTION_WIDTHS available for each device.
DEVICE_WIDTH_CHOICES = (('desktop', 5), ('tablet', 3), ('mobile', 2))

# Bootstrap grid column span for each width option.
WIDTH_COLUMN_SPANS = {0: 12, 1: 6, 2: 4, 3: 3, 4: 2}
