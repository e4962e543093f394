"""
API permissions of the designer format.
"""

from rest_framework.permissions import BasePermission

CHANGE_SECTION_OPTIONS = 'designer_format.change_section_options'


def can_change_section_options(user):
    return user.is_authenticated and (user.is_staff or user.has_perm(CHANGE_SECTION_OPTIONS))


class CanChangeSectionOptions(BasePermission):
    """
    Allows staff and users granted ``designer_format.change_section_options``.
    """
    message = 'You are not allowed to change the options of this section.'

    def has_permission(self, request, view):
        return can_change_section_options(request.user)
