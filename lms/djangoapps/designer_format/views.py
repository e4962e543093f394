"""
Web services the designer format's front end calls.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist
from edx_rest_framework_extensions.auth.jwt.authentication import JwtAuthentication
from edx_rest_framework_extensions.auth.session.authentication import SessionAuthenticationAllowInactiveUser
from opaque_keys import InvalidKeyError
from opaque_keys.edx.keys import CourseKey
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .course_format import get_course_format
from .permissions import CanChangeSectionOptions
from .rendering import render_module
from .serializers import SectionOptionsSerializer

log = logging.getLogger(__name__)


class DesignerCourseView(APIView):
    """
    Base view resolving the course format and structure of the requested course.
    """
    authentication_classes = (JwtAuthentication, SessionAuthenticationAllowInactiveUser,)
    permission_classes = (IsAuthenticated,)

    def get_course_format(self, course_id):
        try:
            course_key = CourseKey.from_string(course_id)
        except InvalidKeyError:
            raise NotFound(f'{course_id} is not a valid course key.')  # lint-amnesty, pylint: disable=raise-missing-from
        return get_course_format(course_key)

    def get_section(self, course_format, section_id):
        try:
            return course_format.get_structure().get_section(section_id)
        except ObjectDoesNotExist as exc:
            raise NotFound(str(exc))  # lint-amnesty, pylint: disable=raise-missing-from


class SectionOptionsView(DesignerCourseView):
    """
    **Use Case**
        Set options of a course section, e.g. the section layout picked in the course page.

    **Example Requests**
        POST /api/designer_format/v1/courses/{course_id}/sections/{section_id}/options/
            Request data: {"options": [{"name": "sectiontype", "value": "cards"}]}

    **Response Values**
        null

        Returns 403 when the user may not change section options, 404 for an
        unknown course or section and 400 for a malformed payload.
    """
    permission_classes = (IsAuthenticated, CanChangeSectionOptions,)

    def post(self, request, course_id, section_id):
        course_format = self.get_course_format(course_id)
        section = self.get_section(course_format, section_id)
        serializer = SectionOptionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        for option in serializer.validated_data['options']:
            course_format.set_section_option(section.id, option['name'], option['value'])
        log.info(
            'User %s set %d options of section %s in %s',
            request.user.id, len(serializer.validated_data['options']), section.id, course_format.course_key,
        )
        return Response(None)


class ModuleHtmlView(DesignerCourseView):
    """
    **Use Case**
        Fetch the rendered card of a course module, e.g. to refresh it after a completion change.

    **Example Requests**
        GET /api/designer_format/v1/courses/{course_id}/modules/{module_id}/

    **Response Values**
        {"html": "<li ...>...</li>"}
    """

    def get(self, request, course_id, module_id):
        course_format = self.get_course_format(course_id)
        try:
            module = course_format.get_structure().get_module(module_id)
        except ObjectDoesNotExist as exc:
            raise NotFound(str(exc))  # lint-amnesty, pylint: disable=raise-missing-from
        return Response({'html': render_module(course_format, module, request.user)})


class SectionRefreshView(DesignerCourseView):
    """
    **Use Case**
        Re-render a section after its options or content changed.

    **Example Requests**
        GET /api/designer_format/v1/courses/{course_id}/sections/{section_id}/refresh/

    **Response Values**
        {"content": "<li ...>...</li>"}
    """

    def get(self, request, course_id, section_id):
        course_format = self.get_course_format(course_id)
        section = self.get_section(course_format, section_id)
        return Response(course_format.section_action(section, 'refresh', request.user))
