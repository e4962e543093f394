"""
Helpers shared by the designer course format.
"""

from datetime import datetime, timezone

from django.conf import settings
from django.utils import dateformat

from .constants import DEVICE_WIDTH_CHOICES, WIDTH_COLUMN_SPANS
from .settings.common import DEFAULT_DESIGNER_FORMAT

# Django date format strings selectable as the designer date format.
DATE_FORMATS = {
    'usstandarddate': 'm-d-Y h:i A',
    'monthandday': 'M j',
    'strftimedate': 'd F Y',
    'strftimedatefullshort': 'd/m/y',
    'strftimedateshort': 'd F',
    'strftimedatetime': 'd F Y, h:i A',
    'strftimedatetimeshort': 'd/m/y, H:i',
    'strftimedaydate': 'l, d F Y',
    'strftimedaydatetime': 'l, d F Y, h:i A',
    'strftimedayshort': 'l, d F',
    'strftimedaytime': 'D, H:i',
    'strftimemonthyear': 'F Y',
    'strftimerecent': 'd M, H:i',
    'strftimerecentfull': 'D, d M Y, h:i A',
}
DEFAULT_DATE_FORMAT = 'usstandarddate'


def designer_setting(name):
    """
    Return a DESIGNER_FORMAT setting, falling back to the plugin default.
    """
    configured = getattr(settings, 'DESIGNER_FORMAT', {})
    if name in configured:
        return configured[name]
    return DEFAULT_DESIGNER_FORMAT[name]


def format_date(timestamp):
    """
    Format a unix timestamp with the site wide designer date format.

    Month and day names follow the active language.
    """
    pattern = DATE_FORMATS.get(designer_setting('DATE_FORMAT') or DEFAULT_DATE_FORMAT)
    if pattern is None:
        pattern = DATE_FORMATS[DEFAULT_DATE_FORMAT]
    return dateformat.format(datetime.fromtimestamp(timestamp, tz=timezone.utc), pattern)


def modcontent_trim_char(text, n=25):
    """
    Cut ``text`` down to its first ``n`` words.
    """
    words = text.split()
    if len(words) < n:
        return text
    return ' '.join(words[:n]) + '...'


def section_width_classes(options):
    """
    Build the bootstrap grid classes of a section from its device width options.

    Returns an empty string when the section has no width configured.
    """
    if options.get('tabletwidth') in (None, ''):
        return ''
    classes = []
    for (device, __), size in zip(DEVICE_WIDTH_CHOICES, ('md', 'sm', '')):
        try:
            width = int(options.get(device + 'width', ''))
        except (TypeError, ValueError):
            width = None
        span = WIDTH_COLUMN_SPANS.get(width, 12)
        classes.append('col-{size}{span}'.format(size=size + '-' if size else '', span=span))
    return ' ' + ' '.join(classes)
