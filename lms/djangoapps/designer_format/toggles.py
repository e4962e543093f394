"""
Toggles for the designer course format.
"""

from edx_toggles.toggles import SettingDictToggle

# .. toggle_name: DESIGNER_FORMAT['ENABLE_POPUP_ACTIVITIES']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: False
# .. toggle_description: Allows designer courses to open activities in a popup. When disabled, the
#   ``popupactivities`` course option is always stored as off.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2023-04-06
ENABLE_POPUP_ACTIVITIES = SettingDictToggle(
    "DESIGNER_FORMAT", "ENABLE_POPUP_ACTIVITIES", default=False, module_name=__name__
)
