"""
The LMS side of the designer course format.
"""
