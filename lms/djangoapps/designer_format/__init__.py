"""
The Designer course format.

Stores per-section and per-module layout options for courses that use the
designer format, and keeps the cached completion aggregates it renders in
step with course changes.
"""
