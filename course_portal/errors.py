"""Project-native base exception shared by every runtime layer."""


class CoursePortalError(Exception):
    """Base exception for failures raised by Course Portal layers."""
