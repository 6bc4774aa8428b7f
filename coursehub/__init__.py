"""CourseHub: course marketplace backend for users and content admins."""

__version__ = "1.0.0"
