"""
API layer for the CourseHub backend.

Exposes the HTTP endpoints under /user, /admin and /course, and the single
error-to-response mapping shared by all of them.
"""
