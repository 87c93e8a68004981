"""Dispatch Auth package.

Authentication and session core for the dispatch web app: registration,
login/logout, session validation and profile-image resizing. Storage and
HTTP transport are supplied by the caller through the repository protocol
and the container.
"""
