"""Exception classes for Pageforge.

Document commands never raise for missing targets; these cover the
session layer around them.
"""


class PageforgeError(Exception):
    """Base exception for Pageforge errors."""

    pass


class SessionNotFoundError(PageforgeError):
    """Raised when a session id does not resolve to an active session."""

    pass
