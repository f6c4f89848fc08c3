"""Exceptions raised by the admin console client."""


class CMSAdminError(Exception):
    """Base error for the admin console client."""
    pass


class UnsupportedOperationError(CMSAdminError):
    """The resource's backend does not expose this operation."""

    def __init__(self, resource: str, operation: str):
        super().__init__(f"'{resource}' does not support {operation}")
        self.resource = resource
        self.operation = operation


class UnknownResourceError(CMSAdminError):
    """No adapter is registered and the generic fallback is disabled."""
    pass


class SessionEndedError(CMSAdminError):
    """The backend rejected the session token and the user was logged out."""
    pass
