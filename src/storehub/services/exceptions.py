"""Errors raised by services and translated to HTTP responses by routes."""


class ConflictError(ValueError):
    """The entity already exists."""


class NotFoundError(LookupError):
    """The referenced entity does not exist."""


class EmptyUpdateError(ValueError):
    """An update request carried no fields to change."""
