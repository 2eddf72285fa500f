# core/errors.py

"""
Exception types raised by the roster models.

Model methods raise these directly; `Roster` methods translate them into
`Response` failures so the CLI never has to catch them itself.
"""


class ValidationError(ValueError):
    """A field value is missing, unparseable, or out of its allowed range."""


class DuplicateKeyError(ValueError):
    """A student with the same roll number is already on the roster."""


class NotFoundError(LookupError):
    """No student with the requested roll number is on the roster."""
