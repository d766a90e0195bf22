"""
Input rules applied to create and update requests before any
persistence call.
"""

from .dates import parse_dob
from .exceptions import ValidationError

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 255


def validate_user_input(name: str, dob_text: str) -> None:
    """Check ``name`` and ``dob_text``, raising on the first failure.

    The name is checked first.  A date string that is malformed and one
    that names an impossible day (``2025-13-01``) fail identically with
    ``ValidationError(field="dob")``.
    """
    if not isinstance(name, str) or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ValidationError("name")
    try:
        parse_dob(dob_text)
    except ValueError:
        raise ValidationError("dob") from None
