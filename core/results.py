# core/results.py

# Import dataclass from dataclasses because 'Result' is a small value object.
from dataclasses import dataclass
# Import Any from typing because a successful result can carry any value.
from typing import Any

"""
This file holds the result type that every service function hands
back to the views. A result is either a success (optionally carrying
a value, like the new session) or a failure that says what kind of
failure it was and a message that can be shown to the user. Views
look at the 'kind' to decide between a 404, a 403, or re-showing a
form with the error message.
"""

# The kinds of failure a service can report
NOT_FOUND = 'not_found'
FORBIDDEN = 'forbidden'
VALIDATION = 'validation'
UNEXPECTED = 'unexpected'


@dataclass(frozen=True)
class Result:
    success: bool
    value: Any = None
    kind: str = ''
    error: str = ''

    @classmethod
    def ok(cls, value=None):
        return cls(success=True, value=value)

    @classmethod
    def err(cls, kind, error):
        return cls(success=False, kind=kind, error=error)

    # Lets views write 'if result:' like the old boolean returns
    def __bool__(self):
        return self.success
