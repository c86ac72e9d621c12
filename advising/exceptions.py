"""
Exceptions raised by the advising package.

The progress engines never raise for unknown majors or minors (they fall
back to estimates). These exceptions cover misuse of the profile store.
"""


class AdvisingError(Exception):
    """Base class for all advising errors."""


class ProfileNotFoundError(AdvisingError, KeyError):
    """No profile with the requested id exists in the store."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"No profile with id '{profile_id}'")

    def __str__(self):
        # KeyError would otherwise wrap the message in quotes
        return self.args[0]


class ProfileValidationError(AdvisingError, ValueError):
    """Profile data failed validation on create or update."""
