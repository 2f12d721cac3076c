"""
Error taxonomy for the alert subsystem.
"""


class AlertError(Exception):
    """Base class for all alert errors."""


class DuplicateNameError(AlertError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"An alert named '{name}' already exists")


class NotFoundError(AlertError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"No alert named '{name}'")


class MalformedDateError(AlertError):
    def __init__(self, value, reason: str = "could not be parsed"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date '{value}': {reason}")


class TransportError(AlertError):
    """The store or the notification channel could not be reached."""
