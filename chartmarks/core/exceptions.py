from typing import Sequence


class ConfigurationException(Exception):
    pass


class InvalidSpecException(Exception):
    def __init__(self, message, errors: Sequence[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class MissingCapabilityException(Exception):
    """A channel reported as bound cannot supply a scale or field."""

    def __init__(self, message, channel=None):
        super().__init__(message)
        self.message = message
        self.channel = channel


class DuplicatePropertyException(Exception):
    def __init__(self, message, key: str):
        super().__init__(message)
        self.message = message
        self.key = key
