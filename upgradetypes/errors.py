"""Errors raised by the upgrade type lookups."""

from typing import Iterable


class UpgradeTypeError(Exception):
    pass


class UnknownUpgradeKeyError(UpgradeTypeError, LookupError):
    """No upgrade type uses the given csv key."""

    def __init__(self, key: object, valid_keys: Iterable[str] = ()) -> None:
        self.key = key
        self.valid_keys = tuple(valid_keys)
        message = f"Unknown upgrade type key: {key!r}."
        if self.valid_keys:
            message += f" Expected one of: {', '.join(self.valid_keys)}."
        super().__init__(message)
