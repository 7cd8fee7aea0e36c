# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

__version__ = "0.1.0"


class MagicError(Exception):
    """Base class for errors raised by strict attribute access."""

    def __init__(self, message, *, owner=None, name=None):
        super().__init__(message)
        self.owner = owner
        self.name = name


class UndefinedMemberError(MagicError, AttributeError):
    """Raised when a name matches no field, virtual property or method."""

    def __init__(self, message, *, owner=None, name=None, suggestion=None):
        super().__init__(message, owner=owner, name=name)
        self.suggestion = suggestion


class AccessViolationError(MagicError, AttributeError):
    """Raised when a virtual property exists but not in the requested mode."""


class InvalidEventHandlerContainerError(MagicError, TypeError):
    """Raised when an event field holds something other than an iterable or None."""


__all__ = [
    "MagicError",
    "UndefinedMemberError",
    "AccessViolationError",
    "InvalidEventHandlerContainerError",
]
