# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from .main import *  # noqa: F403
from .main import __version__

__all__ = [
    "AccessViolationError",
    "AnnotationRecord",
    "ClassMetadata",
    "InvalidEventHandlerContainerError",
    "Magic",
    "MagicError",
    "MagicType",
    "PropertyDescriptor",
    "UndefinedMemberError",
    "by_reference",
    "get_spelling_suggestion",
    "has_magic_property",
    "levenshtein",
    "magic_class",
    "magic_property",
    "private",
    "raise_event",
    "registry",
    "resolve",
    "set_dev_mode",
]
