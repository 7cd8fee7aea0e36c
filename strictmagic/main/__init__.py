# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from .._internal.errors import (
    AccessViolationError,
    InvalidEventHandlerContainerError,
    MagicError,
    UndefinedMemberError,
)
from .._internal.properties import PropertyDescriptor, registry, resolve
from .._internal.reflection import ClassMetadata
from .._internal.speller import get_spelling_suggestion, levenshtein
from .._internal.utils import set_dev_mode
from ._declare import AnnotationRecord, by_reference, magic_property, private
from ._magic_class import Magic, MagicType, has_magic_property, magic_class, raise_event

__version__ = "0.1.0"
