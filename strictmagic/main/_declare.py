# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from .._internal.docblock import AnnotationRecord, magic_property
from .._internal.reflection import BY_REFERENCE_MARKER, PRIVATE_MARKER

__version__ = "0.1.0"


def private(fn):
    """hide a method from accessor matching and from suggestions"""
    setattr(getattr(fn, "__func__", fn), PRIVATE_MARKER, True)
    return fn


def by_reference(fn):
    """mark a getter whose return value is the live object rather than a copy"""
    setattr(fn, BY_REFERENCE_MARKER, True)
    return fn


__all__ = ["AnnotationRecord", "by_reference", "magic_property", "private"]
