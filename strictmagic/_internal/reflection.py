# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

import inspect
import re
import typing
from collections import namedtuple

from .docblock import own_annotations

__version__ = "0.1.0"

PRIVATE_MARKER = "__magic_private__"
BY_REFERENCE_MARKER = "__magic_by_reference__"

EVENT_NAME = re.compile(r"^on[A-Z]\w*")

MISSING = object()

MethodInfo = namedtuple("MethodInfo", ["name", "private", "static", "by_reference"])


def find_method(cls, name):
    """static lookup of a method through the mro, None if there is no such method"""
    attr = inspect.getattr_static(cls, name, MISSING)
    if isinstance(attr, (staticmethod, classmethod)):
        fn = attr.__func__
        static = True
    elif inspect.isfunction(attr):
        fn = attr
        static = False
    else:
        return None
    return MethodInfo(
        name,
        getattr(fn, PRIVATE_MARKER, False),
        static,
        getattr(fn, BY_REFERENCE_MARKER, False),
    )


def is_accessor(method):
    return method is not None and not method.private and not method.static


class ClassMetadata:
    """What the property resolver needs to know about a single class."""

    def __init__(self, cls):
        self.cls = cls
        self.name = cls.__qualname__
        self.annotations = own_annotations(cls)

    @classmethod
    def from_class(cls, klass):
        return cls(klass)

    @property
    def bases(self):
        """mixins and parents, in declaration order"""
        return [base for base in self.cls.__bases__ if base is not object]

    def method(self, name):
        return find_method(self.cls, name)

    def __repr__(self):
        return f"<ClassMetadata {self.name}>"


def is_class_var(annotation):
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def walk_slots(cls):
    for c in cls.__mro__:
        if c is object:
            return
        slots = c.__dict__.get("__slots__", None)
        if slots is None:
            continue
        if isinstance(slots, str):
            slots = (slots,)

        yield from (s for s in slots if s not in ("__dict__", "__weakref__"))


def is_data_attribute(value):
    if hasattr(type(value), "__set__"):
        return True
    if isinstance(value, (staticmethod, classmethod, type)):
        return False
    return not callable(value)


def declared_fields(cls):
    """public instance fields: annotations, slots and class level data attributes"""
    fields = {}
    for c in cls.__mro__:
        if c is object:
            break
        for name, annotation in inspect.get_annotations(c).items():
            if not is_class_var(annotation):
                fields.setdefault(name, None)
        for name, value in c.__dict__.items():
            if not name.startswith("_") and is_data_attribute(value):
                fields.setdefault(name, None)
    for name in walk_slots(cls):
        fields.setdefault(name, None)
    return tuple(name for name in fields if not name.startswith("_"))


def is_event_name(name):
    return EVENT_NAME.match(name) is not None


def public_methods(cls, static_only=False):
    """method names in declaration order, the class first then its bases"""
    names = {}
    for c in cls.__mro__:
        if c is object:
            break
        for name in c.__dict__:
            if name.startswith("_") or name in names:
                continue
            method = find_method(cls, name)
            if method is None or method.private:
                continue
            if static_only and not method.static:
                continue
            names[name] = None
    return list(names)
