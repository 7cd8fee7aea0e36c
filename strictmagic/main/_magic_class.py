# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from collections.abc import Iterable
from copy import copy

from .._internal.errors import AccessViolationError, InvalidEventHandlerContainerError
from .._internal.properties import registry
from .._internal.reflection import is_event_name
from .._internal.utils import log, qualname
from ._strict import strict_call, strict_get, strict_set, strict_static_call, strict_unset

__version__ = "0.1.0"

# getters not marked by_reference hand out copies of these
VALUE_TYPES = (list, dict, set, bytearray)


def is_magic_root(cls):
    return cls.__dict__.get("__magic_root__", False)


def has_magic_root(cls):
    return getattr(cls, "__magic_root__", False)


def is_dunder(name):
    return name[:2] == "__" and name[-2:] == "__"


def has_field(obj, name):
    if name.startswith("_") or registry.has_property(type(obj), name):
        return True
    d = getattr(obj, "__dict__", None)
    return d is not None and name in d


def has_magic_property(obj, name):
    """whether name is a virtual property of obj (an instance or a class)"""
    cls = obj if isinstance(obj, type) else type(obj)
    return name in registry.properties(cls)


def read_property(obj, prop):
    value = getattr(obj, prop.getter)()
    if not prop.by_reference and type(value) in VALUE_TYPES:
        return copy(value)
    return value


def find_own_getattr(cls):
    # looked up through the mro only, a metaclass __getattr__ must not leak in
    for c in cls.__mro__:
        if "__getattr__" in c.__dict__:
            return c.__dict__["__getattr__"]
    return None


def magic_class(base):
    """decorator for a class with strict attributes, virtual properties and events"""
    if is_magic_root(base):
        return base

    elif has_magic_root(base):
        base.__magic_root__ = True
        return registry.register(base)

    base.__magic_root__ = True

    old_getattr = find_own_getattr(base)
    old_setattr = base.__setattr__
    old_delattr = base.__delattr__

    def __getattr__(self, attr):
        cls = type(self)
        prop = registry.properties(cls).get(attr)
        if prop is not None:
            if not prop.readable:
                raise AccessViolationError(
                    f"Cannot read a write-only property {qualname(cls)}::{attr}.",
                    owner=qualname(cls),
                    name=attr,
                )
            return read_property(self, prop)
        if old_getattr is not None:
            return old_getattr(self, attr)
        if is_dunder(attr):
            # copy, pickle and friends look these up
            raise AttributeError(attr)
        if registry.has_property(cls, attr):
            # declared but never assigned
            raise AttributeError(
                f"{qualname(cls)}::{attr} has not been assigned", name=attr, obj=self
            )
        strict_get(cls, attr, self)

    def __setattr__(self, attr, val):
        if has_field(self, attr):
            return old_setattr(self, attr, val)
        cls = type(self)
        prop = registry.properties(cls).get(attr)
        if prop is None:
            strict_set(cls, attr, self)
        if not prop.writable:
            raise AccessViolationError(
                f"Cannot write to a read-only property {qualname(cls)}::{attr}.",
                owner=qualname(cls),
                name=attr,
            )
        getattr(self, prop.setter)(val)

    def __delattr__(self, attr):
        if has_field(self, attr):
            return old_delattr(self, attr)
        strict_unset(type(self), attr)

    base.__getattr__ = __getattr__
    base.__setattr__ = __setattr__
    base.__delattr__ = __delattr__

    log("magic class %s", qualname(base))
    return registry.register(base)


def raise_event(obj, event_name, *args, **kws):
    """call every handler stored in the event field event_name, in order"""
    cls = type(obj)
    if not registry.is_event_property(cls, event_name):
        d = getattr(obj, "__dict__", None)
        if not (is_event_name(event_name) and d is not None and event_name in d):
            strict_call(cls, event_name)

    handlers = getattr(obj, event_name, None)
    if handlers is None:
        return
    if isinstance(handlers, (str, bytes)) or not isinstance(handlers, Iterable):
        raise InvalidEventHandlerContainerError(
            f"Property {qualname(cls)}::{event_name} must be iterable or None, "
            f"{type(handlers).__name__} given.",
            owner=qualname(cls),
            name=event_name,
        )

    log("raising %s on %s", event_name, qualname(cls))
    for handler in list(handlers):
        handler(*args, **kws)


class MagicType(type):
    """Registers every class it creates, and reports missing class attributes."""

    def __init__(cls, name, bases, namespace, **kws):
        super().__init__(name, bases, namespace, **kws)
        registry.register(cls)

    def __getattr__(cls, attr):
        if is_dunder(attr):
            raise AttributeError(attr)
        if attr in registry.properties(cls):
            raise AttributeError(
                f"{qualname(cls)}::{attr} is a virtual property, read it from an instance",
                name=attr,
                obj=cls,
            )
        strict_static_call(cls, attr)


@magic_class
class Magic(metaclass=MagicType):
    __slots__ = ()

    def raise_event(self, event_name, *args, **kws):
        return raise_event(self, event_name, *args, **kws)
