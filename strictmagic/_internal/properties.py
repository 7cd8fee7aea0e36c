# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from collections import namedtuple
from threading import RLock
from types import MappingProxyType
from weakref import WeakKeyDictionary

from .constants import BY_REFERENCE, GET_FORM, READABLE, WRITABLE, get_flags_repr
from .docblock import READ_ONLY, WRITE_ONLY
from .reflection import ClassMetadata, declared_fields, is_accessor, is_event_name
from .utils import log, ucfirst

__version__ = "0.1.0"


class PropertyDescriptor(
    namedtuple(
        "PropertyDescriptor",
        ["name", "readable", "writable", "by_reference", "read_accessor_kind", "getter", "setter"],
    )
):
    __slots__ = ()

    @property
    def flags(self):
        return (
            READABLE * self.readable
            | GET_FORM * (self.read_accessor_kind == "get")
            | BY_REFERENCE * self.by_reference
            | WRITABLE * self.writable
        )


def _read_accessors(name):
    uname = ucfirst(name)
    yield "get", "get" + uname
    yield "is", "is" + uname
    yield "get", "get_" + name
    yield "is", "is_" + name


def _write_accessors(name):
    yield "set" + ucfirst(name)
    yield "set_" + name


def describe(meta, record):
    """match one annotation against the accessors of the class, None if nothing backs it"""
    name = record.name

    getter = kind = None
    if record.mode != WRITE_ONLY:
        for kind, candidate in _read_accessors(name):
            method = meta.method(candidate)
            if is_accessor(method):
                getter = method
                break

    setter = None
    if record.mode != READ_ONLY:
        for candidate in _write_accessors(name):
            method = meta.method(candidate)
            if is_accessor(method):
                setter = method
                break

    if getter is None and setter is None:
        return None

    return PropertyDescriptor(
        name,
        getter is not None,
        setter is not None,
        getter is not None and getter.by_reference,
        kind if getter is not None else None,
        getter and getter.name,
        setter and setter.name,
    )


def build_properties(meta, lookup):
    """own annotations first, then each mixin or parent table, first writer wins"""
    props = {}
    for record in meta.annotations:
        descriptor = describe(meta, record)
        if descriptor is not None:
            props[record.name] = descriptor

    for base in meta.bases:
        for name, descriptor in lookup(base).items():
            props.setdefault(name, descriptor)

    return props


class MagicRegistry:
    """Per class tables, filled once and read only afterwards."""

    def __init__(self):
        self._lock = RLock()
        self._properties = WeakKeyDictionary()
        self._fields = WeakKeyDictionary()
        self._events = WeakKeyDictionary()

    def register(self, cls):
        self.properties(cls)
        self.fields(cls)
        return cls

    def properties(self, cls):
        props = self._properties.get(cls)
        if props is not None:
            return props
        with self._lock:
            props = self._properties.get(cls)
            if props is None:
                props = MappingProxyType(build_properties(ClassMetadata(cls), self.properties))
                self._properties[cls] = props
                log(
                    "virtual properties for %s: %s",
                    cls.__qualname__,
                    {name: get_flags_repr(d.flags) for name, d in props.items()},
                )
        return props

    def fields(self, cls):
        fields = self._fields.get(cls)
        if fields is not None:
            return fields
        with self._lock:
            fields = self._fields.get(cls)
            if fields is None:
                fields = self._fields[cls] = declared_fields(cls)
        return fields

    def has_property(self, cls, name):
        return name in self.fields(cls)

    def is_event_property(self, cls, name):
        events = self._events.get(cls)
        if events is None:
            with self._lock:
                events = self._events.setdefault(cls, {})
        rv = events.get(name)
        if rv is None:
            rv = events[name] = self.has_property(cls, name) and is_event_name(name)
        return rv

    def clear(self):
        with self._lock:
            self._properties.clear()
            self._fields.clear()
            self._events.clear()


registry = MagicRegistry()


def resolve(cls):
    """the virtual property table of cls, built on first use"""
    if isinstance(cls, ClassMetadata):
        cls = cls.cls
    return registry.properties(cls)
