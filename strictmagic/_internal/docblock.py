# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

import re
from collections import namedtuple

__version__ = "0.1.0"

READ_WRITE = "read-write"
READ_ONLY = "read-only"
WRITE_ONLY = "write-only"

MODES = (READ_WRITE, READ_ONLY, WRITE_ONLY)

_suffix_modes = {"": READ_WRITE, "-read": READ_ONLY, "-write": WRITE_ONLY}

PROPERTY_PATTERN = re.compile(
    r"""
    ^ [ \t*]* @property(|-read|-write)
    [ \t]+ [^\s$]+
    [ \t]+ \$? (\w+)
    """,
    re.MULTILINE | re.VERBOSE,
)

METHOD_PATTERN = re.compile(r"^[ \t*]*@method[ \t]+(?:\S+[ \t]+)??(\w+)\(", re.MULTILINE)

MAGIC_PROPERTIES = "__magic_properties__"
MAGIC_METHODS = "__magic_methods__"


AnnotationRecord = namedtuple("AnnotationRecord", ["name", "mode"])


def magic_property(name, mode=READ_WRITE):
    """declare a virtual property without a docstring annotation

    class Person(Magic):
        __magic_properties__ = [magic_property("age", "read-only")]
    """
    if mode not in MODES:
        raise ValueError(f"mode must be one of {', '.join(MODES)}, not {mode!r}")
    if not name.isidentifier():
        raise ValueError(f"{name!r} is not a valid property name")
    return AnnotationRecord(name, mode)


def own_doc(cls):
    # class docstrings are not inherited, __doc__ on a subclass without one is None
    return cls.__dict__.get("__doc__") or ""


def parse_properties(doc):
    return [
        AnnotationRecord(name, _suffix_modes[suffix])
        for suffix, name in PROPERTY_PATTERN.findall(doc)
    ]


def parse_methods(doc):
    return METHOD_PATTERN.findall(doc)


def own_annotations(cls):
    """docstring annotations followed by explicit __magic_properties__ records"""
    records = parse_properties(own_doc(cls))
    for record in cls.__dict__.get(MAGIC_PROPERTIES, ()):
        if isinstance(record, str):
            record = (record,)
        records.append(magic_property(*record))
    return records


def walk_declarations(cls, seen=None):
    """the class itself, then each base recursively, depth first"""
    if seen is None:
        seen = set()
    if cls is object or cls in seen:
        return
    seen.add(cls)
    yield cls
    for base in cls.__bases__:
        yield from walk_declarations(base, seen)


def declared_property_names(cls, modes):
    return [
        record.name
        for c in walk_declarations(cls)
        for record in own_annotations(c)
        if record.mode in modes
    ]


def declared_method_names(cls):
    names = []
    for c in walk_declarations(cls):
        names.extend(parse_methods(own_doc(c)))
        names.extend(c.__dict__.get(MAGIC_METHODS, ()))
    return names
