# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

from .._internal.docblock import (
    READ_ONLY,
    READ_WRITE,
    WRITE_ONLY,
    declared_method_names,
    declared_property_names,
)
from .._internal.errors import AccessViolationError, UndefinedMemberError
from .._internal.properties import registry
from .._internal.reflection import find_method, public_methods
from .._internal.speller import get_spelling_suggestion
from .._internal.utils import qualname

__version__ = "0.1.0"


def instance_fields(instance):
    d = getattr(instance, "__dict__", None)
    if d is None:
        return []
    return [name for name in d if not name.startswith("_")]


def method_candidates(cls):
    return [*public_methods(cls), *declared_method_names(cls)]


def strict_get(cls, name, instance=None):
    owner = qualname(cls)
    hint = get_spelling_suggestion(
        [
            *registry.fields(cls),
            *instance_fields(instance),
            *declared_property_names(cls, (READ_WRITE, READ_ONLY)),
        ],
        name,
    )
    if hint is None:
        method_hint = get_spelling_suggestion(method_candidates(cls), name)
        if method_hint is not None:
            raise UndefinedMemberError(
                f"Call to undefined method {owner}::{name}(), did you mean {method_hint}()?",
                owner=owner,
                name=name,
                suggestion=method_hint,
            )

    raise UndefinedMemberError(
        f"Cannot read an undeclared property {owner}::{name}"
        + (f", did you mean {hint}?" if hint else "."),
        owner=owner,
        name=name,
        suggestion=hint,
    )


def strict_set(cls, name, instance=None):
    owner = qualname(cls)
    hint = get_spelling_suggestion(
        [
            *registry.fields(cls),
            *instance_fields(instance),
            *declared_property_names(cls, (READ_WRITE, WRITE_ONLY)),
        ],
        name,
    )
    raise UndefinedMemberError(
        f"Cannot write to an undeclared property {owner}::{name}"
        + (f", did you mean {hint}?" if hint else "."),
        owner=owner,
        name=name,
        suggestion=hint,
    )


def strict_call(cls, name):
    owner = qualname(cls)
    if find_method(cls, name) is not None:
        raise AccessViolationError(
            f"{owner}::{name} is a method, not an event field.", owner=owner, name=name
        )
    hint = get_spelling_suggestion(method_candidates(cls), name)
    raise UndefinedMemberError(
        f"Call to undefined method {owner}::{name}()"
        + (f", did you mean {hint}()?" if hint else "."),
        owner=owner,
        name=name,
        suggestion=hint,
    )


def strict_static_call(cls, name):
    owner = qualname(cls)
    hint = get_spelling_suggestion(public_methods(cls, static_only=True), name)
    raise UndefinedMemberError(
        f"Call to undefined static method {owner}::{name}()"
        + (f", did you mean {hint}()?" if hint else "."),
        owner=owner,
        name=name,
        suggestion=hint,
    )


def strict_unset(cls, name):
    owner = qualname(cls)
    message = f"Cannot unset the property {owner}::{name}."
    if name in registry.properties(cls):
        raise AccessViolationError(message, owner=owner, name=name)
    raise UndefinedMemberError(message, owner=owner, name=name)
