# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

__version__ = "0.1.0"

READABLE = 1 << 0
GET_FORM = 1 << 1
BY_REFERENCE = 1 << 2
WRITABLE = 1 << 3

flag_repr = {
    READABLE: "READABLE",
    GET_FORM: "GET_FORM",
    BY_REFERENCE: "BY_REFERENCE",
    WRITABLE: "WRITABLE",
}


def get_flags_repr(flags):
    return "|".join(r for bit, r in flag_repr.items() if flags & bit) or "NONE"
