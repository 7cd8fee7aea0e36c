# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

import logging

__version__ = "0.1.0"

dev_log = logging.getLogger("strictmagic.dev")
dev_log.setLevel(logging.WARNING)


def log(msg, *args):
    dev_log.debug(msg, *args)


def set_dev_mode(dev=True):
    dev_log.setLevel(logging.DEBUG if dev else logging.WARNING)


def ucfirst(name):
    return name[:1].upper() + name[1:]


def qualname(cls):
    return getattr(cls, "__qualname__", None) or cls.__name__
