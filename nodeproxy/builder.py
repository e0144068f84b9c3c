# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

""" Synthesis of read-only classes.

The read-only class of a base class ``B`` is built at runtime as::

    class B_ReadOnly(B):
        __slots__ = ()

        def __init__(self, <parameters of B.__init__>):
            B.__init__(self, <parameters of B.__init__>)

        @ReadOnlyProperty
        def name(self):             # for each browsable property of B
            return B.name.fget(self)

        @name.setter
        def name(self, value):      # when B.name is writable
            pass

Properties marked ``browsable(False)`` on ``B`` are not redefined, so they
behave exactly as on ``B``.

While the forwarded initializer runs, the inert setters still reach the base
setters, so that an initializer assigning through its own properties builds
the same state as on ``B``.  Once it has returned, assignments are discarded.
"""
from __future__ import annotations

import threading

from decorator import decorate

from .exceptions import ProxyError, SynthesisError
from .fields import ReadOnlyProperty
from .models import PropertyInfo, TypeDescriptor


# ids of the read-only instances whose initializer is running, per thread
_local = threading.local()


def _initializing() -> set[int]:
    try:
        return _local.objects
    except AttributeError:
        _local.objects = set()
        return _local.objects


def _forward_init(init, self, *args, **kwargs):
    objects = _initializing()
    objects.add(id(self))
    try:
        init(self, *args, **kwargs)
    finally:
        objects.discard(id(self))


def _make_init(descriptor: TypeDescriptor):
    # decorate() gives the wrapper the exact signature of the base initializer,
    # and binds the arguments against it on every call
    init = decorate(descriptor.constructor.function, _forward_init)
    init.__qualname__ = descriptor.readonly_qualname + '.__init__'
    return init


def _make_property(info: PropertyInfo) -> ReadOnlyProperty:
    base_get = info.prop.fget
    base_set = info.prop.fset
    fget = fset = fdel = None

    if info.readable:
        def fget(self):
            return base_get(self)

    if info.writable:
        def fset(self, value):
            if id(self) in _initializing():
                base_set(self, value)

    if info.deletable:
        def fdel(self):
            pass

    for func in (fget, fset, fdel):
        if func is not None:
            func.__name__ = info.name
    return ReadOnlyProperty(fget, fset, fdel, info.prop.__doc__)


def build_readonly_class(descriptor: TypeDescriptor) -> type:
    """ Create the read-only class described by ``descriptor``.

    :raise SynthesisError: when the class cannot be created; nothing is
        registered anywhere in that case
    """
    base = descriptor.base
    try:
        attrs = {
            '__module__': base.__module__,
            '__qualname__': descriptor.readonly_qualname,
            '__doc__': base.__doc__,
            '__slots__': (),
            '__init__': _make_init(descriptor),
            '_readonly_base': base,
            '_readonly_constructor': descriptor.constructor,
        }
        for info in descriptor.eligible:
            attrs[info.name] = _make_property(info)

        # honour the metaclass of the base class
        return type(base)(descriptor.readonly_name, (base,), attrs)
    except ProxyError:
        raise
    except Exception as exc:
        raise SynthesisError(
            "Cannot build the read-only class of %s: %s" % (descriptor.name, exc),
            base=base,
        ) from exc
