# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

""" Property markers understood by read-only views and property grids.

Two markers travel on properties:

* ``browsable``: set with :func:`browsable` on the classes being edited.
  A property marked ``browsable(False)`` is hidden from property grids, and
  read-only views leave it exactly as the base class defines it.
* ``readonly``: carried by :class:`ReadOnlyProperty`, the kind of property
  that read-only views define.  Property grids show such properties as
  locked, whether or not they have a setter.
"""
from __future__ import annotations

import inspect
import typing


__all__ = [
    'browsable', 'ReadOnlyProperty', 'GridRow',
    'get_properties', 'is_browsable', 'is_readonly', 'property_grid',
]


def browsable(flag: bool = True):
    """ Decorate a property (or one of its accessors) to declare whether it
    is shown in property grids::

        @browsable(False)
        @property
        def parent_element(self):
            return self._parent_element

    The mark is stored on the accessor function, so it survives
    ``@parent_element.setter``.
    """
    def decorate(target):
        if isinstance(target, property):
            func = target.fget or target.fset
            if func is None:
                raise TypeError("browsable() needs a property with a getter or a setter")
        else:
            func = target
        try:
            func._browsable = bool(flag)
        except AttributeError:
            raise TypeError(
                "browsable() cannot mark %r; use a Python function as accessor" % (func,)
            ) from None
        return target
    return decorate


class ReadOnlyProperty(property):
    """ Property defined on read-only views. """
    readonly = True

    def __init__(self, fget=None, fset=None, fdel=None, doc=None):
        super().__init__(fget, fset, fdel, doc)
        if doc is None and fget is not None:
            doc = fget.__doc__
        # the doc of a property subclass is shadowed by the class __doc__
        # unless it lives in the instance dict
        self.__doc__ = doc


class GridRow(typing.NamedTuple):
    name: str
    value: typing.Any
    readonly: bool


def get_properties(cls: type) -> dict[str, property]:
    """ Return the public properties visible on ``cls``, by name, in
    :func:`dir` order.  The most derived definition of each name wins.
    """
    result = {}
    for name in dir(cls):
        if name.startswith('_'):
            continue
        attr = inspect.getattr_static(cls, name)
        if isinstance(attr, property):
            result[name] = attr
    return result


def is_browsable(prop: property) -> bool:
    return all(
        getattr(func, '_browsable', True)
        for func in (prop.fget, prop.fset)
        if func is not None
    )


def is_readonly(prop: property) -> bool:
    return getattr(prop, 'readonly', False) or prop.fset is None


def property_grid(obj) -> list[GridRow]:
    """ Return the rows a property grid shows for ``obj``: its browsable,
    readable properties sorted by name, with their current value and whether
    they may be edited.
    """
    rows = []
    for name, prop in sorted(get_properties(type(obj)).items()):
        if prop.fget is None or not is_browsable(prop):
            continue
        rows.append(GridRow(name, getattr(obj, name), is_readonly(prop)))
    return rows
