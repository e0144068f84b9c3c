# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

""" Read-only views of editable objects.

Typical usage, when the document behind ``node`` is locked::

    from nodeproxy import create_readonly_view

    grid.selected_object = create_readonly_view(node)

The view is a new object, built with the arguments ``node`` reports through
``get_constructor_args()``.  It does not keep any reference to ``node``.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from .api import ConstructorArgsResolver
from .exceptions import ContractViolation
from .registry import ProxyRegistry, proxies

_logger = logging.getLogger(__name__)


def create_readonly_view(instance, registry: ProxyRegistry | None = None):
    """ Return a read-only view of ``instance``.

    :param instance: an object implementing :class:`ConstructorArgsResolver`
    :param registry: the registry holding the read-only classes (default: the
        process-wide one)
    :raise ContractViolation: when ``instance`` does not implement the
        contract, or reports arguments that do not fit its initializer
    :raise UnsupportedTypeError: when the class of ``instance`` has no
        initializer with parameters
    :raise SynthesisError: when the read-only class cannot be built
    """
    if not isinstance(instance, ConstructorArgsResolver):
        raise ContractViolation(
            "%r does not implement get_constructor_args(); no read-only view can be built" % (instance,)
        )
    if registry is None:
        registry = proxies

    cls = registry.get_or_create(type(instance))

    args = instance.get_constructor_args()
    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        raise ContractViolation(
            "%s.get_constructor_args() must return a sequence, not %r" % (type(instance).__name__, args)
        )
    try:
        cls._readonly_constructor.signature.bind(*args)
    except TypeError as exc:
        raise ContractViolation(
            "%s.get_constructor_args() returned arguments that do not fit %s%s: %s"
            % (type(instance).__name__, cls.__name__, cls._readonly_constructor.signature, exc)
        ) from exc

    _logger.debug("Read-only view of %r as %s", instance, cls.__name__)
    return cls(*args)


def is_readonly_view(obj) -> bool:
    """ Return whether ``obj`` is an instance of a read-only class. """
    return getattr(type(obj), '_readonly_base', None) is not None


def select_view(instance, readonly: bool, registry: ProxyRegistry | None = None):
    """ Return the object to show in a property grid: ``instance`` itself
    when it may be edited, a read-only view of it otherwise.
    """
    if not readonly or is_readonly_view(instance):
        return instance
    return create_readonly_view(instance, registry=registry)
