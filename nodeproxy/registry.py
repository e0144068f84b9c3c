# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

"""Read-only classes Registry
"""
from __future__ import annotations

import logging
import threading
import time
import typing
from collections.abc import Mapping

from . import builder, models
from .exceptions import ProxyError, SynthesisError
from .tools.cache import proxy_counter
from .tools.func import locked

_logger = logging.getLogger(__name__)


class ProxyRegistry(Mapping):
    """ Read-only classes registry.

    The registry is essentially a mapping between base classes and their
    read-only classes.  A base class gets at most one read-only class for the
    lifetime of the registry: entries are only added, after a complete
    synthesis, and never removed.
    """
    _lock = threading.RLock()

    def __init__(self, cache_name: str = 'default'):
        self.classes: dict[type, type] = {}
        self.stat = proxy_counter()
        self.stat.cache_name = cache_name
        # callbacks called with (base, readonly_class) after each synthesis
        self.on_build: list[typing.Callable[[type, type], None]] = []

    #
    # Mapping abstract methods implementation
    # => mixin provides methods keys, items, values, get, __eq__, and __ne__
    #
    def __len__(self):
        """ Return the number of read-only classes. """
        return len(self.classes)

    def __iter__(self):
        """ Return an iterator over the base classes. """
        return iter(self.classes)

    def __getitem__(self, base: type) -> type:
        """ Return the read-only class of ``base`` or raise KeyError if it
        hasn't been built.
        """
        return self.classes[base]

    def __repr__(self):
        return "<%s %s: %d classes>" % (type(self).__name__, self.stat.cache_name, len(self))

    def find(self, name: str) -> type | None:
        """ Return the read-only class with the given dotted name, if any. """
        for cls in self.classes.values():
            if models.full_name(cls) == name:
                return cls
        return None

    @locked
    def get_or_create(self, base: type) -> type:
        """ Return the read-only class of ``base``, building it on first
        request.

        :raise UnsupportedTypeError: when ``base`` cannot be proxied
        :raise SynthesisError: when building the class fails
        """
        if not isinstance(base, type):
            raise TypeError("expected a class, got %r" % (base,))
        if vars(base).get('_readonly_base') is not None:
            # already a read-only class
            return base

        try:
            cls = self.classes[base]
            self.stat.hit += 1
            return cls
        except KeyError:
            self.stat.miss += 1

        start = time.time()
        try:
            try:
                descriptor = models.describe(base)
                cls = builder.build_readonly_class(descriptor)
            except ProxyError:
                raise
            except Exception as exc:
                raise SynthesisError(
                    "Cannot describe %s: %s" % (models.full_name(base), exc),
                    base=base,
                ) from exc
        except ProxyError as exc:
            self.stat.err += 1
            _logger.warning("Failed to build the read-only class of %s: %s", models.full_name(base), exc)
            raise

        self.classes[base] = cls
        duration = time.time() - start
        self.stat.gen_time += duration
        _logger.debug("Read-only class %s built in %.6fs", models.full_name(cls), duration)

        for callback in self.on_build:
            callback(base, cls)
        return cls


# the process-wide registry
proxies = ProxyRegistry()
