# Part of Nodeproxy, see License file for full copyright and licensing details.

"""
    Class descriptors for read-only views:
     * the constructor a read-only class forwards to
     * the properties a read-only class overrides, and the ones it keeps

"""
from __future__ import annotations

import inspect
import logging
import typing

from . import fields
from .exceptions import UnsupportedTypeError
from .tools import config

_logger = logging.getLogger(__name__)


class ParameterInfo(typing.NamedTuple):
    name: str
    annotation: typing.Any
    kind: inspect._ParameterKind
    default: typing.Any


class ConstructorInfo(typing.NamedTuple):
    """ The initializer of a class, with its parameters in declaration order
    (``self`` excluded).
    """
    function: typing.Callable
    signature: inspect.Signature
    parameters: tuple[ParameterInfo, ...]

    @property
    def types(self):
        return tuple(param.annotation for param in self.parameters)


class PropertyInfo(typing.NamedTuple):
    name: str
    value_type: typing.Any
    readable: bool
    writable: bool
    deletable: bool
    browsable: bool
    prop: property


class TypeDescriptor(typing.NamedTuple):
    """ Metadata view of a class that read-only views can be built for. """
    base: type
    name: str
    constructor: ConstructorInfo
    eligible: tuple[PropertyInfo, ...]
    passthrough: tuple[PropertyInfo, ...]

    @property
    def readonly_name(self):
        return self.base.__name__ + config['proxy_suffix']

    @property
    def readonly_qualname(self):
        return self.base.__qualname__ + config['proxy_suffix']


def full_name(cls: type) -> str:
    return "%s.%s" % (cls.__module__, cls.__qualname__)


def _type_hints(func) -> dict[str, typing.Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, SyntaxError, TypeError, AttributeError):
        # forward references that cannot be parsed or resolved from the function's module
        return dict(getattr(func, '__annotations__', None) or {})


def resolve_constructor(base: type) -> ConstructorInfo:
    """ Return the initializer read-only views of ``base`` forward to.

    A class has a single effective initializer, the first ``__init__`` found
    along its MRO.  It qualifies when it is a Python function taking one
    parameter or more besides ``self``; otherwise ``base`` is unsupported.
    """
    for klass in base.__mro__:
        if '__init__' in vars(klass):
            init = vars(klass)['__init__']
            break
    else:
        init = None

    if init is None or init is object.__init__ or not inspect.isfunction(init):
        raise UnsupportedTypeError(
            "%s has no initializer with parameters; it cannot be proxied" % full_name(base),
            base=base,
        )

    signature = inspect.signature(init)
    params = list(signature.parameters.values())[1:]
    if not params:
        raise UnsupportedTypeError(
            "%s only has a zero-argument initializer; it cannot be proxied" % full_name(base),
            base=base,
        )

    hints = _type_hints(init)
    parameters = tuple(
        ParameterInfo(
            param.name,
            hints.get(param.name, typing.Any),
            param.kind,
            param.default,
        )
        for param in params
    )
    return ConstructorInfo(init, signature.replace(parameters=params), parameters)


def select_properties(base: type) -> tuple[tuple[PropertyInfo, ...], tuple[PropertyInfo, ...]]:
    """ Partition the public properties of ``base`` into the ones a read-only
    view overrides and the ones it inherits unchanged.

    :return: a pair ``(eligible, passthrough)``; properties without any
        accessor are in neither
    """
    eligible = []
    passthrough = []
    for name, prop in fields.get_properties(base).items():
        if prop.fget is None and prop.fset is None:
            continue
        info = PropertyInfo(
            name=name,
            value_type=_type_hints(prop.fget).get('return', typing.Any) if prop.fget else typing.Any,
            readable=prop.fget is not None,
            writable=prop.fset is not None,
            deletable=prop.fdel is not None,
            browsable=fields.is_browsable(prop),
            prop=prop,
        )
        if info.browsable:
            eligible.append(info)
        else:
            passthrough.append(info)
    return tuple(eligible), tuple(passthrough)


def describe(base: type) -> TypeDescriptor:
    """ Build the descriptor of ``base``.

    :raise UnsupportedTypeError: when ``base`` has no suitable initializer
    """
    constructor = resolve_constructor(base)
    eligible, passthrough = select_properties(base)
    _logger.debug(
        "%s: constructor%s, %d overridden properties, %d kept",
        full_name(base), constructor.signature, len(eligible), len(passthrough),
    )
    return TypeDescriptor(
        base=base,
        name=full_name(base),
        constructor=constructor,
        eligible=eligible,
        passthrough=passthrough,
    )
