# Part of Nodeproxy, see License file for full copyright and licensing details.

"""The Nodeproxy API module defines the contract of the objects read-only
views can be built for.
"""
from __future__ import annotations

__all__ = [
    'ConstructorArgsResolver',
    'AttributeArgsResolver',
]

import abc
import inspect
import typing

from .exceptions import ContractViolation
from .models import resolve_constructor

if typing.TYPE_CHECKING:
    from collections.abc import Sequence



class ConstructorArgsResolver(abc.ABC):
    """ Must be implemented by the objects edited in property grids.

    Any class defining a callable ``get_constructor_args`` is considered a
    subclass, whether or not it inherits from this one.
    """
    __slots__ = ()

    @abc.abstractmethod
    def get_constructor_args(self) -> Sequence:
        """ Return the arguments to pass to the initializer of this object's
        class to create an equivalent object, in positional order.
        """

    @classmethod
    def __subclasshook__(cls, C):
        if cls is ConstructorArgsResolver:
            for B in C.__mro__:
                if 'get_constructor_args' in B.__dict__:
                    if callable(B.__dict__['get_constructor_args']):
                        return True
                    break
        return NotImplemented


class AttributeArgsResolver(ConstructorArgsResolver):
    """ Resolve the constructor arguments from the object's attributes.

    By default, the attributes are named after the parameters of the class
    initializer, in the same order; a variadic parameter contributes all the
    items of its attribute.  Classes whose attributes are named differently
    list them in ``_constructor_attrs``::

        class TargetNode(AttributeArgsResolver):
            _constructor_attrs = ('_element', 'name')

            def __init__(self, element, name):
                self._element = element
                self.name = name
    """
    __slots__ = ()

    _constructor_attrs: tuple[str, ...] | None = None

    def get_constructor_args(self) -> list:
        if self._constructor_attrs is not None:
            return [getattr(self, name) for name in self._constructor_attrs]

        args = []
        for param in resolve_constructor(type(self)).parameters:
            if param.kind == inspect.Parameter.VAR_POSITIONAL:
                args.extend(getattr(self, param.name))
            elif param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
                args.append(getattr(self, param.name))
            elif param.default is inspect.Parameter.empty:
                raise ContractViolation(
                    "%s: keyword-only parameter %r cannot be passed positionally"
                    % (type(self).__name__, param.name)
                )
        return args
