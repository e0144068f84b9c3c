# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.


"""The Nodeproxy Exceptions module defines the errors raised while building
read-only views.

All of them are raised synchronously to the caller of
:func:`nodeproxy.proxy.create_readonly_view`. None of them is retried: the
synthesis is deterministic, so the same class fails the same way again.
"""


class ProxyError(Exception):
    """Generic error raised when a read-only view cannot be built.

    Callers that only want to report "the read-only view could not be built"
    catch this one.
    """

    def __init__(self, message):
        """
        :param message: exception message, suitable for a user dialog
        """
        super().__init__(message)


class ContractViolation(ProxyError):
    """The object does not honour the constructor-args resolver contract.

    .. admonition:: Example

        When the object has no ``get_constructor_args()`` method, or when the
        arguments it returns do not fit its class initializer.
    """


class UnsupportedTypeError(ProxyError):
    """The class cannot be proxied.

    .. admonition:: Example

        When the class only has a zero-argument initializer.
    """

    def __init__(self, message, base=None):
        super().__init__(message)
        self.base = base


class SynthesisError(ProxyError):
    """Failure while emitting the read-only class.

    .. note::

        No cache entry is registered for the class when this is raised.
    """

    def __init__(self, message, base=None):
        super().__init__(message)
        self.base = base
