# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

""" Node classes shared by the tests. """
import abc
import unittest

from nodeproxy import AttributeArgsResolver, browsable
from nodeproxy.registry import ProxyRegistry


class Target(AttributeArgsResolver):
    """ A build target. """

    def __init__(self, name: str, description: str):
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value):
        self._name = value

    @property
    def description(self) -> str:
        """ What the target does. """
        return self._description

    @description.setter
    def description(self, value):
        self._description = value


class HiddenTarget(AttributeArgsResolver):

    def __init__(self, name, description):
        self._name = name
        self._description = description

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value

    @browsable(False)
    @property
    def description(self):
        return self._description

    @description.setter
    def description(self, value):
        self._description = value


class Task(AttributeArgsResolver):
    """ Assigns its state through its own properties. """

    def __init__(self, name, enabled=True):
        self.name = name
        self.enabled = enabled

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value.strip()

    @name.deleter
    def name(self):
        del self._name

    @property
    def enabled(self):
        return self._enabled

    @enabled.setter
    def enabled(self, value):
        self._enabled = bool(value)

    @property
    def label(self):
        return "%s (%s)" % (self.name, 'on' if self.enabled else 'off')

    def _set_password(self, value):
        self._password = value

    password = property(None, _set_password)

    @property
    def _private(self):
        return 'private'


class Bare(object):
    """ Only has a default initializer. """

    def __init__(self):
        self.value = 1

    def get_constructor_args(self):
        return []


class Empty(object):

    def get_constructor_args(self):
        return []


class Opaque(object):
    """ Does not implement get_constructor_args(). """

    def __init__(self, value):
        self.value = value


class Picky(AttributeArgsResolver):

    def __init__(self, value):
        self.value = value

    def __init_subclass__(cls, **kwargs):
        raise RuntimeError("no subclass of Picky allowed")


class Registering(abc.ABCMeta):
    created = []

    def __init__(cls, name, bases, attrs):
        super().__init__(name, bases, attrs)
        Registering.created.append(name)


class Tagged(AttributeArgsResolver, metaclass=Registering):

    def __init__(self, tag):
        self.tag = tag


class ProxyCase(unittest.TestCase):
    """ Test case with a fresh registry, counting the synthesized classes. """

    def setUp(self):
        super().setUp()
        self.registry = ProxyRegistry('test')
        self.built = []
        self.registry.on_build.append(lambda base, cls: self.built.append((base, cls)))
