# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

import inspect

from nodeproxy import (
    ContractViolation, SynthesisError, UnsupportedTypeError,
    create_readonly_view, is_readonly_view, property_grid, select_view,
)
from nodeproxy.fields import ReadOnlyProperty, is_readonly

from .common import (
    Bare, Empty, HiddenTarget, Opaque, Picky, ProxyCase, Registering, Tagged,
    Target, Task,
)


class TestReadOnlyView(ProxyCase):

    def test_getters(self):
        target = Target("build", "runs build")
        view = create_readonly_view(target, self.registry)
        self.assertEqual(view.name, "build")
        self.assertEqual(view.description, "runs build")
        self.assertIsInstance(view, Target)
        self.assertIsNot(view, target)

    def test_setters_are_inert(self):
        target = Target("build", "runs build")
        view = create_readonly_view(target, self.registry)
        view.name = "x"
        view.description = "y"
        self.assertEqual(view.name, "build")
        self.assertEqual(view.description, "runs build")
        self.assertEqual(target.name, "build")
        self.assertEqual(target.description, "runs build")

    def test_no_shared_state(self):
        target = Target("build", "runs build")
        view = create_readonly_view(target, self.registry)
        target.name = "deploy"
        self.assertEqual(view.name, "build")
        self.assertNotIn('_readonly_base', vars(view))

    def test_passthrough_property(self):
        target = HiddenTarget("build", "runs build")
        view = create_readonly_view(target, self.registry)
        view.description = "changed"
        self.assertEqual(view.description, "changed")
        view.name = "x"
        self.assertEqual(view.name, "build")
        # the original is left alone either way
        self.assertEqual(target.description, "runs build")

        cls = type(view)
        self.assertNotIn('description', vars(cls))
        self.assertIs(cls.description, HiddenTarget.description)

    def test_synthesized_once(self):
        first = create_readonly_view(Target("build", "runs build"), self.registry)
        second = create_readonly_view(Target("test", "runs tests"), self.registry)
        self.assertIs(type(first), type(second))
        self.assertEqual(len(self.built), 1)
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self.registry.stat.miss, 1)
        self.assertEqual(self.registry.stat.hit, 1)
        self.assertEqual(second.name, "test")

    def test_default_constructor_only(self):
        with self.assertRaises(UnsupportedTypeError) as catcher:
            create_readonly_view(Bare(), self.registry)
        self.assertIs(catcher.exception.base, Bare)
        self.assertNotIn(Bare, self.registry)
        self.assertEqual(self.built, [])

        with self.assertRaises(UnsupportedTypeError):
            create_readonly_view(Empty(), self.registry)
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(self.registry.stat.err, 2)

    def test_contract_violation(self):
        with self.assertRaises(ContractViolation):
            create_readonly_view(Opaque(1), self.registry)
        with self.assertRaises(ContractViolation):
            create_readonly_view(None, self.registry)
        # rejected before any synthesis work
        self.assertEqual(self.registry.stat.miss, 0)
        self.assertEqual(len(self.registry), 0)

    def test_bad_constructor_args(self):
        target = Target("build", "runs build")

        target.get_constructor_args = lambda: ["build"]
        with self.assertRaises(ContractViolation):
            create_readonly_view(target, self.registry)

        target.get_constructor_args = lambda: "build"
        with self.assertRaises(ContractViolation):
            create_readonly_view(target, self.registry)

        target.get_constructor_args = lambda: ("build", "runs build")
        self.assertEqual(create_readonly_view(target, self.registry).name, "build")

    def test_initializer_using_properties(self):
        task = Task("  compile ", enabled=0)
        view = create_readonly_view(task, self.registry)
        self.assertEqual(view.name, "compile")
        self.assertIs(view.enabled, False)
        self.assertEqual(view.label, task.label)

        view.name = "link"
        view.enabled = True
        del view.name
        self.assertEqual(view.name, "compile")
        self.assertIs(view.enabled, False)

    def test_setter_only_property(self):
        task = Task("compile")
        task.password = "secret"
        view = create_readonly_view(task, self.registry)
        prop = vars(type(view))['password']
        self.assertIsNone(prop.fget)
        self.assertIsNotNone(prop.fset)
        view.password = "other"
        self.assertFalse(hasattr(view, '_password'))
        with self.assertRaises(AttributeError):
            view.password

    def test_private_property_untouched(self):
        view = create_readonly_view(Task("compile"), self.registry)
        self.assertNotIn('_private', vars(type(view)))
        self.assertEqual(view._private, 'private')

    def test_readonly_marker(self):
        view = create_readonly_view(Task("compile"), self.registry)
        cls = type(view)
        for name in ('name', 'enabled', 'label', 'password'):
            prop = vars(cls)[name]
            self.assertIsInstance(prop, ReadOnlyProperty)
            self.assertTrue(is_readonly(prop))
        self.assertFalse(is_readonly(Task.name))
        self.assertTrue(is_readonly(Task.label))

    def test_class_shape(self):
        view = create_readonly_view(Target("build", "runs build"), self.registry)
        cls = type(view)
        self.assertEqual(cls.__name__, 'Target_ReadOnly')
        self.assertEqual(cls.__qualname__, 'Target_ReadOnly')
        self.assertEqual(cls.__module__, Target.__module__)
        self.assertEqual(cls.__bases__, (Target,))
        self.assertEqual(cls.description.__doc__, Target.description.__doc__)
        self.assertEqual(
            list(inspect.signature(cls).parameters),
            ['name', 'description'],
        )
        self.assertEqual(cls("a", "b").name, "a")
        with self.assertRaises(TypeError):
            cls("a")
        with self.assertRaises(TypeError):
            cls("a", "b", "c")

    def test_property_doc(self):
        view = create_readonly_view(Target("build", "runs build"), self.registry)
        self.assertEqual(vars(type(view))["description"].__doc__, " What the target does. ")
        self.assertIsNone(vars(type(view))["name"].__doc__)

    def test_metaclass(self):
        view = create_readonly_view(Tagged("t"), self.registry)
        self.assertIs(type(type(view)), Registering)
        self.assertIn('Tagged_ReadOnly', Registering.created)
        self.assertEqual(view.tag, "t")

    def test_synthesis_failure(self):
        with self.assertLogs('nodeproxy.registry', level='WARNING'):
            with self.assertRaises(SynthesisError) as catcher:
                create_readonly_view(Picky(1), self.registry)
        self.assertIsInstance(catcher.exception.__cause__, RuntimeError)
        self.assertNotIn(Picky, self.registry)
        self.assertEqual(self.built, [])

    def test_view_of_view(self):
        view = create_readonly_view(Target("build", "runs build"), self.registry)
        again = create_readonly_view(view, self.registry)
        self.assertIs(type(again), type(view))
        self.assertEqual(again.name, "build")
        self.assertEqual(len(self.built), 1)

    def test_select_view(self):
        target = Target("build", "runs build")
        self.assertIs(select_view(target, False, self.registry), target)
        view = select_view(target, True, self.registry)
        self.assertTrue(is_readonly_view(view))
        self.assertFalse(is_readonly_view(target))
        self.assertIs(select_view(view, True, self.registry), view)

    def test_property_grid(self):
        target = HiddenTarget("build", "runs build")
        self.assertEqual(
            [tuple(row) for row in property_grid(target)],
            [('name', 'build', False)],
        )
        view = create_readonly_view(target, self.registry)
        self.assertEqual(
            [tuple(row) for row in property_grid(view)],
            [('name', 'build', True)],
        )

        rows = property_grid(create_readonly_view(Task("compile"), self.registry))
        self.assertEqual([row.name for row in rows], ['enabled', 'label', 'name'])
        self.assertTrue(all(row.readonly for row in rows))

    def test_default_registry(self):
        from nodeproxy.registry import proxies
        view = create_readonly_view(Target("build", "runs build"))
        self.assertIs(proxies[Target], type(view))
