"""
Unit tests for visibility.py

Tests the per-kind inclusion rules on in-memory declaration nodes.
"""

import unittest

from extraction.visibility import filter_visible, is_visible
from fake_nodes import class_, ctor, enum, interface, method, prop


class TestPropertyVisibility(unittest.TestCase):
    """Properties accept public, internal and protected."""

    def test_accepted_keywords(self):
        for modifiers in ("public", "internal", "protected", "protected internal", "public static"):
            with self.subTest(modifiers=modifiers):
                self.assertTrue(is_visible(prop("Name", "string", modifiers)))

    def test_private_excluded(self):
        self.assertFalse(is_visible(prop("Name", "string", "private")))

    def test_implicit_excluded(self):
        """Default accessibility is never promoted."""
        self.assertFalse(is_visible(prop("Name", "string")))

    def test_static_alone_excluded(self):
        self.assertFalse(is_visible(prop("Count", "int", "static")))


class TestMethodVisibility(unittest.TestCase):
    """Methods and constructors require explicit public."""

    def test_public_method_included(self):
        self.assertTrue(is_visible(method("Run", "void", "public")))

    def test_internal_method_excluded(self):
        self.assertFalse(is_visible(method("Foo", "void", "internal")))

    def test_protected_method_excluded(self):
        self.assertFalse(is_visible(method("Foo", "void", "protected")))

    def test_implicit_method_excluded(self):
        self.assertFalse(is_visible(method("Foo", "void")))

    def test_public_constructor_included(self):
        self.assertTrue(is_visible(ctor("Person", "public")))

    def test_private_constructor_excluded(self):
        self.assertFalse(is_visible(ctor("Person", "private")))


class TestTypeVisibility(unittest.TestCase):
    """Type declarations are always included."""

    def test_types_without_modifiers(self):
        for node in (class_("A"), interface("IA"), enum("E")):
            with self.subTest(kind=node.kind):
                self.assertTrue(is_visible(node))

    def test_private_type(self):
        self.assertTrue(is_visible(class_("Hidden", "private")))


class TestFilterVisible(unittest.TestCase):
    """Filtering keeps input order."""

    def test_order_preserved(self):
        nodes = [
            prop("A", "int", "public"),
            prop("B", "int", "private"),
            prop("C", "int", "protected"),
            prop("D", "int"),
            prop("E", "int", "internal"),
        ]
        self.assertEqual(
            [node.identifier for node in filter_visible(nodes)],
            ["A", "C", "E"],
        )

    def test_empty_input(self):
        self.assertEqual(filter_visible([]), [])


if __name__ == "__main__":
    unittest.main()
