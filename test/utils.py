"""
Tests for the internal helpers.

This module verifies:
- The Unset sentinel (singleton, falsy, copy/pickle identity, finality).
- coalesce() and rename() in both forms.
- mirror() read-only views.
- SpecType generated behavior (typename, repr, equality, replace, sealing).
"""
import copy
import pickle
import unittest
from unittest import TestCase

from argscan.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` singleton.
    """

    def testSingleton(self) -> None:
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickle(self) -> None:
        """
        Copy, deepcopy and pickle round-trips preserve identity.
        """
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testUnion(self) -> None:
        self.assertIsInstance("x", str | Unset)
        self.assertIsInstance(Unset, str | Unset)
        self.assertNotIsInstance(1, str | Unset)

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            class Custom(UnsetType):
                pass


class CoalesceTest(TestCase):
    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        for value in (None, 0, "", []):
            with self.subTest(value=value):
                self.assertIs(coalesce(value, "fallback"), value)


class RenameTest(TestCase):
    def testFunctionForm(self) -> None:
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testDecoratorForm(self) -> None:
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__name__, "renamed")

    def testWrongArguments(self) -> None:
        with self.assertRaises(TypeError):
            rename(1, "renamed")
        with self.assertRaises(TypeError):
            rename(len, "renamed")
        with self.assertRaises(TypeError):
            rename(1)
        with self.assertRaises(TypeError):
            rename()


class MirrorTest(TestCase):
    class Holder:
        items = mirror("items")
        table = mirror("table")
        label = mirror("label")

        def __init__(self):
            self._items = [1, 2]
            self._table = {"a": 1}
            self._label = "text"

    def testViews(self) -> None:
        holder = self.Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertEqual(holder.label, "text")
        with self.assertRaises(TypeError):
            holder.table["b"] = 2
        self.assertEqual(holder._table, {"a": 1})

    def testReadOnly(self) -> None:
        with self.assertRaises(AttributeError):
            self.Holder().items = ()

    def testWrongName(self) -> None:
        with self.assertRaises(TypeError):
            mirror(1)


class SpecTypeTest(TestCase):
    class SampleSpec(metaclass=SpecType, final=True):
        __introspectable__ = ("first", "second")

        def __init__(self, first, second=0):
            self._first = first
            self._second = second

    def testTypename(self) -> None:
        self.assertEqual(self.SampleSpec.__typename__, "sample-spec")

    def testRepr(self) -> None:
        self.assertEqual(repr(self.SampleSpec("a", 1)), "sample-spec(first='a', second=1)")

    def testRichRepr(self) -> None:
        self.assertEqual(list(self.SampleSpec("a").__rich_repr__()), [("first", "a"), ("second", 0)])

    def testEquality(self) -> None:
        self.assertEqual(self.SampleSpec("a"), self.SampleSpec("a", 0))
        self.assertNotEqual(self.SampleSpec("a"), self.SampleSpec("b"))
        self.assertEqual(hash(self.SampleSpec("a")), hash(self.SampleSpec("a")))

    def testReplace(self) -> None:
        self.assertEqual(copy.replace(self.SampleSpec("a"), second=2), self.SampleSpec("a", 2))

    def testSealed(self) -> None:
        with self.assertRaises(TypeError):
            class Custom(self.SampleSpec):
                pass


if __name__ == "__main__":
    unittest.main()
