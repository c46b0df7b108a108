"""
Tests for the Unset sentinel and the small helpers built around it.
"""
import os
import subprocess
import sys
import unittest
from unittest import TestCase, mock

from typedargs.utils import *


class UnsetTest(TestCase):

    def testSingleton(self) -> None:
        self.assertIs(Unset, UnsetType())

    def testFalsyButDistinct(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, "")

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testUnionAnnotation(self) -> None:
        self.assertIsInstance("x", str | Unset)
        self.assertIsInstance(Unset, str | Unset)


class CoalesceTest(TestCase):

    def testReplacesUnsetOnly(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertIsNone(coalesce(Unset))


class HostattrTest(TestCase):

    def testMissingAttribute(self) -> None:
        self.assertIs(hostattr("__typedargs_missing__"), Unset)
        self.assertEqual(hostattr("__typedargs_missing__", {}), {})

    def testPresentAttribute(self) -> None:
        with mock.patch.object(sys.modules["__main__"], "__styles__", {"hint": "bold"}, create=True):
            self.assertEqual(hostattr("__styles__"), {"hint": "bold"})

    def testNameMustBeString(self) -> None:
        with self.assertRaises(TypeError):
            hostattr(42)


class ImportTest(TestCase):

    def testFreshInterpreterImport(self) -> None:
        result = subprocess.run(
            [sys.executable, "-c", "import typedargs.utils; import typedargs"],
            capture_output=True,
            text=True,
            cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
        )
        self.assertEqual(result.returncode, 0, result.stderr)


if __name__ == "__main__":
    unittest.main()
