"""
Coercion engine behavioral tests.

Scope
- Validate each converter's success value, type tags and failure labels.
- Validate numeric range handling ("out_of_range") per format.
- Validate coerce() dispatch and argument checking.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import math
import struct
import unittest
from unittest import TestCase, mock

from typedargs import ArgumentKind, ArgumentType, CoercionOutcome, INT_MAX, INT_MIN, coerce
from typedargs.utils import Unset


class TestInt(TestCase):
    """Behavioral tests for INT coercion."""

    def testIntFromDigits(self):
        outcome = coerce("42", ArgumentType.INT)
        self.assertEqual(outcome.value, 42)
        self.assertEqual(outcome.expected, "int")
        self.assertEqual(outcome.actual, "int")
        self.assertTrue(outcome)

    def testIntSignedAndPadded(self):
        self.assertEqual(coerce("-7", ArgumentType.INT).value, -7)
        self.assertEqual(coerce("+7", ArgumentType.INT).value, 7)
        self.assertEqual(coerce(" 13 ", ArgumentType.INT).value, 13)

    def testIntNonNumericFails(self):
        outcome = coerce("forty-two", ArgumentType.INT)
        self.assertIs(outcome.value, Unset)
        self.assertEqual(outcome.expected, "int")
        self.assertEqual(outcome.actual, "string")
        self.assertFalse(outcome)

    def testIntTrailingGarbageFails(self):
        self.assertEqual(coerce("12abc", ArgumentType.INT).actual, "string")
        self.assertEqual(coerce("1.5", ArgumentType.INT).actual, "string")
        self.assertEqual(coerce("", ArgumentType.INT).actual, "string")

    def testIntRangeBoundaries(self):
        self.assertEqual(coerce(str(INT_MAX), ArgumentType.INT).value, 2147483647)
        self.assertEqual(coerce(str(INT_MIN), ArgumentType.INT).value, -2147483648)

    def testIntOverflowIsOutOfRange(self):
        self.assertEqual(coerce("2147483648", ArgumentType.INT).actual, "out_of_range")
        self.assertEqual(coerce("-2147483649", ArgumentType.INT).actual, "out_of_range")


class TestFloatAndDouble(TestCase):
    """Behavioral tests for FLOAT (single precision) and DOUBLE coercion."""

    def testFloatExactValue(self):
        outcome = coerce("42.5", ArgumentType.FLOAT)
        self.assertEqual(outcome.value, 42.5)
        self.assertEqual((outcome.expected, outcome.actual), ("float", "float"))

    def testFloatRoundsToSinglePrecision(self):
        value = coerce("0.1", ArgumentType.FLOAT).value
        self.assertNotEqual(value, 0.1)
        self.assertAlmostEqual(value, 0.1, places=6)

    def testDoubleKeepsDoublePrecision(self):
        outcome = coerce("0.1", ArgumentType.DOUBLE)
        self.assertEqual(outcome.value, 0.1)
        self.assertEqual((outcome.expected, outcome.actual), ("double", "double"))

    def testDecimalForms(self):
        for raw, expected in (("3", 3.0), ("-2.", -2.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-1", 0.25)):
            self.assertEqual(coerce(raw, ArgumentType.DOUBLE).value, expected, raw)

    def testFloatOverflowIsOutOfRange(self):
        self.assertEqual(coerce("1e39", ArgumentType.FLOAT).actual, "out_of_range")
        self.assertEqual(coerce("1e39", ArgumentType.DOUBLE).value, 1e39)

    def testFloatJustAboveSingleMaxIsOutOfRange(self):
        outcome = coerce("3.5e38", ArgumentType.FLOAT)
        self.assertFalse(outcome)
        self.assertEqual(outcome.actual, "out_of_range")
        self.assertIs(outcome.value, Unset)
        self.assertTrue(coerce("3.4e38", ArgumentType.FLOAT))

    def testFloatPackingToInfinityIsOutOfRange(self):
        packed = struct.pack("f", math.inf)
        with mock.patch("typedargs.coercions.struct.pack", return_value=packed):
            self.assertEqual(coerce("1e39", ArgumentType.FLOAT).actual, "out_of_range")

    def testDoubleOverflowIsOutOfRange(self):
        self.assertEqual(coerce("1e400", ArgumentType.DOUBLE).actual, "out_of_range")
        self.assertEqual(coerce("-1e400", ArgumentType.FLOAT).actual, "out_of_range")

    def testUnderflowIsOutOfRange(self):
        self.assertEqual(coerce("1e-50", ArgumentType.FLOAT).actual, "out_of_range")
        self.assertEqual(coerce("1e-400", ArgumentType.DOUBLE).actual, "out_of_range")

    def testZeroIsNotUnderflow(self):
        self.assertEqual(coerce("0.000", ArgumentType.FLOAT).value, 0.0)
        self.assertEqual(coerce("0e-999", ArgumentType.DOUBLE).value, 0.0)

    def testInfinityAndNanLiterals(self):
        self.assertTrue(math.isinf(coerce("inf", ArgumentType.FLOAT).value))
        self.assertTrue(math.isinf(coerce("-Infinity", ArgumentType.DOUBLE).value))
        self.assertTrue(math.isnan(coerce("NaN", ArgumentType.DOUBLE).value))

    def testNonNumericFails(self):
        for raw in ("abc", ".", "", "1.2.3", "0x10", "e5"):
            self.assertEqual(coerce(raw, ArgumentType.FLOAT).actual, "string", raw)
            self.assertEqual(coerce(raw, ArgumentType.DOUBLE).actual, "string", raw)


class TestBool(TestCase):
    """Behavioral tests for BOOL coercion."""

    def testTruthyTokens(self):
        for raw in ("true", "TRUE", "True", "1"):
            outcome = coerce(raw, ArgumentType.BOOL)
            self.assertIs(outcome.value, True, raw)
            self.assertEqual(outcome.actual, "bool")

    def testFalsyTokens(self):
        for raw in ("false", "FALSE", "0"):
            self.assertIs(coerce(raw, ArgumentType.BOOL).value, False, raw)

    def testOtherTokensFail(self):
        for raw in ("yes", "no", "", "2", "t"):
            outcome = coerce(raw, ArgumentType.BOOL)
            self.assertIs(outcome.value, Unset, raw)
            self.assertEqual(outcome.actual, "string")


class TestCharAndString(TestCase):
    """Behavioral tests for CHAR and STRING coercion."""

    def testCharSingleCharacter(self):
        outcome = coerce("a", ArgumentType.CHAR)
        self.assertEqual(outcome.value, "a")
        self.assertEqual((outcome.expected, outcome.actual), ("char", "char"))

    def testCharRejectsOtherLengths(self):
        self.assertEqual(coerce("ab", ArgumentType.CHAR).actual, "string")
        self.assertEqual(coerce("", ArgumentType.CHAR).actual, "string")

    def testStringIsVerbatim(self):
        self.assertEqual(coerce(" John ", ArgumentType.STRING).value, " John ")
        self.assertEqual(coerce("", ArgumentType.STRING).value, "")
        self.assertTrue(coerce("", ArgumentType.STRING))


class TestDispatch(TestCase):
    """Behavioral tests for coerce() and supporting types."""

    def testRawMustBeString(self):
        with self.assertRaises(TypeError):
            coerce(42, ArgumentType.INT)

    def testTypeMustBeArgumentType(self):
        with self.assertRaises(TypeError):
            coerce("42", int)

    def testOutcomeIsTuple(self):
        outcome = coerce("7", ArgumentType.INT)
        self.assertIsInstance(outcome, CoercionOutcome)
        value, expected, actual = outcome
        self.assertEqual((value, expected, actual), (7, "int", "int"))

    def testTypeTags(self):
        self.assertEqual([member.tag for member in ArgumentType],
                         ["string", "int", "float", "double", "bool", "char"])

    def testKindInference(self):
        self.assertIs(ArgumentKind.infer("number"), ArgumentKind.POSITIONAL)
        self.assertIs(ArgumentKind.infer("-n"), ArgumentKind.OPTIONAL)
        self.assertIs(ArgumentKind.infer("--number"), ArgumentKind.OPTIONAL)


if __name__ == "__main__":
    unittest.main()
