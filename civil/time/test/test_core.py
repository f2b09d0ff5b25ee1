from .. import core
from ..types import FieldKind

def test_checked_arithmetic(test):
	test/core.add(1, 2) == 3
	test/core.subtract(1, 2) == -1
	test/core.multiply(-3, 4) == -12
	test/core.negate(5) == -5

	test/core.ArithmeticOverflow ^ (lambda: core.add(core.maximum, 1))
	test/core.ArithmeticOverflow ^ (lambda: core.subtract(core.minimum, 1))
	test/core.ArithmeticOverflow ^ (lambda: core.multiply(core.maximum, 2))
	test/core.ArithmeticOverflow ^ (lambda: core.negate(core.minimum))
	test/core.negate(core.maximum) == core.minimum + 1

def test_overflow_is_overflow_error(test):
	test/issubclass(core.ArithmeticOverflow, OverflowError) == True
	test/issubclass(core.IllegalArgument, ValueError) == True
	test/issubclass(core.UnknownZone, core.IllegalArgument) == True
	test/issubclass(core.IllegalFieldValue, core.IllegalArgument) == True

def test_quotient_truncates(test):
	test/core.quotient(7, 2) == 3
	test/core.quotient(-7, 2) == -3
	test/core.quotient(7, -2) == -3
	test/core.quotient(-7, -2) == 3

def test_wrap(test):
	test/core.wrap(13, 1, 12) == 1
	test/core.wrap(0, 1, 12) == 12
	test/core.wrap(-1, 1, 12) == 11
	test/core.wrap(38, 0, 23) == 14
	test/core.wrap(-25, 0, 23) == 23
	test/core.IllegalArgument ^ (lambda: core.wrap(5, 3, 3))

def test_verify(test):
	test/core.verify(FieldKind.hourOfDay, 23, 0, 23) == 23
	with test/core.IllegalFieldValue as exc:
		core.verify(FieldKind.hourOfDay, 24, 0, 23)
	err = exc()
	test/err.kind == FieldKind.hourOfDay
	test/err.value == 24
	test/err.lower == 0
	test/err.upper == 23
	test/str(err) == "value 24 for hourOfDay must be in the range [0,23]"

def test_error_messages(test):
	test/str(core.UnknownZone('Mars/Olympus')) == "the zone identifier 'Mars/Olympus' is not recognised"
	test/str(core.UnsupportedOperation(FieldKind.era, 'add')) == "era is not supported: add"
	test/str(core.ZoneDataError('X', 'truncated')) == "zone data for 'X' could not be read: truncated"
	test/str(core.IllegalInstant(5)) == "illegal instant due to time zone offset transition: 5"
