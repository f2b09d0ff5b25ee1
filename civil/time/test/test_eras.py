from .. import core
from ..types import FieldKind as F, DurationUnitKind as U
from . import mock

def test_buddhist(test):
	r = mock.registry()
	be = r.chronology('buddhist', 'UTC')
	ts = be.instant(2545, 6, 9)
	test/ts == 1023580800000
	test/be.select(ts, F.year, F.era, F.yearOfEra) == (2545, 1, 2545)
	test/be.select(ts, F.weekyear) == 2545
	test/be.select(ts, F.centuryOfEra, F.yearOfCentury) == (26, 45)
	test/be.field(F.era).minimum() == 1
	test/be.field(F.era).maximum() == 1

def test_buddhist_year_zero(test):
	be = mock.registry().chronology('buddhist', 'UTC')
	gj = mock.registry().chronology('gj', 'UTC')
	# 543 BCE is year 1 BE; 544 BCE is year 0 BE.
	test/be.instant(1, 1, 1) == gj.instant(-543, 1, 1)
	test/be.instant(0, 1, 1) == gj.instant(-544, 1, 1)
	test/be.field(F.year).add(be.instant(0, 3, 1), 1) == be.instant(1, 3, 1)

def test_buddhist_cutover(test):
	be = mock.registry().chronology('buddhist', 'UTC')
	test/be.date(-12219292800000) == (2125, 10, 15)
	test/be.date(-12219292800000 - 1) == (2125, 10, 4)

def test_buddhist_arithmetic(test):
	be = mock.registry().chronology('buddhist', 'UTC')
	ts = be.instant(2545, 6, 9)
	test/be.add(ts, U.years, 1) == be.instant(2546, 6, 9)
	test/be.unit(U.years).difference(ts, be.instant(2550, 6, 8)) == 4
	test/core.IllegalFieldValue ^ (lambda: be.field(F.era).set(ts, 0))
