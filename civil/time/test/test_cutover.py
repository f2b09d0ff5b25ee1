from .. import core
from .. import constants
from .. import earth
from ..types import FieldKind as F, DurationUnitKind as U
from . import mock

day = earth.millis_in_day

def test_cutover_dates(test):
	gj = mock.registry().chronology('gj', 'UTC')
	cutover = constants.gregorian_cutover
	test/gj.instant(1582, 10, 15) == cutover
	test/gj.instant(1582, 10, 4) == cutover - day
	test/gj.date(cutover) == (1582, 10, 15)
	test/gj.date(cutover - 1) == (1582, 10, 4)
	test/gj.date(1023580800000) == (2002, 6, 9)

	for d in range(5, 15):
		test/core.IllegalFieldValue ^ (lambda: gj.instant(1582, 10, d))

def test_cutover_continuity(test):
	gj = mock.registry().chronology('gj', 'UTC')
	cutover = constants.gregorian_cutover
	previous = None
	for i in range(-400, 400):
		ymd = gj.date(cutover + (i * day))
		if previous is not None:
			test/ymd > previous
		previous = ymd

	doy = gj.field(F.dayOfYear)
	test/doy.get(cutover - day) == 277
	test/doy.get(cutover) == 278
	test/doy.get(cutover + day) == 279

	# 1582-10-04 (Julian) is a Thursday in the fortieth week.
	wow = gj.field(F.weekOfWeekyear)
	test/wow.get(cutover - day) == 40
	test/wow.get(cutover) == 40
	test/wow.get(cutover + (7 * day)) == 41

def test_cutover_julian_leap_day(test):
	gj = mock.registry().chronology('gj', 'UTC')
	# 1500 is a leap year in the Julian calendar.
	feb29 = gj.instant(1500, 2, 29)
	test/gj.date(feb29) == (1500, 2, 29)
	test/gj.date(feb29 + day) == (1500, 3, 1)
	test/core.IllegalFieldValue ^ (lambda: gj.instant(1700, 2, 29))

def test_cutover_arithmetic(test):
	gj = mock.registry().chronology('gj', 'UTC')
	cutover = constants.gregorian_cutover
	years = gj.unit(U.years)

	earlier = years.add(cutover, -1)
	test/gj.date(earlier) == (1581, 10, 15)
	test/years.difference(earlier, cutover) == 1
	test/years.difference(cutover, earlier) == -1
	test/years.add(earlier, 1) == cutover

	months = gj.unit(U.months)
	test/gj.date(months.add(gj.instant(1582, 9, 30), 1)) == (1582, 10, 30)

	# Days are precise across the gap.
	test/gj.unit(U.days).add(cutover - day, 1) == cutover

def test_cutover_year_zero(test):
	gj = mock.registry().chronology('gj', 'UTC')
	test/gj.select(gj.instant(-1), F.year, F.era) == (-1, 0)
	test/core.IllegalFieldValue ^ (lambda: gj.instant(0))
	test/gj.field(F.year).add(gj.instant(-1, 6, 1), 1) == gj.instant(1, 6, 1)

def test_cutover_parameters(test):
	r = mock.registry()
	# 1752-09-14, the British adoption.
	british = r.chronology('gj', 'UTC', cutover=-6857222400000)
	test/british.date(-6857222400000) == (1752, 9, 14)
	test/british.date(-6857222400000 - day) == (1752, 9, 2)
	test/british.date(constants.gregorian_cutover) == (1582, 10, 5)

	# 0000-12-31 is before the first year.
	test/core.IllegalArgument ^ (lambda: r.chronology('gj', 'UTC', cutover=-62135596800000 - day))

def test_cutover_field_bounds(test):
	gj = mock.registry().chronology('gj', 'UTC')
	dom = gj.field(F.dayOfMonth)
	oct4 = gj.instant(1582, 10, 4)
	test/dom.maximum(oct4) == 4
	test/dom.minimum(gj.instant(1582, 10, 20)) == 15
	test/dom.maximum(gj.instant(1582, 11, 1)) == 30

def test_cutover_weekyear_conversion(test):
	gj = mock.registry().chronology('gj', 'UTC')
	cutover = constants.gregorian_cutover
	weekyears = gj.unit(U.weekyears)

	ts = gj.field(F.weekOfWeekyear).set(gj.field(F.weekyear).set(cutover - day, 380), 53)
	test/gj.select(ts, F.weekyear, F.weekOfWeekyear) == (380, 53)

	# Gregorian weekyear 3186 has 52 weeks; the week is reduced to fit.
	r = weekyears.add(ts, 2806)
	test/gj.select(r, F.weekyear, F.weekOfWeekyear) == (3186, 52)
	test/gj.field(F.dayOfWeek).get(r) == gj.field(F.dayOfWeek).get(ts)
