from .. import core
from .. import earth
from .. import libfield
from .. import libunit
from ..types import FieldKind as F, DurationUnitKind as U
from . import mock

def iso():
	return mock.registry().chronology('iso', 'UTC')

def test_get(test):
	c = iso()
	ts = c.instant(2002, 6, 9, 10, 30, 15, 250)
	test/c.select(ts, F.year, F.monthOfYear, F.dayOfMonth) == (2002, 6, 9)
	test/c.select(ts, F.hourOfDay, F.minuteOfHour, F.secondOfMinute, F.millisOfSecond) == (10, 30, 15, 250)
	test/c.select(ts, F.dayOfWeek) == 7
	test/c.select(ts, F.dayOfYear) == 160
	test/c.select(ts, F.weekyear, F.weekOfWeekyear) == (2002, 23)
	test/c.select(ts, F.era, F.yearOfEra) == (1, 2002)
	test/c.select(ts, F.halfdayOfDay, F.hourOfHalfday) == (0, 10)
	test/c.select(ts, F.minuteOfDay) == 630
	test/c.select(ts, F.secondOfDay) == 37815
	test/c.select(ts, F.millisOfDay) == 37815250

def test_clock_hours(test):
	c = iso()
	midnight = c.instant(2002, 6, 9)
	test/c.select(midnight, F.clockhourOfDay) == 24
	test/c.select(midnight, F.clockhourOfHalfday) == 12
	test/c.select(c.instant(2002, 6, 9, 13), F.clockhourOfHalfday) == 1
	test/c.field(F.clockhourOfDay).set(midnight, 24) == midnight
	test/core.IllegalFieldValue ^ (lambda: c.field(F.clockhourOfDay).set(midnight, 0))

def test_set_get_round_trip(test):
	c = iso()
	ts = c.instant(2002, 6, 9, 10, 30)
	samples = [
		(F.year, 1999), (F.monthOfYear, 2), (F.dayOfMonth, 30),
		(F.hourOfDay, 23), (F.minuteOfHour, 0), (F.dayOfWeek, 1),
		(F.weekOfWeekyear, 52), (F.dayOfYear, 365), (F.era, 0),
		(F.centuryOfEra, 19), (F.yearOfCentury, 99), (F.weekyear, 2004),
	]
	for kind, value in samples:
		test/c.field(kind).get(c.field(kind).set(ts, value)) == value

def test_set_clamps_day_of_month(test):
	c = iso()
	ts = c.instant(2002, 1, 31)
	test/c.field(F.monthOfYear).set(ts, 2) == c.instant(2002, 2, 28)
	test/c.field(F.year).set(c.instant(2000, 2, 29), 2001) == c.instant(2001, 2, 28)

def test_set_rejects(test):
	c = iso()
	ts = c.instant(2002, 6, 9)
	test/core.IllegalFieldValue ^ (lambda: c.field(F.monthOfYear).set(ts, 13))
	test/core.IllegalFieldValue ^ (lambda: c.field(F.dayOfMonth).set(ts, 31))
	test/core.IllegalFieldValue ^ (lambda: c.field(F.hourOfDay).set(ts, 24))
	test/core.IllegalFieldValue ^ (lambda: c.field(F.era).set(ts, 2))

def test_add_and_wrap(test):
	c = iso()
	ts = c.instant(2002, 6, 9, 20)
	hour = c.field(F.hourOfDay)
	test/hour.add(ts, 18) == c.instant(2002, 6, 10, 14)
	test/hour.add_wrap_field(ts, 18) == c.instant(2002, 6, 9, 14)
	test/hour.add_wrap_field(ts, -21) == c.instant(2002, 6, 9, 23)

	month = c.field(F.monthOfYear)
	test/month.add(ts, 8) == c.instant(2003, 2, 9, 20)
	test/month.add_wrap_field(ts, 8) == c.instant(2002, 2, 9, 20)
	test/month.add_wrap_field(ts, -7) == c.instant(2002, 11, 9, 20)
	test/month.add(c.instant(2002, 1, 31), 1) == c.instant(2002, 2, 28)

	dom = c.field(F.dayOfMonth)
	test/dom.add_wrap_field(c.instant(2002, 2, 28), 1) == c.instant(2002, 2, 1)

def test_add_inverse(test):
	c = iso()
	ts = c.instant(2002, 6, 9, 10, 30)
	for kind in (U.millis, U.seconds, U.minutes, U.hours, U.halfdays, U.days, U.weeks):
		unit = c.unit(kind)
		for n in (1, 7, -40, 1000):
			test/unit.add(unit.add(ts, n), -n) == ts

def test_difference(test):
	c = iso()
	months = c.field(F.monthOfYear)
	jan31 = c.instant(2002, 1, 31)
	feb28 = c.instant(2002, 2, 28)
	test/months.difference(jan31, feb28) == 1
	test/months.difference(feb28, jan31) == -1
	test/months.difference(jan31, c.instant(2003, 1, 30)) == 11
	test/months.difference(jan31, c.instant(2003, 1, 31)) == 12

	days = c.field(F.dayOfMonth)
	test/days.difference(0, -1) == 0
	test/days.difference(0, -earth.millis_in_day) == -1

	weekyears = c.field(F.weekyear)
	test/weekyears.difference(c.instant(2002, 12, 30), c.instant(2004, 1, 1)) == 1

def test_rounding(test):
	c = iso()
	ts = c.instant(2002, 6, 9, 10, 30)
	hour = c.field(F.hourOfDay)
	test/hour.round_floor(ts) == c.instant(2002, 6, 9, 10)
	test/hour.round_ceiling(ts) == c.instant(2002, 6, 9, 11)
	test/hour.round_half_floor(ts) == c.instant(2002, 6, 9, 10)
	test/hour.round_half_ceiling(ts) == c.instant(2002, 6, 9, 11)
	test/hour.round_half_even(ts) == c.instant(2002, 6, 9, 10)
	test/hour.round_half_even(c.instant(2002, 6, 9, 11, 30)) == c.instant(2002, 6, 9, 12)
	test/hour.remainder(ts) == 30 * earth.millis_in_minute

	month = c.field(F.monthOfYear)
	test/month.round_floor(ts) == c.instant(2002, 6)
	test/month.round_ceiling(ts) == c.instant(2002, 7)
	test/month.round_half_floor(ts) == c.instant(2002, 6)

	year = c.field(F.year)
	test/year.round_floor(ts) == c.instant(2002)
	test/year.round_ceiling(c.instant(2002)) == c.instant(2002)

	week = c.field(F.weekOfWeekyear)
	test/week.round_floor(ts) == c.instant(2002, 6, 3)
	test/week.round_ceiling(ts) == c.instant(2002, 6, 10)

	dom = c.field(F.dayOfMonth)
	test/dom.round_half_even(c.instant(2002, 6, 9, 12)) == c.instant(2002, 6, 10)
	test/dom.round_half_even(c.instant(2002, 6, 10, 12)) == c.instant(2002, 6, 10)

def test_round_floor_idempotent(test):
	c = iso()
	for ts in (c.instant(2002, 6, 9, 10, 30, 15, 250), c.instant(-152, 3, 1, 12)):
		for kind in F:
			f = c.field(kind)
			r = f.round_floor(ts)
			test/r <= ts
			test/f.round_floor(r) == r
			test/f.remainder(ts) >= 0

def test_century_before_common_era(test):
	r = mock.registry()

	# ISO centuries are zero-based; -152 is in century 1 with -199.
	c = r.chronology('iso', 'UTC')
	ts = c.instant(-152, 3, 1)
	century = c.field(F.centuryOfEra)
	test/century.get(ts) == 1
	test/century.round_floor(ts) == c.instant(-199)
	test/century.remainder(ts) == ts - c.instant(-199)
	test/century.round_ceiling(ts) == c.instant(-99)
	# Years -99 through 99 are all in century 0.
	test/century.round_floor(c.instant(-50, 6, 1)) == c.instant(-99)

	# 152 BCE is in the second century BCE: 200 BCE through 101 BCE.
	gj = r.chronology('gj', 'UTC')
	ts = gj.instant(-152, 3, 1)
	century = gj.field(F.centuryOfEra)
	test/gj.select(ts, F.era, F.yearOfEra, F.centuryOfEra, F.yearOfCentury) == (0, 152, 2, 52)
	test/century.round_floor(ts) == gj.instant(-200)
	test/century.round_ceiling(ts) == gj.instant(-100)
	test/century.remainder(ts) >= 0
	test/century.round_floor(gj.instant(-200)) == gj.instant(-200)

def test_era_rounding(test):
	c = iso()
	era = c.field(F.era)
	ts = c.instant(2002)
	test/era.round_floor(ts) == c.instant(1)
	test/era.round_ceiling(ts) == core.maximum
	test/era.round_floor(c.instant(-5)) == core.minimum

def test_leap(test):
	c = iso()
	test/c.field(F.year).is_leap(c.instant(2000)) == True
	test/c.field(F.year).is_leap(c.instant(1900)) == False
	test/c.field(F.year).leap_amount(c.instant(2004)) == 1
	test/c.field(F.year).leap_unit() % c.unit(U.days)
	test/c.field(F.dayOfMonth).is_leap(c.instant(2000, 2, 10)) == True
	test/c.field(F.dayOfMonth).is_leap(c.instant(2001, 2, 10)) == False
	test/c.field(F.dayOfMonth).is_leap(c.instant(2000, 3, 10)) == False
	test/c.field(F.monthOfYear).is_leap(c.instant(2000, 2, 1)) == True
	test/c.field(F.hourOfDay).is_leap(0) == False

def test_bounds(test):
	c = iso()
	test/c.field(F.dayOfMonth).maximum(c.instant(2000, 2)) == 29
	test/c.field(F.dayOfMonth).maximum(c.instant(2001, 2)) == 28
	test/c.field(F.dayOfMonth).maximum() == 31
	test/c.field(F.dayOfYear).maximum(c.instant(2000)) == 366
	test/c.field(F.weekOfWeekyear).maximum(c.instant(2004, 6)) == 53
	test/c.field(F.hourOfDay).minimum() == 0
	test/c.field(F.clockhourOfDay).maximum() == 24

def test_iso_centuries(test):
	c = iso()
	test/c.select(c.instant(2000), F.centuryOfEra, F.yearOfCentury) == (20, 0)
	test/c.select(c.instant(2002), F.centuryOfEra, F.yearOfCentury) == (20, 2)
	test/c.select(c.instant(1999), F.centuryOfEra, F.yearOfCentury) == (19, 99)
	test/c.select(c.instant(2002), F.weekyearOfCentury) == 2

def test_offset_field(test):
	c = iso()
	f = libfield.Offset(c.field(F.hourOfDay), 1)
	ts = c.instant(2002, 6, 9, 10)
	test/f.get(ts) == 11
	test/f.set(ts, 24) == c.instant(2002, 6, 9, 23)
	test/(f.minimum(), f.maximum()) == (1, 24)
	test/core.IllegalArgument ^ (lambda: libfield.Offset(c.field(F.hourOfDay), 0))

def test_unsupported_field(test):
	f = libfield.Unsupported(F.era, libunit.Unsupported(U.eras))
	test/f.is_supported() == False
	test/core.UnsupportedOperation ^ (lambda: f.get(0))
	test/core.UnsupportedOperation ^ (lambda: f.set(0, 1))
	test/core.UnsupportedOperation ^ (lambda: f.round_floor(0))
	test/f.duration_unit().is_supported() == False

def test_field_kinds(test):
	c = iso()
	test/F.monthOfYear.get(c) % c.field(F.monthOfYear)
	test/F.monthOfYear.unit == U.months
	test/F.monthOfYear.range == U.years
	test/F.year.range == None
	test/F.named('dayOfMonth') == F.dayOfMonth
	test/F.era.is_supported(c) == True
	test/c.field(F.dayOfMonth).range_unit() % c.unit(U.months)
	test/c.field(F.dayOfMonth).duration_unit() % c.unit(U.days)
