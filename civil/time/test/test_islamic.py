from .. import core
from .. import earth
from ..types import FieldKind as F, DurationUnitKind as U
from . import mock

day = earth.millis_in_day

#: 0001-01-01 AH; 0622-07-16 Julian.
epoch = -42521587200000

def islamic(**parameters):
	return mock.registry().chronology('islamic', 'UTC', **parameters)

def test_epoch(test):
	r = mock.registry()
	c = r.chronology('islamic', 'UTC')
	test/c.instant(1, 1, 1) == epoch
	test/r.chronology('julian', 'UTC').instant(622, 7, 16) == epoch
	test/c.parameters == (('leap_years', '16-based'), ('minimum_days', 4))

	# The Julian date was a Friday.
	test/c.field(F.dayOfWeek).get(epoch) == 5

def test_before_epoch(test):
	c = islamic()
	test/core.IllegalFieldValue ^ (lambda: c.instant(-1, 13, 5))
	test/core.IllegalFieldValue ^ (lambda: c.instant(0, 12, 1))

	with test/core.LimitExceeded as exc:
		c.field(F.year).get(epoch - 1)
	test/exc().below == True
	test/exc().limit == epoch

	with test/core.LimitExceeded as exc:
		c.add(c.instant(1, 1, 2), U.days, -2)
	test/exc().description == 'resulting'
	test/core.IllegalFieldValue ^ (lambda: c.add(c.instant(1, 6, 1), U.years, -1))
	test/c.field(F.era).get(epoch) == 1
	test/c.field(F.year).round_floor(epoch + day) == epoch

def test_units(test):
	c = islamic()
	test/c.unit(U.days).is_precise() == True
	test/c.unit(U.weeks).is_precise() == True
	test/c.unit(U.months).is_precise() == False
	test/c.unit(U.years).is_precise() == False
	test/c.unit(U.centuries).is_precise() == False
	test/c.unit(U.eras).is_supported() == False

	test/c.field(F.year).leap_unit() % c.unit(U.days)
	test/c.field(F.monthOfYear).duration_unit() % c.unit(U.months)
	test/c.field(F.dayOfMonth).range_unit() % c.unit(U.months)

def test_field_constructor(test):
	r = mock.registry()
	c = r.chronology('islamic', 'UTC')
	test/c.instant(1364, 12, 6) == r.chronology('iso', 'UTC').instant(1945, 11, 12)

def test_sample_date(test):
	r = mock.registry()
	c = r.chronology('islamic', 'UTC')
	ts = r.chronology('iso', 'UTC').instant(1945, 11, 12)

	test/c.select(ts, F.era, F.centuryOfEra, F.yearOfCentury, F.yearOfEra, F.year) == (1, 14, 64, 1364, 1364)
	year = c.field(F.year)
	test/year.is_leap(ts) == False
	test/year.leap_amount(ts) == 0
	test/year.add(ts, 1) == c.instant(1365, 12, 6)

	month = c.field(F.monthOfYear)
	test/month.get(ts) == 12
	test/month.is_leap(ts) == False
	test/month.minimum(ts) == 1
	test/month.maximum(ts) == 12
	test/month.add(ts, 1) == c.instant(1365, 1, 6)
	test/month.add_wrap_field(ts, 1) == c.instant(1364, 1, 6)

	dom = c.field(F.dayOfMonth)
	test/dom.get(ts) == 6
	test/dom.maximum(ts) == 29
	test/dom.maximum() == 30
	test/dom.add(ts, 1) == c.instant(1364, 12, 7)

	test/c.field(F.dayOfWeek).get(ts) == 1
	doy = c.field(F.dayOfYear)
	test/doy.get(ts) == (6 * 30) + (5 * 29) + 6
	test/doy.maximum(ts) == 354
	test/doy.maximum() == 355
	test/c.select(ts, F.hourOfDay, F.minuteOfHour, F.millisOfSecond) == (0, 0, 0)

def test_sample_leap_year(test):
	r = mock.registry()
	c = r.chronology('islamic', 'UTC')
	ts = r.chronology('iso', 'UTC').instant(2005, 11, 26)

	test/c.select(ts, F.era, F.centuryOfEra, F.yearOfCentury, F.year) == (1, 15, 26, 1426)
	test/c.select(ts, F.monthOfYear, F.dayOfMonth, F.dayOfWeek) == (10, 24, 6)
	test/c.field(F.dayOfYear).get(ts) == (5 * 30) + (4 * 29) + 24
	test/c.field(F.year).is_leap(ts) == True
	test/c.field(F.year).leap_amount(ts) == 1
	test/c.field(F.monthOfYear).is_leap(ts) == False
	test/c.field(F.dayOfMonth).maximum(ts) == 29
	test/c.field(F.dayOfYear).maximum(ts) == 355

	# The twelfth month of a leap year has thirty days.
	ts = c.instant(1426, 12, 24)
	test/c.field(F.monthOfYear).is_leap(ts) == True
	test/c.field(F.monthOfYear).leap_amount(ts) == 1
	test/c.field(F.dayOfMonth).maximum(ts) == 30
	test/c.field(F.dayOfWeek).get(ts) == 2
	test/c.field(F.dayOfYear).get(ts) == (6 * 30) + (5 * 29) + 24
	test/c.date(c.add(c.instant(1426, 12, 30), U.years, 1)) == (1427, 12, 29)

def test_sample_date_with_zone(test):
	r = mock.registry()
	c = r.chronology('islamic', 'UTC')
	ts = r.chronology('iso', 'Europe/Paris').instant(2005, 11, 26, 12)
	test/c.select(ts, F.year, F.monthOfYear, F.dayOfMonth, F.hourOfDay) == (1426, 10, 24, 11)

	london = r.chronology('islamic', 'Europe/London')
	test/london.base % c
	test/str(london) == 'islamic[Europe/London]'
	test/london.with_utc() % c
	test/london.select(r.chronology('iso', 'Europe/London').instant(2005, 6, 1, 0, 30), F.hourOfDay) == 0

def test_leap_year_patterns(test):
	sixteen = islamic()
	fifteen = islamic(leap_years='15-based')
	test/fifteen.parameters == (('leap_years', '15-based'), ('minimum_days', 4))
	test/fifteen != sixteen

	# Year 15 of the cycle is leap only in the 15-based pattern.
	test/fifteen.field(F.year).is_leap(fifteen.instant(1425, 1, 1)) == True
	test/sixteen.field(F.year).is_leap(sixteen.instant(1425, 1, 1)) == False
	test/(fifteen.instant(1426, 1, 1) - sixteen.instant(1426, 1, 1)) == day
	test/fifteen.instant(1427, 1, 1) == sixteen.instant(1427, 1, 1)

	test/core.IllegalArgument ^ (lambda: islamic(leap_years='solar'))
	test/core.IllegalArgument ^ (lambda: mock.registry().chronology('gregorian', 'UTC', leap_years='indian'))

def test_calendar_sequence(test):
	c = islamic()
	year = c.field(F.year)
	dom = c.field(F.dayOfMonth)
	doy = c.field(F.dayOfYear)

	y, m, d, n = 1, 1, 1, 1
	for i in range(2 * 10631):
		ts = epoch + (i * day)
		leap = ((11 * y) + 14) % 30 < 11
		test/c.select(ts, F.year, F.yearOfEra, F.monthOfYear, F.dayOfMonth) == (y, y, m, d)
		test/doy.get(ts) == n
		test/c.field(F.dayOfWeek).get(ts) == ((4 + i) % 7) + 1
		test/year.is_leap(ts) == leap
		test/doy.maximum(ts) == (355 if leap else 354)

		length = dom.maximum(ts)
		if m == 12:
			test/length == (30 if leap else 29)
		else:
			test/length == (30 if m % 2 == 1 else 29)

		d += 1
		n += 1
		if d > length:
			d = 1
			m += 1
			if m == 13:
				y, m, n = y + 1, 1, 1
