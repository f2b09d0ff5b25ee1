from .. import core
from .. import earth
from .. import limits
from ..types import FieldKind as F, DurationUnitKind as U
from . import mock

hour = earth.millis_in_hour

#: 2002-01-01T00:00:00Z
y2002 = 1009843200000
#: 2003-01-01T00:00:00Z
y2003 = 1041379200000

def test_limits_check(test):
	l = limits.Limits(y2002, y2003)
	test/l.check(y2002) == y2002
	test/l.check(y2003 - 1) == y2003 - 1

	with test/core.LimitExceeded as exc:
		l.check(y2003, 'resulting')
	test/exc().below == False
	test/exc().limit == y2003
	test/str(exc()).startswith("the resulting instant") == True

	test/core.IllegalArgument ^ (lambda: limits.Limits(y2003, y2002))
	test/core.IllegalArgument ^ (lambda: limits.Limits(y2002, y2002))
	test/limits.Limits(upper=0).check(core.minimum) == core.minimum

def test_limited_chronology(test):
	r = mock.registry()
	c = r.chronology('iso', 'UTC', lower=y2002, upper=y2003)
	test/c.parameters == (('lower', y2002), ('upper', y2003))
	test/c.instant(2002, 6, 9) == mock.june9
	test/c.select(mock.june9, F.year, F.monthOfYear) == (2002, 6)
	test/c != r.chronology('iso', 'UTC')

	with test/core.LimitExceeded as exc:
		c.instant(2003, 1, 1)
	test/exc().below == False
	test/exc().description == 'resulting'

	with test/core.LimitExceeded as exc:
		c.field(F.year).get(y2002 - 1)
	test/exc().below == True
	test/exc().description % None

	test/core.IllegalArgument ^ (lambda: r.chronology('iso', 'UTC', lower=y2003, upper=y2002))

def test_limited_operations(test):
	c = mock.registry().chronology('iso', 'UTC', lower=y2002, upper=y2003)
	months = c.unit(U.months)
	test/c.field(F.monthOfYear).duration_unit() % months

	test/months.add(mock.june9, 6) == c.instant(2002, 12, 9)
	test/core.LimitExceeded ^ (lambda: months.add(mock.june9, 7))
	test/months.difference(y2002, mock.june9) == 5
	test/core.LimitExceeded ^ (lambda: months.difference(y2002, y2003))

	year = c.field(F.year)
	test/year.round_floor(mock.june9) == y2002
	test/core.LimitExceeded ^ (lambda: year.round_ceiling(mock.june9))
	test/year.remainder(mock.june9) == mock.june9 - y2002

	month = c.field(F.monthOfYear)
	test/month.set(mock.june9, 1) == c.instant(2002, 1, 9)
	test/core.LimitExceeded ^ (lambda: month.add(mock.june9, -6))
	test/core.LimitExceeded ^ (lambda: month.maximum(y2003))
	test/month.maximum() == 12

	# The wrapped value stays within the year.
	test/month.add_wrap_field(c.instant(2002, 12, 1), 1) == y2002

def test_limited_zone(test):
	r = mock.registry()
	c = r.chronology('iso', 'UTC', lower=y2002, upper=y2003)
	london = r.chronology('iso', 'Europe/London', lower=y2002, upper=y2003)
	test/london.base % c

	# The limits are compared with local date-times.
	test/london.instant(2002, 6, 9) == mock.june9 - hour
	test/core.LimitExceeded ^ (lambda: london.instant(2001, 12, 31, 23))
	test/london.with_zone('UTC', registry=r) % c

def test_lenient(test):
	r = mock.registry()
	c = r.chronology('iso', 'UTC', resolution='lenient')
	test/c.parameters == (('resolution', 'lenient'),)

	jan = c.instant(2002, 1, 1)
	dom = c.field(F.dayOfMonth)
	test/c.date(dom.set(jan, 32)) == (2002, 2, 1)
	test/c.date(dom.set(jan, 0)) == (2001, 12, 31)
	test/c.date(c.field(F.monthOfYear).set(jan, 13)) == (2003, 1, 1)
	test/c.select(c.field(F.hourOfDay).set(jan, 25), F.dayOfMonth, F.hourOfDay) == (2, 1)

	london = r.chronology('iso', 'Europe/London', resolution='lenient')
	test/london.base % c
	march = london.instant(2002, 3, 1)
	test/london.date(london.field(F.dayOfMonth).set(march, 32)) == (2002, 4, 1)

	test/core.IllegalArgument ^ (lambda: r.chronology('iso', 'UTC', resolution='loose'))

def test_strict(test):
	c = mock.registry().chronology('iso', 'UTC', resolution='strict')
	feb = c.instant(2002, 2, 1)
	dom = c.field(F.dayOfMonth)
	test/c.date(dom.set(feb, 28)) == (2002, 2, 28)

	with test/core.IllegalFieldValue as exc:
		dom.set(feb, 30)
	test/exc().upper == 28
	test/core.IllegalFieldValue ^ (lambda: c.field(F.monthOfYear).set(feb, 13))
