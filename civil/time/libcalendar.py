"""
# Calendar dependent fields.

# The fields hold a reference to a &.calendar.Calendar and perform their
# arithmetic on its epoch days. They do not refer to the chronology that
# owns them.
"""
from . import core
from . import constants
from . import earth
from . import week
from . import libfield
from . import libunit
from .types import FieldKind, DurationUnitKind

class Year(libfield.Imprecise):
	"""
	# The astronomical year. Changing the year keeps the month and the day
	# of month, reducing the day when the month is shorter.
	"""
	__slots__ = ('calendar', 'days')

	def __init__(self, calendar, days):
		super().__init__(FieldKind.year, calendar.average_year)
		self.calendar = calendar
		self.days = days

	def range_unit(self):
		return None

	def leap_unit(self):
		return self.days

	def get(self, instant):
		c = self.calendar
		return c.year(c.split(instant)[0])

	def set(self, instant, value):
		c = self.calendar
		core.verify(self.kind, value, c.minimum_year, c.maximum_year)
		days, millis = c.split(instant)
		return c.instant(c.set_year(days, value), millis)

	def add(self, instant, value):
		if value == 0:
			return instant
		return self.set(instant, core.add(self.get(instant), value))

	def add_wrap_field(self, instant, value):
		if value == 0:
			return instant
		c = self.calendar
		return self.set(instant, core.wrap(self.get(instant) + value, c.minimum_year, c.maximum_year))

	def estimate(self, start, stop):
		return self.get(stop) - self.get(start)

	def is_leap(self, instant):
		return self.calendar.is_leap_year(self.get(instant))

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

	def minimum(self, instant=None):
		return self.calendar.minimum_year

	def maximum(self, instant=None):
		return self.calendar.maximum_year

	def round_floor(self, instant):
		c = self.calendar
		return c.instant(c.year_start(self.get(instant)), 0)

	def round_ceiling(self, instant):
		c = self.calendar
		year = self.get(instant)
		start = c.instant(c.year_start(year), 0)
		if start != instant:
			start = c.instant(c.year_start(year + 1), 0)
		return start

class MonthOfYear(libfield.Imprecise):
	"""
	# The month of the year. Adding carries into the year; the day of month
	# is reduced when the resulting month is shorter.
	"""
	__slots__ = ('calendar', 'years', 'days')

	def __init__(self, calendar, years, days):
		super().__init__(FieldKind.monthOfYear, calendar.average_month)
		self.calendar = calendar
		self.years = years
		self.days = days

	def range_unit(self):
		return self.years

	def leap_unit(self):
		return self.days

	def get(self, instant):
		c = self.calendar
		return c.date_from_days(c.split(instant)[0])[1]

	def set(self, instant, value):
		c = self.calendar
		core.verify(self.kind, value, 1, c.months_in_year)
		days, millis = c.split(instant)
		return c.instant(c.set_month(days, value), millis)

	def add(self, instant, value):
		if value == 0:
			return instant
		c = self.calendar
		days, millis = c.split(instant)
		return c.instant(c.add_months(days, value), millis)

	def add_wrap_field(self, instant, value):
		return self.set(instant, core.wrap(self.get(instant) + value, 1, self.calendar.months_in_year))

	def estimate(self, start, stop):
		c = self.calendar
		y1, m1, d1 = c.date_from_days(c.split(start)[0])
		y2, m2, d2 = c.date_from_days(c.split(stop)[0])
		return c.month_index(y2, m2) - c.month_index(y1, m1)

	def is_leap(self, instant):
		c = self.calendar
		y, m, d = c.date_from_days(c.split(instant)[0])
		return m == c.leap_month and c.is_leap_year(y)

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return self.calendar.months_in_year

	def round_floor(self, instant):
		c = self.calendar
		days = c.split(instant)[0]
		y, m, d = c.date_from_days(days)
		return c.instant(days - (d - 1), 0)

class Weekyear(libfield.Imprecise):
	"""
	# The year of the ISO-8601 week based calendar. Changing the weekyear keeps
	# the week of weekyear, the day of week, and the time of day.
	"""
	__slots__ = ('calendar', 'weeks')

	def __init__(self, calendar, weeks):
		super().__init__(FieldKind.weekyear, calendar.average_year)
		self.calendar = calendar
		self.weeks = weeks

	def range_unit(self):
		return None

	def leap_unit(self):
		return self.weeks

	def get(self, instant):
		c = self.calendar
		return c.weekyear(c.split(instant)[0])

	def set(self, instant, value):
		c = self.calendar
		core.verify(self.kind, value, c.minimum_year, c.maximum_year)
		days, millis = c.split(instant)
		if c.weekyear(days) == value:
			return instant
		w = min(c.week_of_weekyear(days), c.weeks_in_year(value))
		d = c.first_week_start(value) + ((w - 1) * week.days_in_week) + (week.day_of_week(days) - 1)
		return c.instant(d, millis)

	def add(self, instant, value):
		if value == 0:
			return instant
		return self.set(instant, core.add(self.get(instant), value))

	def add_wrap_field(self, instant, value):
		c = self.calendar
		return self.set(instant, core.wrap(self.get(instant) + value, c.minimum_year, c.maximum_year))

	def estimate(self, start, stop):
		return self.get(stop) - self.get(start)

	def is_leap(self, instant):
		return self.calendar.weeks_in_year(self.get(instant)) > 52

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

	def minimum(self, instant=None):
		return self.calendar.minimum_year

	def maximum(self, instant=None):
		return self.calendar.maximum_year

	def round_floor(self, instant):
		c = self.calendar
		return c.instant(c.first_week_start(self.get(instant)), 0)

class DayOfMonth(libfield.PreciseDuration):
	__slots__ = ('calendar', 'months')

	def __init__(self, calendar, days, months):
		super().__init__(FieldKind.dayOfMonth, days)
		self.calendar = calendar
		self.months = months

	def range_unit(self):
		return self.months

	def leap_unit(self):
		return self.unit

	def get(self, instant):
		c = self.calendar
		return c.date_from_days(c.split(instant)[0])[2]

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		c = self.calendar
		if instant is None:
			return c.maximum_days_in_month
		y, m, d = c.date_from_days(c.split(instant)[0])
		return c.days_in_month(y, m)

	def is_leap(self, instant):
		# The day belongs to the month that gains a day in leap years.
		c = self.calendar
		y, m, d = c.date_from_days(c.split(instant)[0])
		return m == c.leap_month and c.is_leap_year(y)

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

class DayOfYear(libfield.PreciseDuration):
	__slots__ = ('calendar', 'years')

	def __init__(self, calendar, days, years):
		super().__init__(FieldKind.dayOfYear, days)
		self.calendar = calendar
		self.years = years

	def range_unit(self):
		return self.years

	def leap_unit(self):
		return self.unit

	def get(self, instant):
		c = self.calendar
		return c.day_of_year(c.split(instant)[0])

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		c = self.calendar
		if instant is None:
			return c.maximum_days_in_year
		return c.days_in_year(c.year(c.split(instant)[0]))

	def is_leap(self, instant):
		c = self.calendar
		return c.is_leap_year(c.year(c.split(instant)[0]))

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

class DayOfWeek(libfield.PreciseDuration):
	"""
	# ISO day of week; Monday is `1`.
	"""
	__slots__ = ('calendar', 'weeks')

	def __init__(self, calendar, days, weeks):
		super().__init__(FieldKind.dayOfWeek, days)
		self.calendar = calendar
		self.weeks = weeks

	def range_unit(self):
		return self.weeks

	def get(self, instant):
		return week.day_of_week(self.calendar.split(instant)[0])

	def minimum(self, instant=None):
		return week.monday

	def maximum(self, instant=None):
		return week.sunday

class WeekOfWeekyear(libfield.PreciseDuration):
	__slots__ = ('calendar', 'weekyears')

	#: Weeks of the epoch begin on Thursday; rounding aligns them to Monday.
	alignment = 3 * earth.millis_in_day

	def __init__(self, calendar, weeks, weekyears):
		super().__init__(FieldKind.weekOfWeekyear, weeks)
		self.calendar = calendar
		self.weekyears = weekyears

	def range_unit(self):
		return self.weekyears

	def get(self, instant):
		return self.calendar.week_of_weekyear(self.calendar.split(instant)[0])

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		if instant is None:
			return 53
		c = self.calendar
		return c.weeks_in_year(c.weekyear(c.split(instant)[0]))

	def round_floor(self, instant):
		return super().round_floor(instant + self.alignment) - self.alignment

	def round_ceiling(self, instant):
		return super().round_ceiling(instant + self.alignment) - self.alignment

	def remainder(self, instant):
		return super().remainder(instant + self.alignment)

class Era(libfield.Field):
	"""
	# Before and after the common era; `0` for years less than one.
	"""
	__slots__ = ('calendar', 'unit')

	def __init__(self, calendar):
		super().__init__(FieldKind.era)
		self.calendar = calendar
		self.unit = libunit.Unsupported(DurationUnitKind.eras)

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		return None

	def get(self, instant):
		c = self.calendar
		if c.year(c.split(instant)[0]) <= 0:
			return constants.bce
		return constants.ce

	def set(self, instant, value):
		core.verify(self.kind, value, constants.bce, constants.ce)
		if self.get(instant) == value:
			return instant
		c = self.calendar
		days, millis = c.split(instant)
		return c.instant(c.set_year(days, 1 - c.year(days)), millis)

	def minimum(self, instant=None):
		return constants.bce

	def maximum(self, instant=None):
		return constants.ce

	def round_floor(self, instant):
		if self.get(instant) == constants.ce:
			return self.calendar.instant(self.calendar.year_start(1), 0)
		return core.minimum

	def round_ceiling(self, instant):
		if self.get(instant) == constants.bce:
			return self.calendar.instant(self.calendar.year_start(1), 0)
		return core.maximum

	def round_half_floor(self, instant):
		return self.round_floor(instant)

	def round_half_ceiling(self, instant):
		return self.round_floor(instant)

	def round_half_even(self, instant):
		return self.round_floor(instant)

class SingleEra(libfield.Field):
	"""
	# The only era of a calendar that counts years from a single epoch.
	"""
	__slots__ = ('unit',)

	def __init__(self):
		super().__init__(FieldKind.era)
		self.unit = libunit.Unsupported(DurationUnitKind.eras)

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		return None

	def get(self, instant):
		return constants.ce

	def set(self, instant, value):
		core.verify(self.kind, value, constants.ce, constants.ce)
		return instant

	def minimum(self, instant=None):
		return constants.ce

	def maximum(self, instant=None):
		return constants.ce

	def round_floor(self, instant):
		return core.minimum

	def round_ceiling(self, instant):
		return core.maximum

	def round_half_floor(self, instant):
		return core.minimum

	def round_half_ceiling(self, instant):
		return core.minimum

	def round_half_even(self, instant):
		return core.minimum

class YearOfEra(libfield.Delegated):
	"""
	# The year counted within its era: astronomical year `0` is `1` BCE.
	"""
	__slots__ = ()

	def __init__(self, year, eras):
		super().__init__(year, kind=FieldKind.yearOfEra, range=eras)

	def get(self, instant):
		y = self.field.get(instant)
		if y <= 0:
			return 1 - y
		return y

	def set(self, instant, value):
		core.verify(self.kind, value, 1, self.maximum())
		if self.field.get(instant) <= 0:
			value = 1 - value
		return self.field.set(instant, value)

	def add_wrap_field(self, instant, value):
		return self.field.add_wrap_field(instant, value)

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return self.field.maximum(instant)

class ZeroBasedYearOfEra(libfield.Delegated):
	"""
	# Magnitude of the astronomical year; used to derive ISO-8601 centuries
	# where year 2000 is in century 20.
	"""
	__slots__ = ()

	def __init__(self, year):
		super().__init__(year, kind=FieldKind.yearOfEra)

	def get(self, instant):
		y = self.field.get(instant)
		return -y if y < 0 else y

	def set(self, instant, value):
		core.verify(self.kind, value, 0, self.maximum())
		if self.field.get(instant) < 0:
			value = -value
		return self.field.set(instant, value)

	def add_wrap_field(self, instant, value):
		return self.field.add_wrap_field(instant, value)

	def minimum(self, instant=None):
		return 0

	def maximum(self, instant=None):
		return self.field.maximum(instant)
