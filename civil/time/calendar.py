"""
# Day arithmetic shared by calendar systems.

# &Calendar holds the operations that are derived from a system's
# conversion between epoch days and `(year, month, day)` triples: year and
# month boundaries, ISO-8601 weeks, and the year and month arithmetic used
# by the fields of a chronology. Subclasses provide the closed-form conversions
# and the leap rule; the fields never consult a chronology directly.

# Years are astronomical: the year before `1` is `0`. Calendars that have no
# year zero renumber them at the field level.
"""
from . import core
from . import earth
from . import week
from . import constants
from .types import FieldKind

class Calendar(object):
	"""
	# Base class for calendar systems whose days are counted from 1970-01-01.

	# [ Properties ]
	# /minimum_days/
		# Minimum number of days of a year that week one must contain.
	# /months_in_year/
		# Number of months in every year.
	# /leap_month/
		# The month that gains a day in a leap year.
	# /minimum_year/
		# Earliest year that keeps instants within the 64-bit range.
	# /maximum_year/
		# Latest year that keeps instants within the 64-bit range.
	"""

	name = None
	months_in_year = 12
	leap_month = 2
	minimum_year = None
	maximum_year = None
	average_year = constants.average_gregorian_year
	average_month = constants.average_gregorian_month
	maximum_days_in_month = 31
	maximum_days_in_year = 366

	def __init__(self, minimum_days=constants.first_week_minimum):
		if minimum_days < 1 or minimum_days > 7:
			raise core.IllegalArgument("invalid minimum days in first week: %r" %(minimum_days,))
		self.minimum_days = minimum_days

	def __repr__(self):
		return "<%s[%d]>" %(self.__class__.__name__, self.minimum_days)

	def __eq__(self, ob):
		return (
			self.__class__ is ob.__class__ and
			self.minimum_days == ob.minimum_days
		)

	def __hash__(self):
		return hash((self.__class__.__name__, self.minimum_days))

	def is_leap_year(self, year) -> bool:
		raise NotImplementedError("calendar systems must define the leap rule")

	def days_in_month(self, year, month) -> int:
		raise NotImplementedError("calendar systems must define month lengths")

	def maximum_days_in_month_of(self, month) -> int:
		"""
		# The greatest number of days that &month has in any year.
		"""
		raise NotImplementedError("calendar systems must define month lengths")

	def days_from_date(self, year, month, day) -> int:
		"""
		# Convert the date to days since 1970-01-01. Components are not validated.
		"""
		raise NotImplementedError("calendar systems must define day conversion")

	def date_from_days(self, days):
		"""
		# Convert days since 1970-01-01 to a `(year, month, day)` triple.
		"""
		raise NotImplementedError("calendar systems must define day conversion")

	def days_in_year(self, year, int=int) -> int:
		return 365 + int(self.is_leap_year(year))

	def year_start(self, year) -> int:
		return self.days_from_date(year, 1, 1)

	def year(self, days) -> int:
		return self.date_from_days(days)[0]

	def day_of_year(self, days) -> int:
		return days - self.year_start(self.year(days)) + 1

	def validate(self, year, month, day):
		"""
		# Raise &core.IllegalFieldValue if the date has a component outside
		# of its bounds.
		"""
		core.verify(FieldKind.year, year, self.minimum_year, self.maximum_year)
		core.verify(FieldKind.monthOfYear, month, 1, self.months_in_year)
		core.verify(FieldKind.dayOfMonth, day, 1, self.days_in_month(year, month))

	def days_from_valid_date(self, year, month, day) -> int:
		self.validate(year, month, day)
		return self.days_from_date(year, month, day)

	# Instants

	def instant(self, days, millis, multiply=core.multiply, add=core.add):
		"""
		# Construct the instant of the millisecond &millis of the epoch day &days.
		"""
		return add(multiply(days, earth.millis_in_day), millis)

	def split(self, instant, divmod=divmod):
		"""
		# Separate the instant into the epoch day and the milliseconds of the day.
		"""
		return divmod(instant, earth.millis_in_day)

	# Weeks

	def first_week_start(self, year) -> int:
		"""
		# Epoch day of the Monday beginning week one of the weekyear &year.
		"""
		return week.first_week_start(self.year_start(year), self.minimum_days)

	def weeks_in_year(self, year) -> int:
		return (self.first_week_start(year + 1) - self.first_week_start(year)) // week.days_in_week

	def week_of_weekyear(self, days) -> int:
		year = self.year(days)
		first = self.first_week_start(year)
		if days < first:
			return self.weeks_in_year(year - 1)
		following = self.first_week_start(year + 1)
		if days >= following:
			return 1
		return ((days - first) // week.days_in_week) + 1

	def weekyear(self, days) -> int:
		year = self.year(days)
		w = self.week_of_weekyear(days)
		if w == 1:
			return self.year(days + week.days_in_week)
		elif w > 51:
			return self.year(days - (2 * week.days_in_week))
		return year

	# Year and month arithmetic applied to epoch days.

	def set_year(self, days, year):
		"""
		# Change the year of &days keeping the month and day of month.
		# The day is reduced when the month is shorter in &year.
		"""
		y, m, d = self.date_from_days(days)
		dim = self.days_in_month(year, m)
		if d > dim:
			d = dim
		return self.days_from_date(year, m, d)

	def month_index(self, year, month):
		"""
		# The number of months between the start of year zero and the month.
		"""
		return (year * self.months_in_year) + (month - 1)

	def set_month(self, days, month):
		y, m, d = self.date_from_days(days)
		dim = self.days_in_month(y, month)
		if d > dim:
			d = dim
		return self.days_from_date(y, month, d)

	def add_months(self, days, months, divmod=divmod):
		y, m, d = self.date_from_days(days)
		year, moy = divmod(self.month_index(y, m) + months, self.months_in_year)
		core.verify(FieldKind.year, year, self.minimum_year, self.maximum_year)
		dim = self.days_in_month(year, moy + 1)
		if d > dim:
			d = dim
		return self.days_from_date(year, moy + 1, d)
