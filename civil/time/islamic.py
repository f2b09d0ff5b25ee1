"""
# The arithmetic Islamic calendar.

# Years have twelve months alternating between thirty and twenty-nine days,
# beginning with thirty; the twelfth month gains a day in leap years. Leap
# years are distributed over a cycle of thirty years by one of several
# traditional patterns.

# [ Elements ]
# /epoch/
	# Epoch day of 0001-01-01 AH; 0622-07-16 Julian.
# /leap_year_patterns/
	# Mapping of pattern names to the bit sets selecting the leap years of the
	# cycle. Bit `n` is set when the years congruent to `n` modulo thirty are leap.
# /default_leap_years/
	# The pattern used when none is given: `'16-based'`.
"""
import bisect

from . import core
from . import constants
from . import calendar as callib
from . import earth
from . import julian

epoch = julian.days_from_date(622, 7, 16)

cycle_years = 30
month_pair = 59
long_month = 30
short_month = 29

leap_year_patterns = {
	'15-based': 623158436,
	'16-based': 623191204,
	'indian': 690562340,
	'habash-al-hasib': 153692453,
}
default_leap_years = '16-based'

def year_is_leap(year, pattern=leap_year_patterns[default_leap_years]):
	return pattern & (1 << (year % cycle_years)) != 0

def cycle_offsets(pattern):
	"""
	# Days from the start of a cycle to the start of each of its years;
	# the final entry is the length of the cycle.
	"""
	offsets = [0]
	for year in range(1, cycle_years + 1):
		offsets.append(offsets[-1] + (355 if year_is_leap(year, pattern) else 354))
	return tuple(offsets)

def month_start(month):
	# Days from the start of the year to the first day of &month.
	pairs, odd = divmod(month - 1, 2)
	return (pairs * month_pair) + (long_month * odd)

class Calendar(callib.Calendar):
	"""
	# The arithmetic Islamic calendar with a selectable leap year pattern.

	# [ Properties ]
	# /leap_years/
		# The name of the leap year pattern; a key of &leap_year_patterns.
	"""
	name = 'islamic'
	leap_month = 12
	minimum_year = 1
	maximum_year = 292271022
	maximum_days_in_month = long_month
	maximum_days_in_year = 355

	def __init__(self, minimum_days=constants.first_week_minimum, leap_years=default_leap_years):
		super().__init__(minimum_days)
		try:
			self.pattern = leap_year_patterns[leap_years]
		except KeyError:
			raise core.IllegalArgument("unknown leap year pattern: %r" %(leap_years,))
		self.leap_years = leap_years
		self.offsets = cycle_offsets(self.pattern)
		self.cycle_days = self.offsets[-1]
		self.average_year = (self.cycle_days * earth.millis_in_day) // cycle_years
		self.average_month = self.average_year // 12

	def __repr__(self):
		return "<%s[%d, %s]>" %(self.__class__.__name__, self.minimum_days, self.leap_years)

	def __eq__(self, ob):
		return super().__eq__(ob) and self.leap_years == ob.leap_years

	def __hash__(self):
		return hash((self.__class__.__name__, self.minimum_days, self.leap_years))

	def is_leap_year(self, year):
		return year_is_leap(year, self.pattern)

	def days_in_year(self, year):
		return 355 if self.is_leap_year(year) else 354

	def days_in_month(self, year, month):
		if month == 12 and self.is_leap_year(year):
			return long_month
		return long_month if month % 2 == 1 else short_month

	def maximum_days_in_month_of(self, month):
		if month == 12:
			return long_month
		return long_month if month % 2 == 1 else short_month

	def year_start(self, year):
		cycles, r = divmod(year - 1, cycle_years)
		return epoch + (cycles * self.cycle_days) + self.offsets[r]

	def year(self, days):
		cycles, r = divmod(days - epoch, self.cycle_days)
		return (cycles * cycle_years) + bisect.bisect_right(self.offsets, r)

	def days_from_date(self, year, month, day):
		return self.year_start(year) + month_start(month) + day - 1

	def date_from_days(self, days):
		year = self.year(days)
		doy = days - self.year_start(year)
		if doy == 354:
			# The leap day closing the twelfth month.
			return (year, 12, 30)
		month = ((doy * 2) // month_pair) + 1
		return (year, month, ((doy % month_pair) % long_month) + 1)
