"""
# Fixed month calendars: Coptic and Ethiopic.

# Years have twelve months of thirty days followed by a thirteenth month
# of five days, six in leap years. A year is leap when `year % 4 == 3`.
# The systems differ only in the epoch day of their first year.

# [ Elements ]
# /coptic_epoch/
	# Epoch day of 0001-01-01 Coptic; 0284-08-29 Julian.
# /ethiopic_epoch/
	# Epoch day of 0001-01-01 Ethiopic; 0008-08-29 Julian.
"""
from . import calendar as callib
from . import constants
from . import earth
from . import julian

days_in_month = 30
months_in_year = 13

coptic_epoch = julian.days_from_date(284, 8, 29)
ethiopic_epoch = julian.days_from_date(8, 8, 29)

def year_is_leap(y):
	return y % 4 == 3

def days_before_year(year):
	# Leap years before &year: those congruent to three.
	return (365 * (year - 1)) + (year // 4)

class Calendar(callib.Calendar):
	"""
	# Calendar of thirteen months with a fixed epoch.
	"""
	months_in_year = months_in_year
	leap_month = 13
	epoch = None
	average_year = constants.average_julian_year
	average_month = days_in_month * earth.millis_in_day
	maximum_days_in_month = days_in_month

	def is_leap_year(self, year):
		return year % 4 == 3

	def days_in_month(self, year, month):
		if month != 13:
			return days_in_month
		if year % 4 == 3:
			return 6
		return 5

	def maximum_days_in_month_of(self, month):
		if month != 13:
			return days_in_month
		return 6

	def days_from_date(self, year, month, day):
		return self.epoch + days_before_year(year) + (days_in_month * (month - 1)) + day - 1

	def date_from_days(self, days):
		r = days - self.epoch
		year = ((4 * r) + 1463) // 1461
		doy = r - days_before_year(year)
		month = (doy // days_in_month) + 1
		day = doy - (days_in_month * (month - 1)) + 1
		return (year, month, day)

class Coptic(Calendar):
	name = 'coptic'
	epoch = coptic_epoch
	minimum_year = -292269337
	maximum_year = 292272708

class Ethiopic(Calendar):
	name = 'ethiopic'
	epoch = ethiopic_epoch
	minimum_year = -292269338
	maximum_year = 292272984
