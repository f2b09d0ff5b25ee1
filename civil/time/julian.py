"""
# Julian calendar functions.

# The proleptic Julian calendar: every fourth year is a leap year.
# Years are astronomical here; the calendar's lack of a year zero is applied
# by the fields of the Julian chronology.
"""
from . import calendar as callib
from . import gregorian
from . import constants

#: Number of days in the four year cycle.
days_in_cycle = 1461

#: Days from 0000-03-01 (Julian) to 1970-01-01 (Gregorian).
epoch_shift = 719470

def year_is_leap(y):
	return y % 4 == 0

def days_from_date(year, month, day):
	"""
	# Convert a Julian date to the number of days since 1970-01-01 (Gregorian).
	"""
	if month <= 2:
		year -= 1
	cycle = year // 4
	yoc = year - (cycle * 4)
	moy = (month + 9) % 12
	doy = ((153 * moy) + 2) // 5 + day - 1
	return (cycle * days_in_cycle) + (yoc * 365) + doy - epoch_shift

def date_from_days(days):
	"""
	# Convert the days since 1970-01-01 into a Julian date, `(year, month, day)`.
	"""
	days += epoch_shift
	cycle = days // days_in_cycle
	doc = days - (cycle * days_in_cycle)
	yoc = (doc - (doc // 1460)) // 365
	doy = doc - (365 * yoc)
	moy = ((5 * doy) + 2) // 153
	day = doy - (((153 * moy) + 2) // 5) + 1
	month = moy + 3 if moy < 10 else moy - 9
	year = yoc + (cycle * 4)
	if month <= 2:
		year += 1
	return (year, month, day)

class Calendar(callib.Calendar):
	"""
	# The proleptic Julian calendar.
	"""
	name = 'julian'
	minimum_year = -292269054
	maximum_year = 292272992
	average_year = constants.average_julian_year
	average_month = constants.average_julian_month

	def is_leap_year(self, year):
		return year % 4 == 0

	def days_in_month(self, year, month):
		if month == 2 and year % 4 == 0:
			return 29
		return gregorian.calendar_year[month - 1]

	def maximum_days_in_month_of(self, month):
		return gregorian.calendar_leap[month - 1]

	def days_from_date(self, year, month, day):
		return days_from_date(year, month, day)

	def date_from_days(self, days):
		return date_from_days(days)
