"""
# Gregorian calendar functions and data.

# Conversions are closed-form; the calendar is proleptic, extending
# the Gregorian leap rule before its introduction in 1582.
"""
from . import calendar as callib
from . import constants

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of months in a year.
months_in_year = 12

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Number of days in the four hundred year cycle.
days_in_cycle = 146097

#: Days from 0000-03-01 to 1970-01-01.
epoch_shift = 719468

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_from_date(year, month, day):
	"""
	# Convert a Gregorian date to the number of days since 1970-01-01.

	# Years start in March for the computation so that the leap day
	# is the last day of the shifted year.
	"""
	if month <= 2:
		year -= 1
	cycle = year // 400
	yoc = year - (cycle * 400)
	moy = (month + 9) % 12
	doy = ((153 * moy) + 2) // 5 + day - 1
	doc = (yoc * 365) + (yoc // 4) - (yoc // 100) + doy
	return (cycle * days_in_cycle) + doc - epoch_shift

def date_from_days(days):
	"""
	# Convert the days since 1970-01-01 into a Gregorian date in the common form:
	# `(year, month, day)`.
	"""
	days += epoch_shift
	cycle = days // days_in_cycle
	doc = days - (cycle * days_in_cycle)
	yoc = (doc - (doc // 1460) + (doc // 36524) - (doc // 146096)) // 365
	doy = doc - ((365 * yoc) + (yoc // 4) - (yoc // 100))
	moy = ((5 * doy) + 2) // 153
	day = doy - (((153 * moy) + 2) // 5) + 1
	month = moy + 3 if moy < 10 else moy - 9
	year = yoc + (cycle * 400)
	if month <= 2:
		year += 1
	return (year, month, day)

class Calendar(callib.Calendar):
	"""
	# The proleptic Gregorian calendar.
	"""
	name = 'gregorian'
	minimum_year = -292275054
	maximum_year = 292278993
	average_year = constants.average_gregorian_year
	average_month = constants.average_gregorian_month

	def is_leap_year(self, year):
		return year_is_leap(year)

	def days_in_month(self, year, month):
		if month == 2 and year_is_leap(year):
			return 29
		return calendar_year[month - 1]

	def maximum_days_in_month_of(self, month):
		return calendar_leap[month - 1]

	def days_from_date(self, year, month, day):
		return days_from_date(year, month, day)

	def date_from_days(self, days):
		return date_from_days(days)
