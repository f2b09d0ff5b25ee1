"""
# Week based measures of time: days of seven.

# Days of week follow ISO-8601: Monday is `1` and Sunday is `7`.
# Day counts are relative to 1970-01-01, a Thursday.
"""
#: Total number of a days in a week.
days_in_week = 7

monday = 1
tuesday = 2
wednesday = 3
thursday = 4
friday = 5
saturday = 6
sunday = 7

#: The day of week of 1970-01-01.
epoch_weekday = thursday

def day_of_week(days):
	"""
	# Derive the ISO day of week from the epoch &days.
	"""
	return ((days + epoch_weekday - 1) % days_in_week) + 1

def week_start(days):
	"""
	# The epoch day of the Monday starting the week containing &days.
	"""
	return days - (day_of_week(days) - 1)

def first_week_start(year_start, minimum):
	"""
	# The epoch day of the Monday that begins the first week of a year.

	# [ Parameters ]
	# /year_start/
		# Epoch day of the first day of the year.
	# /minimum/
		# Minimum number of days of the year that the first week must contain.
	"""
	dow = day_of_week(year_start)
	if dow > (8 - minimum):
		# Week 1 starts in the following week.
		return year_start + (8 - dow)
	return year_start - (dow - 1)
