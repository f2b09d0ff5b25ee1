"""
# Various constants.

# [ Elements ]

# /unix_epoch/
	# The instant referring to 1970-01-01T00:00:00Z; the datum of all instants.
# /gregorian_cutover/
	# The default instant at which the GJ chronology leaves the Julian calendar:
	# 1582-10-15T00:00:00Z (Gregorian), the day after 1582-10-04 (Julian).
# /average_gregorian_year/
	# Mean length of a Gregorian year in milliseconds. (365.2425 days)
# /average_julian_year/
	# Mean length of a Julian year in milliseconds. (365.25 days)
# /first_week_minimum/
	# Default minimum number of days of a year that the first week must contain.
	# Four is the ISO-8601 rule: the week holding the first Thursday.
# /bce/
	# Era value before the common era.
# /ce/
	# Era value of the common era.
"""
from . import earth

unix_epoch = 0
gregorian_cutover = -12219292800000

average_gregorian_year = (146097 * earth.millis_in_day) // 400
average_julian_year = (earth.days_in_four_annum * earth.millis_in_day) // 4
average_gregorian_month = average_gregorian_year // 12
average_julian_month = average_julian_year // 12

first_week_minimum = 4

bce = 0
ce = 1

#: The Buddhist calendar counts years from 543 BCE.
buddhist_year_offset = 543
