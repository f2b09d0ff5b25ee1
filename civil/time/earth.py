"""
# Data regarding Earth-based units of time. (The earth day)

# The engine measures time in milliseconds; the quantities here are
# the fixed lengths of the precise units in that measure.
"""
#: Number of milliseconds contained in a `second`.
millis_in_second = 1000

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of hours contained in half of an earth `day`.
hours_in_halfday = hours_in_day // 2

#: Number of a days in four Julian years. (365.25 days)
days_in_four_annum = 1461

millis_in_minute = millis_in_second * seconds_in_minute
millis_in_hour = millis_in_minute * minutes_in_hour
millis_in_halfday = millis_in_hour * hours_in_halfday
millis_in_day = millis_in_hour * hours_in_day

seconds_in_hour = seconds_in_minute * minutes_in_hour
seconds_in_day = seconds_in_hour * hours_in_day
minutes_in_day = minutes_in_hour * hours_in_day

def time_of_day(millis, divmod=divmod):
	"""
	# Split the milliseconds of a day into `(hour, minute, second, millisecond)`.
	"""
	seconds, ms = divmod(millis, millis_in_second)
	minutes, s = divmod(seconds, seconds_in_minute)
	h, m = divmod(minutes, minutes_in_hour)
	return (h, m, s, ms)

def millis_of_day(hour, minute, second, millisecond):
	return (
		hour * millis_in_hour +
		minute * millis_in_minute +
		second * millis_in_second +
		millisecond
	)
