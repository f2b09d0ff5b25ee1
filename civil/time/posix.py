"""
# POSIX TZ rule strings.

# TZif footers describe the offsets after the last transition of a zone with
# a POSIX TZ string: `std offset [dst [offset] [,start[/time],end[/time]]]`.
# For example, `GMT0BST,M3.5.0/1,M10.5.0` is the rule of Europe/London.

# Offsets in the string are west of Greenwich; &Rule presents them east of
# Greenwich in milliseconds.

# [ Elements ]
# /default_rule/
	# The transition dates used when a daylight name is given without dates.
"""
import re
import functools

from . import core
from . import earth
from . import gregorian
from . import week

_name = r'(?:[A-Za-z]{3,}|<[A-Za-z0-9+\-]{1,}>)'
_offset = r'[+-]?\d{1,3}(?::\d{1,2}(?::\d{1,2})?)?'
_date = r'(?:J\d{1,3}|\d{1,3}|M\d{1,2}\.\d\.\d)'

pattern = re.compile(
	r'^(?P<std>' + _name + r')(?P<stdoff>' + _offset + r')'
	r'(?:(?P<dst>' + _name + r')(?P<dstoff>' + _offset + r')?'
	r'(?:,(?P<start>' + _date + r')(?:/(?P<starttime>' + _offset + r'))?'
	r',(?P<end>' + _date + r')(?:/(?P<endtime>' + _offset + r'))?)?)?$'
)

default_rule = ('M3.2.0', 'M11.1.0')
default_time = 2 * earth.seconds_in_hour

def seconds(string):
	"""
	# Convert `[+-]hh[:mm[:ss]]` into seconds.
	"""
	sign = 1
	if string[:1] in ('+', '-'):
		if string[0] == '-':
			sign = -1
		string = string[1:]
	parts = [int(x) for x in string.split(':')]
	parts.extend([0] * (3 - len(parts)))
	h, m, s = parts
	if m > 59 or s > 59:
		raise core.IllegalArgument("invalid time in TZ rule: " + string)
	return sign * ((h * 3600) + (m * 60) + s)

def name(string):
	if string.startswith('<'):
		return string[1:-1]
	return string

def parse_date(string):
	"""
	# Parse a transition date into `(form, values)`.

	# [ Forms ]
	# /`J`/
		# Day of year from `1` to `365` never counting February 29.
	# /`D`/
		# Zero-based day of year from `0` to `365` counting February 29.
	# /`M`/
		# Weekday `d` (`0` is Sunday) of week `w` (`5` is the last) of month `m`.
	"""
	if string[0] == 'J':
		n = int(string[1:])
		if n < 1 or n > 365:
			raise core.IllegalArgument("invalid julian day in TZ rule: " + string)
		return ('J', (n,))
	elif string[0] == 'M':
		m, w, d = (int(x) for x in string[1:].split('.'))
		if not (1 <= m <= 12 and 1 <= w <= 5 and 0 <= d <= 6):
			raise core.IllegalArgument("invalid month rule in TZ rule: " + string)
		return ('M', (m, w, d))
	else:
		n = int(string)
		if n > 365:
			raise core.IllegalArgument("invalid day of year in TZ rule: " + string)
		return ('D', (n,))

def resolve_date(date, year):
	"""
	# The epoch day on which the transition &date occurs in &year.
	"""
	form, values = date
	jan1 = gregorian.days_from_date(year, 1, 1)

	if form == 'J':
		n = values[0]
		day = jan1 + n - 1
		if n >= 60 and gregorian.year_is_leap(year):
			day += 1
		return day
	elif form == 'D':
		return jan1 + values[0]

	m, w, d = values
	first = gregorian.days_from_date(year, m, 1)
	# Day of week counting Sunday as zero.
	dow = week.day_of_week(first) % 7
	day = first + ((d - dow) % 7) + ((w - 1) * 7)
	limit = first + gregorian.Calendar().days_in_month(year, m)
	while day >= limit:
		day -= 7
	return day

class Rule(object):
	"""
	# A recurring daylight saving rule or a fixed offset.

	# [ Properties ]
	# /string/
		# The TZ string the rule was parsed from.
	# /standard/
		# `(abbreviation, offset)` of standard time.
	# /daylight/
		# `(abbreviation, offset)` of daylight saving time; &None for fixed rules.
	"""
	__slots__ = ('string', 'standard', 'daylight', 'start', 'start_time', 'end', 'end_time')

	def __init__(self, string, standard, daylight=None, start=None, start_time=None, end=None, end_time=None):
		self.string = string
		self.standard = standard
		self.daylight = daylight
		self.start = start
		self.start_time = start_time
		self.end = end
		self.end_time = end_time

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.string)

	def __eq__(self, ob):
		return isinstance(ob, Rule) and self.string == ob.string

	def __hash__(self):
		return hash(self.string)

	def is_fixed(self):
		return self.daylight is None

	def transitions(self, year):
		"""
		# The instants in &year where daylight saving time starts and ends.

		# Returns a sorted pair of `(instant, daylight)` tuples where `daylight`
		# is whether the offset following the instant is daylight saving time.
		"""
		if self.daylight is None:
			return ()
		return _transitions(self, year)

	def _window(self, instant):
		year = gregorian.date_from_days(instant // earth.millis_in_day)[0]
		for y in (year - 1, year, year + 1):
			yield from self.transitions(y)

	def is_daylight(self, instant):
		"""
		# Whether &instant is in daylight saving time.
		"""
		if self.daylight is None:
			return False
		state = False
		for at, daylight in self._window(instant):
			if at > instant:
				break
			state = daylight
		return state

	def offset(self, instant):
		"""
		# The `(abbreviation, offset)` in effect at &instant.
		"""
		if self.is_daylight(instant):
			return self.daylight
		return self.standard

	def next_transition(self, instant):
		"""
		# The first transition after &instant; &None for fixed rules.
		"""
		for at, daylight in self._window(instant):
			if at > instant:
				return at
		return None

	def previous_transition(self, instant):
		"""
		# The last transition before &instant; &None for fixed rules.
		"""
		previous = None
		for at, daylight in self._window(instant):
			if at >= instant:
				break
			previous = at
		return previous

@functools.lru_cache(512)
def _transitions(rule, year):
	std = rule.standard[1]
	dst = rule.daylight[1]
	start = (resolve_date(rule.start, year) * earth.millis_in_day) + (rule.start_time * 1000) - std
	end = (resolve_date(rule.end, year) * earth.millis_in_day) + (rule.end_time * 1000) - dst
	return tuple(sorted([(start, True), (end, False)]))

def parse(string):
	"""
	# Parse the POSIX TZ &string into a &Rule.

	# [ Exceptions ]
	# /&core.IllegalArgument/
		# The string is not a valid TZ rule.
	"""
	m = pattern.match(string)
	if m is None:
		raise core.IllegalArgument("invalid TZ rule: %r" %(string,))

	std_offset = -seconds(m.group('stdoff')) * 1000
	standard = (name(m.group('std')), std_offset)

	if m.group('dst') is None:
		return Rule(string, standard)

	dstoff = m.group('dstoff')
	if dstoff is None:
		dst_offset = std_offset + earth.millis_in_hour
	else:
		dst_offset = -seconds(dstoff) * 1000
	daylight = (name(m.group('dst')), dst_offset)

	start, end = m.group('start'), m.group('end')
	if start is None:
		start, end = default_rule
	starttime = m.group('starttime')
	endtime = m.group('endtime')

	return Rule(
		string, standard, daylight,
		parse_date(start), default_time if starttime is None else seconds(starttime),
		parse_date(end), default_time if endtime is None else seconds(endtime),
	)
