"""
# Identities of calendar systems, calendar fields, and duration units.

# The kinds are closed enumerations. Implementations are produced by
# a &.chronology.Chronology and retrieved through the kinds' `get` methods.

# [ Elements ]
# /CalendarKind/
	# The calendar systems supported by &.chronology.
# /DurationUnitKind/
	# The units of elapsed time.
# /FieldKind/
	# The fields of a date-time along with the units they count and the
	# units they are a component of.
"""
import enum

class CalendarKind(enum.Enum):
	"""
	# Calendar system identifiers.

	# [ Elements ]
	# /iso/
		# ISO-8601; proleptic Gregorian with zero based centuries.
	# /gregorian/
		# Proleptic Gregorian.
	# /julian/
		# Proleptic Julian without a year zero.
	# /gj/
		# Julian before a cutover instant, Gregorian after.
	# /buddhist/
		# GJ with years counted from 543 BCE.
	# /coptic/
		# Thirteen month calendar of the Coptic church.
	# /ethiopic/
		# Thirteen month calendar of Ethiopia.
	# /islamic/
		# Arithmetic lunar calendar counted from 0622-07-16 (Julian).
	"""

	iso = 'iso'
	gregorian = 'gregorian'
	julian = 'julian'
	gj = 'gj'
	buddhist = 'buddhist'
	coptic = 'coptic'
	ethiopic = 'ethiopic'
	islamic = 'islamic'

class DurationUnitKind(enum.Enum):
	"""
	# Units of elapsed time. Ordered from largest to smallest.
	"""

	eras = 'eras'
	centuries = 'centuries'
	weekyears = 'weekyears'
	years = 'years'
	months = 'months'
	weeks = 'weeks'
	days = 'days'
	halfdays = 'halfdays'
	hours = 'hours'
	minutes = 'minutes'
	seconds = 'seconds'
	millis = 'millis'

	def get(self, chronology):
		"""
		# Retrieve the implementation of the unit from the &chronology.
		"""
		return chronology.unit(self)

	def is_supported(self, chronology):
		return chronology.unit(self).is_supported()

class FieldKind(enum.Enum):
	"""
	# Fields of a date-time.

	# Each kind has a &unit, the &DurationUnitKind counted by the field,
	# and an optional &range, the &DurationUnitKind that the field
	# is a component of.
	"""

	era = ('era', 'eras', None)
	yearOfEra = ('yearOfEra', 'years', 'eras')
	centuryOfEra = ('centuryOfEra', 'centuries', 'eras')
	yearOfCentury = ('yearOfCentury', 'years', 'centuries')
	year = ('year', 'years', None)
	dayOfYear = ('dayOfYear', 'days', 'years')
	monthOfYear = ('monthOfYear', 'months', 'years')
	dayOfMonth = ('dayOfMonth', 'days', 'months')
	weekyearOfCentury = ('weekyearOfCentury', 'weekyears', 'centuries')
	weekyear = ('weekyear', 'weekyears', None)
	weekOfWeekyear = ('weekOfWeekyear', 'weeks', 'weekyears')
	dayOfWeek = ('dayOfWeek', 'days', 'weeks')

	halfdayOfDay = ('halfdayOfDay', 'halfdays', 'days')
	hourOfHalfday = ('hourOfHalfday', 'hours', 'halfdays')
	clockhourOfHalfday = ('clockhourOfHalfday', 'hours', 'halfdays')
	clockhourOfDay = ('clockhourOfDay', 'hours', 'days')
	hourOfDay = ('hourOfDay', 'hours', 'days')
	minuteOfDay = ('minuteOfDay', 'minutes', 'days')
	minuteOfHour = ('minuteOfHour', 'minutes', 'hours')
	secondOfDay = ('secondOfDay', 'seconds', 'days')
	secondOfMinute = ('secondOfMinute', 'seconds', 'minutes')
	millisOfDay = ('millisOfDay', 'millis', 'days')
	millisOfSecond = ('millisOfSecond', 'millis', 'seconds')

	@property
	def unit(self) -> DurationUnitKind:
		return DurationUnitKind(self.value[1])

	@property
	def range(self) -> DurationUnitKind:
		r = self.value[2]
		if r is None:
			return None
		return DurationUnitKind(r)

	def get(self, chronology):
		"""
		# Retrieve the implementation of the field from the &chronology.
		# Kinds that have no meaning in the chronology produce an unsupported field.
		"""
		return chronology.field(self)

	def is_supported(self, chronology):
		return chronology.field(self).is_supported()

	@classmethod
	def named(Class, name):
		"""
		# Select the kind identified by &name.
		"""
		return Class[name]
