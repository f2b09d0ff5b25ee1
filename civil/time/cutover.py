"""
# The GJ chronology: Julian before a cutover instant and Gregorian after.

# Fields select the Julian or Gregorian implementation by comparing the instant
# with the cutover. Results that cross the cutover are converted between the
# calendars by their year, month, and day, or by their weekyear, week, and day
# of week, so that the sequence of days is continuous across the gap of days
# that the Gregorian calendar skipped.

# The default cutover is 1582-10-15: 1582-10-04 (Julian) is followed by
# 1582-10-15 (Gregorian).
"""
from . import core
from . import earth
from . import gregorian as libgregorian
from . import libfield
from . import libunit
from .types import FieldKind, DurationUnitKind

class Conversion(object):
	"""
	# Conversion of instants between the Julian and Gregorian chronologies.

	# [ Properties ]
	# /julian/
		# The UTC Julian chronology.
	# /gregorian/
		# The UTC Gregorian chronology.
	# /cutover/
		# The first instant of the Gregorian calendar.
	# /gap/
		# Milliseconds skipped at the cutover.
	"""
	__slots__ = ('julian', 'gregorian', 'cutover', 'gap')

	def __init__(self, julian, gregorian, cutover):
		self.julian = julian
		self.gregorian = gregorian
		self.cutover = cutover
		self.gap = cutover - self.julian_to_gregorian(cutover)

	@staticmethod
	def by_year(instant, source, target):
		y, m, d, ms = source.select(instant,
			FieldKind.year, FieldKind.monthOfYear, FieldKind.dayOfMonth, FieldKind.millisOfDay
		)
		return target.date_instant(y, m, d, ms)

	@staticmethod
	def by_weekyear(instant, source, target):
		F = FieldKind
		wy, w, dow, ms = source.select(instant, F.weekyear, F.weekOfWeekyear, F.dayOfWeek, F.millisOfDay)
		r = target.field(F.weekyear).set(0, wy)
		# The target weekyear may have 52 weeks where the source had 53.
		wow = target.field(F.weekOfWeekyear)
		r = wow.set(r, min(w, wow.maximum(r)))
		r = target.field(F.dayOfWeek).set(r, dow)
		return target.field(F.millisOfDay).set(r, ms)

	def julian_to_gregorian(self, instant):
		return self.by_year(instant, self.julian, self.gregorian)

	def gregorian_to_julian(self, instant):
		return self.by_year(instant, self.gregorian, self.julian)

	def julian_to_gregorian_by_weekyear(self, instant):
		return self.by_weekyear(instant, self.julian, self.gregorian)

	def gregorian_to_julian_by_weekyear(self, instant):
		return self.by_weekyear(instant, self.gregorian, self.julian)

class Field(libfield.Field):
	"""
	# Field selecting the Julian or Gregorian implementation at the cutover.
	"""
	__slots__ = ('julian', 'gregorian', 'cutover', 'conversion', 'by_weekyear', 'unit', 'range')

	def __init__(self, conversion, julian, gregorian, cutover=None, by_weekyear=False, range=None):
		super().__init__(gregorian.kind)
		self.conversion = conversion
		self.julian = julian
		self.gregorian = gregorian
		self.cutover = conversion.cutover if cutover is None else cutover
		self.by_weekyear = by_weekyear
		self.unit = gregorian.duration_unit()
		if range is None:
			range = gregorian.range_unit() or julian.range_unit()
		self.range = range

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		return self.range

	def leap_unit(self):
		return self.gregorian.leap_unit()

	def julian_to_gregorian(self, instant):
		if self.by_weekyear:
			return self.conversion.julian_to_gregorian_by_weekyear(instant)
		return self.conversion.julian_to_gregorian(instant)

	def gregorian_to_julian(self, instant):
		if self.by_weekyear:
			return self.conversion.gregorian_to_julian_by_weekyear(instant)
		return self.conversion.gregorian_to_julian(instant)

	def get(self, instant):
		if instant >= self.cutover:
			return self.gregorian.get(instant)
		return self.julian.get(instant)

	def set(self, instant, value):
		gap = self.conversion.gap
		if instant >= self.cutover:
			instant = self.gregorian.set(instant, value)
			if instant < self.cutover:
				# Only adjust when the gap was fully crossed.
				if instant + gap < self.cutover:
					instant = self.gregorian_to_julian(instant)
				if self.get(instant) != value:
					raise core.IllegalFieldValue(self.kind, value)
		else:
			instant = self.julian.set(instant, value)
			if instant >= self.cutover:
				if instant - gap >= self.cutover:
					instant = self.julian_to_gregorian(instant)
				if self.get(instant) != value:
					raise core.IllegalFieldValue(self.kind, value)
		return instant

	def add(self, instant, value):
		return self.gregorian.add(instant, value)

	def difference(self, start, stop):
		return self.gregorian.difference(start, stop)

	def is_leap(self, instant):
		if instant >= self.cutover:
			return self.gregorian.is_leap(instant)
		return self.julian.is_leap(instant)

	def leap_amount(self, instant):
		if instant >= self.cutover:
			return self.gregorian.leap_amount(instant)
		return self.julian.leap_amount(instant)

	def minimum(self, instant=None):
		if instant is None:
			return self.julian.minimum()
		if instant < self.cutover:
			return self.julian.minimum(instant)

		lower = self.gregorian.minimum(instant)
		# Restrict to the values that exist after the cutover.
		if self.gregorian.set(instant, lower) < self.cutover:
			lower = self.gregorian.get(self.cutover)
		return lower

	def maximum(self, instant=None):
		if instant is None:
			return self.gregorian.maximum()
		if instant >= self.cutover:
			return self.gregorian.maximum(instant)

		upper = self.julian.maximum(instant)
		# Restrict to the values that exist before the cutover.
		if self.julian.set(instant, upper) >= self.cutover:
			upper = self.julian.get(self.julian.add(self.cutover, -1))
		return upper

	def round_floor(self, instant):
		if instant >= self.cutover:
			instant = self.gregorian.round_floor(instant)
			if instant < self.cutover:
				if instant + self.conversion.gap < self.cutover:
					instant = self.gregorian_to_julian(instant)
		else:
			instant = self.julian.round_floor(instant)
		return instant

	def round_ceiling(self, instant):
		if instant >= self.cutover:
			instant = self.gregorian.round_ceiling(instant)
		else:
			instant = self.julian.round_ceiling(instant)
			if instant >= self.cutover:
				if instant - self.conversion.gap >= self.cutover:
					instant = self.julian_to_gregorian(instant)
		return instant

class ImpreciseField(Field):
	"""
	# Cutover field counting an imprecise unit. Additions and differences
	# that cross the cutover are converted to the calendar of the result.
	"""
	__slots__ = ()

	def __init__(self, conversion, julian, gregorian, unit=None, by_weekyear=False):
		super().__init__(conversion, julian, gregorian, by_weekyear=by_weekyear)
		if unit is None:
			unit = libunit.Linked(gregorian.kind.unit, self, gregorian.duration_unit().unit_millis())
		self.unit = unit

	def add(self, instant, value):
		c = self.conversion
		if instant >= self.cutover:
			instant = self.gregorian.add(instant, value)
			if instant < self.cutover and instant + c.gap < self.cutover:
				# The Gregorian result has a year zero that the Julian calendar lacks.
				if self.by_weekyear:
					wy = c.gregorian.field(FieldKind.weekyear)
					if wy.get(instant) <= 0:
						instant = wy.add(instant, -1)
				else:
					y = c.gregorian.field(FieldKind.year)
					if y.get(instant) <= 0:
						instant = y.add(instant, -1)
				instant = self.gregorian_to_julian(instant)
		else:
			instant = self.julian.add(instant, value)
			if instant >= self.cutover and instant - c.gap >= self.cutover:
				instant = self.julian_to_gregorian(instant)
		return instant

	def difference(self, start, stop):
		if stop >= self.cutover:
			if start >= self.cutover:
				return self.gregorian.difference(start, stop)
			return self.julian.difference(start, self.gregorian_to_julian(stop))
		else:
			if start < self.cutover:
				return self.julian.difference(start, stop)
			return self.gregorian.difference(start, self.julian_to_gregorian(stop))

	def minimum(self, instant=None):
		if instant is None:
			return self.julian.minimum()
		if instant >= self.cutover:
			return self.gregorian.minimum(instant)
		return self.julian.minimum(instant)

	def maximum(self, instant=None):
		if instant is None:
			return self.gregorian.maximum()
		if instant >= self.cutover:
			return self.gregorian.maximum(instant)
		return self.julian.maximum(instant)

def constructor(conversion):
	"""
	# Construct instants from dates in the Gregorian calendar when they fall
	# on or after the cutover and from the Julian calendar otherwise.
	"""
	julian = conversion.julian
	gregorian = conversion.gregorian
	cutover = conversion.cutover

	def construct(year, month, day, millis):
		try:
			instant = gregorian.date_instant(year, month, day, millis)
		except core.IllegalFieldValue:
			# A leap day of the Julian calendar that the Gregorian calendar lacks.
			if month != 2 or day != 29:
				raise
			instant = gregorian.date_instant(year, month, 28, millis)
			if instant >= cutover:
				raise

		if instant < cutover:
			instant = julian.date_instant(year, month, day, millis)
			if instant >= cutover:
				raise core.IllegalFieldValue(
					FieldKind.dayOfMonth, day,
					message="date %04d-%02d-%02d does not exist in the GJ calendar" %(year, month, day)
				)
		return instant
	return construct

def assemble(julian, gregorian, cutover):
	"""
	# Build the strategy table and constructor of the GJ chronology.

	# [ Parameters ]
	# /julian/
		# The UTC Julian chronology.
	# /gregorian/
		# The UTC Gregorian chronology.
	# /cutover/
		# The first instant of the Gregorian calendar.
	"""
	from .assembly import Assembly
	F = FieldKind
	U = DurationUnitKind

	cutover_days = cutover // earth.millis_in_day
	if libgregorian.date_from_days(cutover_days)[0] <= 0:
		raise core.IllegalArgument("cutover must be on or after 0001-01-01")
	if julian.parameter('minimum_days') != gregorian.parameter('minimum_days'):
		raise core.IllegalArgument("julian and gregorian first week definitions differ")

	c = Conversion(julian, gregorian, cutover)
	a = Assembly(
		[(k, gregorian.field(k)) for k in F if gregorian.field(k).is_supported()],
		[(k, gregorian.unit(k)) for k in U if gregorian.unit(k).is_supported()],
	)
	f = a.fields
	jf = julian.field

	f[F.era] = Field(c, jf(F.era), f[F.era])

	# The cutover year has fewer days and weeks; extend the Julian fields to
	# the following year so the sequences are unbroken.
	f[F.dayOfYear] = Field(c, jf(F.dayOfYear), f[F.dayOfYear],
		cutover=f[F.year].round_ceiling(cutover))
	f[F.weekOfWeekyear] = Field(c, jf(F.weekOfWeekyear), f[F.weekOfWeekyear],
		cutover=f[F.weekyear].round_ceiling(cutover), by_weekyear=True)

	year = f[F.year] = ImpreciseField(c, jf(F.year), f[F.year])
	years = a.units[U.years] = year.duration_unit()
	f[F.yearOfEra] = ImpreciseField(c, jf(F.yearOfEra), f[F.yearOfEra], unit=years)
	f[F.yearOfCentury] = ImpreciseField(c, jf(F.yearOfCentury), f[F.yearOfCentury], unit=years)

	century = f[F.centuryOfEra] = ImpreciseField(c, jf(F.centuryOfEra), f[F.centuryOfEra])
	a.units[U.centuries] = century.duration_unit()

	month = f[F.monthOfYear] = ImpreciseField(c, jf(F.monthOfYear), f[F.monthOfYear])
	months = a.units[U.months] = month.duration_unit()

	weekyear = f[F.weekyear] = ImpreciseField(c, jf(F.weekyear), f[F.weekyear], by_weekyear=True)
	weekyears = a.units[U.weekyears] = weekyear.duration_unit()
	f[F.weekyearOfCentury] = ImpreciseField(
		c, jf(F.weekyearOfCentury), f[F.weekyearOfCentury], unit=weekyears
	)

	f[F.dayOfMonth] = Field(c, jf(F.dayOfMonth), f[F.dayOfMonth], range=months)

	return a, constructor(c)
