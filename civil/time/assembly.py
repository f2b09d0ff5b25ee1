"""
# Strategy tables mapping field and unit kinds to their implementations.

# A chronology is assembled by filling an &Assembly: the time of day fields
# shared by every calendar, then the fields of a &.calendar.Calendar, then
# any calendar specific replacements. Kinds left unfilled resolve to the
# unsupported variants when the table is completed.
"""
import types as pytypes

from . import earth
from . import libunit
from . import libfield
from . import libcalendar
from .types import FieldKind, DurationUnitKind

class Assembly(object):
	"""
	# Mutable table of fields and units used while building a chronology.
	"""
	__slots__ = ('fields', 'units')

	def __init__(self, fields=(), units=()):
		self.fields = dict(fields)
		self.units = dict(units)

	def __repr__(self):
		return "<%s: %d fields, %d units>" %(
			self.__class__.__name__, len(self.fields), len(self.units)
		)

	def copy(self):
		return self.__class__(self.fields, self.units)

	def unit(self, kind):
		u = self.units.get(kind)
		if u is None:
			u = self.units[kind] = libunit.Unsupported(kind)
		return u

	def field(self, kind):
		f = self.fields.get(kind)
		if f is None:
			f = self.fields[kind] = libfield.Unsupported(kind, self.unit(kind.unit))
		return f

	def complete(self, MappingProxyType=pytypes.MappingProxyType):
		"""
		# Fill the unassigned kinds with unsupported variants and
		# return read-only views of the fields and units.
		"""
		for k in DurationUnitKind:
			self.unit(k)
		for k in FieldKind:
			self.field(k)
		return MappingProxyType(dict(self.fields)), MappingProxyType(dict(self.units))

def time(a):
	"""
	# Assign the precise units and the time of day fields.
	"""
	U = DurationUnitKind
	F = FieldKind
	P = libunit.Precise

	millis = a.units[U.millis] = libunit.millis
	seconds = a.units[U.seconds] = P(U.seconds, earth.millis_in_second)
	minutes = a.units[U.minutes] = P(U.minutes, earth.millis_in_minute)
	hours = a.units[U.hours] = P(U.hours, earth.millis_in_hour)
	halfdays = a.units[U.halfdays] = P(U.halfdays, earth.millis_in_halfday)
	days = a.units[U.days] = P(U.days, earth.millis_in_day)
	a.units[U.weeks] = P(U.weeks, earth.millis_in_day * 7)

	f = a.fields
	f[F.millisOfSecond] = libfield.Precise(F.millisOfSecond, millis, seconds)
	f[F.millisOfDay] = libfield.Precise(F.millisOfDay, millis, days)
	f[F.secondOfMinute] = libfield.Precise(F.secondOfMinute, seconds, minutes)
	f[F.secondOfDay] = libfield.Precise(F.secondOfDay, seconds, days)
	f[F.minuteOfHour] = libfield.Precise(F.minuteOfHour, minutes, hours)
	f[F.minuteOfDay] = libfield.Precise(F.minuteOfDay, minutes, days)
	f[F.hourOfDay] = libfield.Precise(F.hourOfDay, hours, days)
	f[F.hourOfHalfday] = libfield.Precise(F.hourOfHalfday, hours, halfdays)
	f[F.halfdayOfDay] = libfield.Precise(F.halfdayOfDay, halfdays, days)

	f[F.clockhourOfDay] = libfield.ZeroIsMaximum(f[F.hourOfDay], kind=F.clockhourOfDay)
	f[F.clockhourOfHalfday] = libfield.ZeroIsMaximum(f[F.hourOfHalfday], kind=F.clockhourOfHalfday)
	return a

def dates(a, calendar):
	"""
	# Assign the fields derived from &calendar: years, months, weeks, and days.
	# Centuries are one-based; the twenty-first century starts in 2001.
	"""
	U = DurationUnitKind
	F = FieldKind
	f = a.fields
	days = a.unit(U.days)
	weeks = a.unit(U.weeks)
	eras = a.unit(U.eras)

	year = f[F.year] = libcalendar.Year(calendar, days)
	years = a.units[U.years] = year.duration_unit()
	yoe = f[F.yearOfEra] = libcalendar.YearOfEra(year, eras)
	f[F.era] = libcalendar.Era(calendar)

	century = libfield.Divided(libfield.Offset(yoe, 99), F.centuryOfEra, 100, range=eras)
	f[F.centuryOfEra] = century
	centuries = a.units[U.centuries] = century.duration_unit()
	f[F.yearOfCentury] = libfield.Offset(
		libfield.Remainder.from_divided(century, F.yearOfCentury), 1
	)

	month = f[F.monthOfYear] = libcalendar.MonthOfYear(calendar, years, days)
	a.units[U.months] = month.duration_unit()

	weekyear = f[F.weekyear] = libcalendar.Weekyear(calendar, weeks)
	weekyears = a.units[U.weekyears] = weekyear.duration_unit()
	f[F.weekyearOfCentury] = libfield.Offset(
		libfield.Remainder(weekyear, 100, F.weekyearOfCentury, range=centuries), 1
	)

	f[F.dayOfYear] = libcalendar.DayOfYear(calendar, days, years)
	f[F.dayOfMonth] = libcalendar.DayOfMonth(calendar, days, a.units[U.months])
	f[F.dayOfWeek] = libcalendar.DayOfWeek(calendar, days, weeks)
	f[F.weekOfWeekyear] = libcalendar.WeekOfWeekyear(calendar, weeks, weekyears)
	return a

def zero_based_centuries(a):
	"""
	# Replace the century fields with the ISO-8601 form: year 2000 is
	# in century 20 and has a year of century of zero.
	"""
	U = DurationUnitKind
	F = FieldKind
	f = a.fields

	century = libfield.Divided(
		libcalendar.ZeroBasedYearOfEra(f[F.year]), F.centuryOfEra, 100,
		range=a.unit(U.eras)
	)
	f[F.centuryOfEra] = century
	centuries = a.units[U.centuries] = century.duration_unit()
	f[F.yearOfCentury] = libfield.Remainder.from_divided(century, F.yearOfCentury)
	f[F.weekyearOfCentury] = libfield.Remainder(
		f[F.weekyear], 100, F.weekyearOfCentury, range=centuries
	)
	return a

def without_year_zero(a):
	"""
	# Renumber the year and weekyear so that `-1` precedes `1`.
	"""
	f = a.fields
	f[FieldKind.year] = libfield.Skip(f[FieldKind.year])
	f[FieldKind.weekyear] = libfield.Skip(f[FieldKind.weekyear])
	return a

def single_era(a):
	a.fields[FieldKind.era] = libcalendar.SingleEra()
	return a
