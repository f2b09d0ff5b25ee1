"""
# Fields and units of a chronology bound to a zone other than UTC.

# The wrappers convert instants to the local time line of the zone, apply the
# UTC field, and convert the result back. Fields whose unit is shorter than
# half a day add the zone offset arithmetically so that adding an hour across
# a transition moves the instant by exactly an hour. Longer fields convert the
# local result back to UTC preferring the offset of the original instant.
"""
from . import core
from . import earth
from . import libunit
from . import libfield
from .assembly import Assembly
from .types import FieldKind, DurationUnitKind

def time_arithmetic(unit):
	"""
	# Whether the &unit is short enough to use offset arithmetic.
	"""
	return unit is not None and unit.is_supported() and unit.unit_millis() < earth.millis_in_halfday

def offset_to_add(zone, instant):
	offset = zone.offset(instant)
	local = instant + offset
	# Overflow when the signs of the instant and the offset agree but the sum differs.
	if (instant ^ local) < 0 and (instant ^ offset) >= 0:
		raise core.ArithmeticOverflow("adding the time zone offset overflows")
	return offset

def offset_from_local_to_subtract(zone, local):
	offset = zone.offset_from_local(local)
	utc = local - offset
	if (local ^ utc) < 0 and (local ^ offset) < 0:
		raise core.ArithmeticOverflow("subtracting the time zone offset overflows")
	return offset

class ZonedUnit(libunit.Unit):
	"""
	# Duration unit measured on the local time line of &zone.
	"""
	__slots__ = ('unit', 'zone', 'time')

	def __init__(self, unit, zone):
		super().__init__(unit.kind)
		self.unit = unit
		self.zone = zone
		self.time = time_arithmetic(unit)

	def __repr__(self):
		return "<%s %s[%s]>" %(self.__class__.__name__, self.kind.name, self.zone.id)

	def is_precise(self):
		if self.time:
			return self.unit.is_precise()
		return self.unit.is_precise() and self.zone.is_fixed()

	def unit_millis(self, instant=None):
		if instant is None:
			return self.unit.unit_millis()
		return self.millis(1, instant)

	def add(self, instant, value):
		offset = offset_to_add(self.zone, instant)
		local = self.unit.add(instant + offset, value)
		if self.time:
			return core.check(local - offset)
		return core.check(local - offset_from_local_to_subtract(self.zone, local))

	def difference(self, start, stop):
		offset = offset_to_add(self.zone, start)
		if self.time:
			return self.unit.difference(start + offset, stop + offset)
		return self.unit.difference(start + offset, stop + offset_to_add(self.zone, stop))

	def millis(self, value, instant=None):
		if instant is None:
			return self.unit.millis(value)
		return core.subtract(self.add(instant, value), instant)

	def value(self, duration, instant=None):
		if instant is None:
			return self.unit.value(duration)
		return self.difference(instant, core.add(instant, duration))

class ZonedField(libfield.Field):
	"""
	# Calendar field whose values are read from the local time line of &zone.

	# [ Properties ]
	# /field/
		# The UTC field being wrapped.
	# /zone/
		# The zone of the local time line.
	"""
	__slots__ = ('field', 'zone', 'unit', 'range', 'leap', 'time')

	def __init__(self, field, zone, unit, range=None, leap=None):
		super().__init__(field.kind)
		self.field = field
		self.zone = zone
		self.unit = unit
		self.range = range
		self.leap = leap
		self.time = time_arithmetic(field.duration_unit())

	def __repr__(self):
		return "<%s %s[%s]>" %(self.__class__.__name__, self.kind.name, self.zone.id)

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		return self.range

	def leap_unit(self):
		return self.leap

	def local(self, instant):
		return self.zone.convert_utc_to_local(instant)

	def utc(self, local, instant):
		return self.zone.convert_local_to_utc(local, False, instant)

	def get(self, instant):
		return self.field.get(self.local(instant))

	def set(self, instant, value):
		local = self.field.set(self.local(instant), value)
		result = self.utc(local, instant)
		if self.get(result) != value:
			cause = core.IllegalInstant(local, self.zone)
			raise core.IllegalFieldValue(self.kind, value, message=str(cause)) from cause
		return result

	def add(self, instant, value):
		if self.time:
			offset = offset_to_add(self.zone, instant)
			return core.check(self.field.add(instant + offset, value) - offset)
		local = self.field.add(self.local(instant), value)
		return self.utc(local, instant)

	def add_wrap_field(self, instant, value):
		local = self.field.add_wrap_field(self.local(instant), value)
		return self.utc(local, instant)

	def difference(self, start, stop):
		offset = offset_to_add(self.zone, start)
		if self.time:
			return self.field.difference(start + offset, stop + offset)
		return self.field.difference(start + offset, stop + offset_to_add(self.zone, stop))

	def is_leap(self, instant):
		return self.field.is_leap(self.local(instant))

	def leap_amount(self, instant):
		return self.field.leap_amount(self.local(instant))

	def minimum(self, instant=None):
		if instant is None:
			return self.field.minimum()
		return self.field.minimum(self.local(instant))

	def maximum(self, instant=None):
		if instant is None:
			return self.field.maximum()
		return self.field.maximum(self.local(instant))

	def round_floor(self, instant):
		if self.time:
			offset = offset_to_add(self.zone, instant)
			return core.check(self.field.round_floor(instant + offset) - offset)
		local = self.field.round_floor(self.local(instant))
		return self.utc(local, instant)

	def round_ceiling(self, instant):
		if self.time:
			offset = offset_to_add(self.zone, instant)
			return core.check(self.field.round_ceiling(instant + offset) - offset)
		local = self.field.round_ceiling(self.local(instant))
		return self.utc(local, instant)

	def remainder(self, instant):
		return self.field.remainder(self.local(instant))

def assemble(base, zone):
	"""
	# Build the strategy table and constructor of the &base UTC chronology
	# bound to &zone.
	"""
	a = Assembly()
	units = {}

	def convert_unit(unit):
		if unit is None or not unit.is_supported():
			return unit
		u = units.get(id(unit))
		if u is None:
			u = units[id(unit)] = (unit, ZonedUnit(unit, zone))
		return u[1]

	for k in DurationUnitKind:
		u = base.unit(k)
		if u.is_supported():
			a.units[k] = convert_unit(u)

	for k in FieldKind:
		f = base.field(k)
		if not f.is_supported():
			continue
		a.fields[k] = ZonedField(
			f, zone,
			convert_unit(f.duration_unit()),
			convert_unit(f.range_unit()),
			convert_unit(f.leap_unit()),
		)

	def construct(year, month, day, millis):
		local = base.date_instant(year, month, day, millis)
		offset = zone.offset_from_local(local)
		utc = core.subtract(local, offset)
		if zone.offset(utc) != offset:
			raise core.IllegalInstant(local, zone)
		return utc

	return a, construct
