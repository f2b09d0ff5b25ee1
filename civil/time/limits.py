"""
# Fields and units of a chronology restricted to a range of instants.

# Every instant given to a limited field or unit, and every instant that an
# operation produces, is compared with the bounds; instants outside of them
# raise &core.LimitExceeded. The lower bound is inclusive and the upper bound
# exclusive.

# Limits are applied to UTC chronologies. A zoned chronology built on a limited
# base compares its local instants with the bounds, so the limits act as local
# date-times in every zone.
"""
from . import core
from . import libunit
from . import libfield
from .types import FieldKind, DurationUnitKind

class Limits(object):
	"""
	# The bounds of a limited chronology; either may be &None.
	"""
	__slots__ = ('lower', 'upper')

	def __init__(self, lower=None, upper=None):
		if lower is not None and upper is not None and lower >= upper:
			raise core.IllegalArgument("the lower limit must be before the upper limit")
		self.lower = lower
		self.upper = upper

	def __repr__(self):
		return "<%s [%r, %r)>" %(self.__class__.__name__, self.lower, self.upper)

	def check(self, instant, description=None):
		if self.lower is not None and instant < self.lower:
			raise core.LimitExceeded(instant, self.lower, True, description)
		if self.upper is not None and instant >= self.upper:
			raise core.LimitExceeded(instant, self.upper, False, description)
		return instant

class LimitedUnit(libunit.Unit):
	__slots__ = ('unit', 'limits')

	def __init__(self, unit, limits):
		super().__init__(unit.kind)
		self.unit = unit
		self.limits = limits

	def is_precise(self):
		return self.unit.is_precise()

	def unit_millis(self, instant=None):
		if instant is None:
			return self.unit.unit_millis()
		return self.unit.unit_millis(self.limits.check(instant))

	def add(self, instant, value):
		check = self.limits.check
		return check(self.unit.add(check(instant), value), 'resulting')

	def difference(self, start, stop):
		check = self.limits.check
		return self.unit.difference(check(start, 'start'), check(stop, 'stop'))

	def millis(self, value, instant=None):
		if instant is not None:
			self.limits.check(instant)
		return self.unit.millis(value, instant)

	def value(self, duration, instant=None):
		if instant is not None:
			self.limits.check(instant)
		return self.unit.value(duration, instant)

class LimitedField(libfield.Delegated):
	"""
	# Field rejecting instants outside of &limits.
	"""
	__slots__ = ('limits', 'leap')

	def __init__(self, field, limits, unit=None, range=None, leap=None):
		super().__init__(field, unit=unit, range=range)
		self.limits = limits
		self.leap = leap

	def leap_unit(self):
		return self.leap

	def result(self, method, instant, *args):
		check = self.limits.check
		return check(method(check(instant), *args), 'resulting')

	def get(self, instant):
		return self.field.get(self.limits.check(instant))

	def set(self, instant, value):
		return self.result(self.field.set, instant, value)

	def add(self, instant, value):
		return self.result(self.field.add, instant, value)

	def add_wrap_field(self, instant, value):
		return self.result(self.field.add_wrap_field, instant, value)

	def difference(self, start, stop):
		check = self.limits.check
		return self.field.difference(check(start, 'start'), check(stop, 'stop'))

	def is_leap(self, instant):
		return self.field.is_leap(self.limits.check(instant))

	def leap_amount(self, instant):
		return self.field.leap_amount(self.limits.check(instant))

	def minimum(self, instant=None):
		if instant is None:
			return self.field.minimum()
		return self.field.minimum(self.limits.check(instant))

	def maximum(self, instant=None):
		if instant is None:
			return self.field.maximum()
		return self.field.maximum(self.limits.check(instant))

	def round_floor(self, instant):
		return self.result(self.field.round_floor, instant)

	def round_ceiling(self, instant):
		return self.result(self.field.round_ceiling, instant)

	def round_half_floor(self, instant):
		return self.result(self.field.round_half_floor, instant)

	def round_half_ceiling(self, instant):
		return self.result(self.field.round_half_ceiling, instant)

	def round_half_even(self, instant):
		return self.result(self.field.round_half_even, instant)

	def remainder(self, instant):
		return self.field.remainder(self.limits.check(instant))

def assemble(a, construct, limits):
	"""
	# Restrict the fields and units of the &.assembly.Assembly, &a, and the
	# instants produced by &construct to &limits.

	# [ Returns ]
	# The updated &a and the limited constructor.
	"""
	units = {}

	def convert_unit(unit):
		if unit is None or not unit.is_supported():
			return unit
		u = units.get(id(unit))
		if u is None:
			u = units[id(unit)] = (unit, LimitedUnit(unit, limits))
		return u[1]

	for k in DurationUnitKind:
		u = a.units.get(k)
		if u is not None and u.is_supported():
			a.units[k] = convert_unit(u)

	for k in FieldKind:
		f = a.fields.get(k)
		if f is None or not f.is_supported():
			continue
		a.fields[k] = LimitedField(
			f, limits,
			convert_unit(f.duration_unit()),
			convert_unit(f.range_unit()),
			convert_unit(f.leap_unit()),
		)

	def limited(year, month, day, millis):
		return limits.check(construct(year, month, day, millis), 'resulting')

	return a, limited
