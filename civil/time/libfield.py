"""
# Calendar field implementations.

# Fields are produced by a chronology for a &.types.FieldKind. The classes
# here are the behaviors that are independent of any particular calendar:
# fields of a fixed unit, fields derived from another field by division,
# remainder, or offset, and the unsupported field.

# Fields operate on instants, &int milliseconds. Calendar dependent fields
# are defined in &.libcalendar.
"""
from . import core
from . import libunit

class Field(object):
	"""
	# Base class of calendar fields.

	# Provides the operations that are derived from &get, &set, and &round_floor.
	"""
	__slots__ = ('kind',)

	def __init__(self, kind):
		self.kind = kind

	def __repr__(self):
		return "<%s %s>" %(self.__class__.__name__, self.kind.name)

	@property
	def name(self):
		return self.kind.name

	def is_supported(self):
		return True

	def duration_unit(self):
		"""
		# The unit counted by the field.
		"""
		raise NotImplementedError("fields must identify their unit")

	def range_unit(self):
		"""
		# The unit the field is a component of, or &None when unbounded.
		"""
		raise NotImplementedError("fields must identify their range")

	def leap_unit(self):
		"""
		# The unit of the leap amount, or &None if the field is never leap.
		"""
		return None

	def get(self, instant):
		raise NotImplementedError("fields must define get")

	def set(self, instant, value):
		"""
		# Replace the field's value in &instant.

		# [ Exceptions ]
		# /&core.IllegalFieldValue/
			# &value was outside of the bounds of the field at &instant.
		"""
		raise NotImplementedError("fields must define set")

	def add(self, instant, value):
		"""
		# Add &value units to &instant carrying into larger fields.
		"""
		return self.duration_unit().add(instant, value)

	def add_wrap_field(self, instant, value):
		"""
		# Add &value to the field wrapping within its bounds; larger fields
		# are left unchanged.
		"""
		current = self.get(instant)
		wrapped = core.wrap(current + value, self.minimum(instant), self.maximum(instant))
		return self.set(instant, wrapped)

	def difference(self, start, stop):
		"""
		# Count the whole units of the field from &start to &stop.
		"""
		return self.duration_unit().difference(start, stop)

	def is_leap(self, instant):
		return False

	def leap_amount(self, instant):
		return 0

	def minimum(self, instant=None):
		"""
		# The lowest value the field takes, at &instant when given.
		"""
		raise NotImplementedError("fields must define their bounds")

	def maximum(self, instant=None):
		"""
		# The highest value the field takes, at &instant when given.
		"""
		raise NotImplementedError("fields must define their bounds")

	def round_floor(self, instant):
		"""
		# The greatest instant less than or equal to &instant where all smaller fields are zero.
		"""
		raise NotImplementedError("fields must define round_floor")

	def round_ceiling(self, instant):
		floor = self.round_floor(instant)
		if floor != instant:
			instant = self.add(floor, 1)
		return instant

	def round_half_floor(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if instant - floor <= ceiling - instant:
			return floor
		return ceiling

	def round_half_ceiling(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if ceiling - instant <= instant - floor:
			return ceiling
		return floor

	def round_half_even(self, instant):
		"""
		# Round to the nearest boundary. On ties, select the boundary
		# where the field's value is even.
		"""
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		below = instant - floor
		above = ceiling - instant
		if below < above:
			return floor
		elif above < below:
			return ceiling
		if self.get(ceiling) & 1 == 0:
			return ceiling
		return floor

	def remainder(self, instant):
		return instant - self.round_floor(instant)

class PreciseDuration(Field):
	"""
	# Field counting a precise unit; its range may be imprecise.
	"""
	__slots__ = ('unit', 'size')

	def __init__(self, kind, unit):
		if not unit.is_precise():
			raise core.IllegalArgument("unit must be precise: " + unit.kind.name)
		super().__init__(kind)
		self.unit = unit
		self.size = unit.unit_millis()

	def duration_unit(self):
		return self.unit

	def set(self, instant, value):
		core.verify(self.kind, value, self.minimum(instant), self.maximum(instant))
		return core.add(instant, core.multiply(value - self.get(instant), self.size))

	def round_floor(self, instant):
		return core.check((instant // self.size) * self.size)

	def round_ceiling(self, instant):
		return core.check(-((-instant) // self.size) * self.size)

	def remainder(self, instant):
		return instant % self.size

	def minimum(self, instant=None):
		return 0

class Precise(PreciseDuration):
	"""
	# Field whose unit and range are both precise; hourOfDay counts hours in a day.
	"""
	__slots__ = ('range', 'modulus')

	def __init__(self, kind, unit, range):
		super().__init__(kind, unit)
		if not range.is_precise():
			raise core.IllegalArgument("range must be precise: " + range.kind.name)
		self.range = range
		self.modulus = range.unit_millis() // self.size
		if self.modulus < 2:
			raise core.IllegalArgument("range must exceed the unit")

	def range_unit(self):
		return self.range

	def get(self, instant):
		return (instant // self.size) % self.modulus

	def add_wrap_field(self, instant, value):
		current = self.get(instant)
		wrapped = (current + value) % self.modulus
		return core.add(instant, (wrapped - current) * self.size)

	def set(self, instant, value):
		core.verify(self.kind, value, 0, self.modulus - 1)
		return core.add(instant, (value - self.get(instant)) * self.size)

	def maximum(self, instant=None):
		return self.modulus - 1

class Imprecise(Field):
	"""
	# Field counting an imprecise unit. The unit is linked to the field so that
	# unit arithmetic is performed by the field's &add and &difference.
	"""
	__slots__ = ('unit', 'average')

	def __init__(self, kind, average):
		super().__init__(kind)
		self.average = average
		self.unit = libunit.Linked(kind.unit, self, average)

	def duration_unit(self):
		return self.unit

	def add(self, instant, value):
		raise NotImplementedError("imprecise fields must define add")

	def estimate(self, start, stop):
		"""
		# Approximate number of units from &start to &stop where `start <= stop`.
		"""
		return (stop - start) // self.average

	def difference(self, start, stop):
		if stop < start:
			return -self.difference(stop, start)

		n = self.estimate(start, stop)
		if self.add(start, n) < stop:
			n += 1
			while self.add(start, n) <= stop:
				n += 1
			n -= 1
		else:
			while self.add(start, n) > stop:
				n -= 1
		return n

class Delegated(Field):
	"""
	# Field forwarding its operations to another field.

	# Used directly to rename a field or to replace its units, and as the base
	# class of the decorating fields.
	"""
	__slots__ = ('field', 'unit', 'range')

	def __init__(self, field, kind=None, unit=None, range=None):
		super().__init__(kind or field.kind)
		self.field = field
		self.unit = unit
		self.range = range

	def is_supported(self):
		return self.field.is_supported()

	def duration_unit(self):
		if self.unit is not None:
			return self.unit
		return self.field.duration_unit()

	def range_unit(self):
		if self.range is not None:
			return self.range
		return self.field.range_unit()

	def leap_unit(self):
		return self.field.leap_unit()

	def get(self, instant):
		return self.field.get(instant)

	def set(self, instant, value):
		return self.field.set(instant, value)

	def add(self, instant, value):
		return self.field.add(instant, value)

	def add_wrap_field(self, instant, value):
		return self.field.add_wrap_field(instant, value)

	def difference(self, start, stop):
		return self.field.difference(start, stop)

	def is_leap(self, instant):
		return self.field.is_leap(instant)

	def leap_amount(self, instant):
		return self.field.leap_amount(instant)

	def minimum(self, instant=None):
		return self.field.minimum(instant)

	def maximum(self, instant=None):
		return self.field.maximum(instant)

	def round_floor(self, instant):
		return self.field.round_floor(instant)

	def round_ceiling(self, instant):
		return self.field.round_ceiling(instant)

	def round_half_floor(self, instant):
		return self.field.round_half_floor(instant)

	def round_half_ceiling(self, instant):
		return self.field.round_half_ceiling(instant)

	def round_half_even(self, instant):
		return self.field.round_half_even(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class Offset(Delegated):
	"""
	# Field whose values are those of another field shifted by a constant.
	"""
	__slots__ = ('offset', 'lower', 'upper')

	def __init__(self, field, offset, kind=None, lower=None, upper=None):
		if offset == 0:
			raise core.IllegalArgument("offset must not be zero")
		super().__init__(field, kind=kind)
		self.offset = offset
		self.lower = field.minimum() + offset if lower is None else lower
		self.upper = field.maximum() + offset if upper is None else upper

	def get(self, instant):
		return self.field.get(instant) + self.offset

	def set(self, instant, value):
		core.verify(self.kind, value, self.lower, self.upper)
		return self.field.set(instant, value - self.offset)

	def add(self, instant, value):
		instant = self.field.add(instant, value)
		core.verify(self.kind, self.get(instant), self.lower, self.upper)
		return instant

	def add_wrap_field(self, instant, value):
		return self.set(instant, core.wrap(self.get(instant) + value, self.lower, self.upper))

	def minimum(self, instant=None):
		return self.lower

	def maximum(self, instant=None):
		return self.upper

class Divided(Field):
	"""
	# Field whose values are those of another field divided by a constant;
	# centuryOfEra is yearOfEra divided by one hundred.
	"""
	__slots__ = ('field', 'divisor', 'unit', 'range', 'lower', 'upper')

	def __init__(self, field, kind, divisor, range=None):
		if divisor < 2:
			raise core.IllegalArgument("divisor must be greater than one")
		super().__init__(kind)
		self.field = field
		self.divisor = divisor
		self.unit = libunit.Scaled(field.duration_unit(), kind.unit, divisor)
		self.range = range
		self.lower = field.minimum() // divisor
		self.upper = field.maximum() // divisor

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		if self.range is not None:
			return self.range
		return self.field.range_unit()

	def get(self, instant):
		return self.field.get(instant) // self.divisor

	def set(self, instant, value):
		core.verify(self.kind, value, self.lower, self.upper)
		r = self.field.get(instant) % self.divisor
		return self.field.set(instant, (value * self.divisor) + r)

	def add(self, instant, value):
		return self.field.add(instant, core.multiply(value, self.divisor))

	def add_wrap_field(self, instant, value):
		return self.set(instant, core.wrap(self.get(instant) + value, self.lower, self.upper))

	def difference(self, start, stop):
		return core.quotient(self.field.difference(start, stop), self.divisor)

	def minimum(self, instant=None):
		return self.lower

	def maximum(self, instant=None):
		return self.upper

	def round_floor(self, instant):
		f = self.field
		value = self.get(instant) * self.divisor
		floor = f.round_floor(f.set(instant, value))
		if floor > instant:
			# Values descend as time advances (years before the common era);
			# the group begins at its highest value.
			value = min(value + self.divisor - 1, f.maximum(instant))
			floor = f.round_floor(f.set(instant, value))
		return floor

class Remainder(Delegated):
	"""
	# Field whose values are the remainder of another field divided by a
	# constant; yearOfCentury is yearOfEra modulo one hundred.
	"""
	__slots__ = ('divisor',)

	def __init__(self, field, divisor, kind, unit=None, range=None):
		if divisor < 2:
			raise core.IllegalArgument("divisor must be greater than one")
		super().__init__(field, kind=kind, unit=unit, range=range)
		self.divisor = divisor

	@classmethod
	def from_divided(Class, divided, kind):
		return Class(divided.field, divided.divisor, kind, range=divided.duration_unit())

	def get(self, instant):
		return self.field.get(instant) % self.divisor

	def set(self, instant, value):
		core.verify(self.kind, value, 0, self.divisor - 1)
		quotient = self.field.get(instant) // self.divisor
		return self.field.set(instant, (quotient * self.divisor) + value)

	def add_wrap_field(self, instant, value):
		return self.set(instant, core.wrap(self.get(instant) + value, 0, self.divisor - 1))

	def is_leap(self, instant):
		return False

	def leap_amount(self, instant):
		return 0

	def minimum(self, instant=None):
		return 0

	def maximum(self, instant=None):
		return self.divisor - 1

class ZeroIsMaximum(Delegated):
	"""
	# Field presenting the zero of another field as its maximum.
	# clockhourOfDay is hourOfDay counting from 1 to 24.
	"""
	__slots__ = ()

	def get(self, instant):
		value = self.field.get(instant)
		if value == 0:
			value = self.maximum(instant)
		return value

	def set(self, instant, value):
		upper = self.maximum(instant)
		core.verify(self.kind, value, 1, upper)
		if value == upper:
			value = 0
		return self.field.set(instant, value)

	def minimum(self, instant=None):
		return 1

	def maximum(self, instant=None):
		return self.field.maximum(instant) + 1

class Skip(Delegated):
	"""
	# Field skipping a value of another field; calendars without a year zero
	# present the astronomical year zero as `-1`.
	"""
	__slots__ = ('skip', 'lower')

	def __init__(self, field, skip=0):
		super().__init__(field)
		self.skip = skip
		lower = field.minimum()
		if lower < skip:
			self.lower = lower - 1
		elif lower == skip:
			self.lower = skip + 1
		else:
			self.lower = lower

	def get(self, instant):
		value = self.field.get(instant)
		if value <= self.skip:
			value -= 1
		return value

	def set(self, instant, value):
		core.verify(self.kind, value, self.lower, self.maximum())
		if value <= self.skip:
			if value == self.skip:
				raise core.IllegalFieldValue(self.kind, value)
			value += 1
		return self.field.set(instant, value)

	def minimum(self, instant=None):
		return self.lower

class SkipUndo(Delegated):
	"""
	# Field restoring a value skipped by another field; used by calendars that
	# count years from an offset of a calendar without a year zero.
	"""
	__slots__ = ('skip', 'lower')

	def __init__(self, field, skip=0):
		super().__init__(field)
		self.skip = skip
		lower = field.minimum()
		if lower < skip:
			self.lower = lower + 1
		elif lower == skip + 1:
			self.lower = skip
		else:
			self.lower = lower

	def get(self, instant):
		value = self.field.get(instant)
		if value < self.skip:
			value += 1
		return value

	def set(self, instant, value):
		core.verify(self.kind, value, self.lower, self.maximum())
		if value <= self.skip:
			value -= 1
		return self.field.set(instant, value)

	def add_wrap_field(self, instant, value):
		return self.set(instant, core.wrap(self.get(instant) + value, self.lower, self.maximum()))

	def minimum(self, instant=None):
		return self.lower

class Unsupported(Field):
	"""
	# Field with no meaning in the chronology that produced it.

	# Every operation raises &core.UnsupportedOperation.
	"""
	__slots__ = ('unit',)

	def __init__(self, kind, unit):
		super().__init__(kind)
		self.unit = unit

	def is_supported(self):
		return False

	def duration_unit(self):
		return self.unit

	def range_unit(self):
		return None

	def _fail(self, operation):
		raise core.UnsupportedOperation(self.kind, operation)

	def get(self, instant):
		self._fail('get')

	def set(self, instant, value):
		self._fail('set')

	def add(self, instant, value):
		self._fail('add')

	def add_wrap_field(self, instant, value):
		self._fail('add_wrap_field')

	def difference(self, start, stop):
		self._fail('difference')

	def is_leap(self, instant):
		self._fail('is_leap')

	def leap_amount(self, instant):
		self._fail('leap_amount')

	def minimum(self, instant=None):
		self._fail('minimum')

	def maximum(self, instant=None):
		self._fail('maximum')

	def round_floor(self, instant):
		self._fail('round_floor')

	def round_ceiling(self, instant):
		self._fail('round_ceiling')

	def round_half_floor(self, instant):
		self._fail('round_half_floor')

	def round_half_ceiling(self, instant):
		self._fail('round_half_ceiling')

	def round_half_even(self, instant):
		self._fail('round_half_even')

	def remainder(self, instant):
		self._fail('remainder')
