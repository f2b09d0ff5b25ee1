"""
# Duration unit implementations.

# A unit is produced by a chronology for a &.types.DurationUnitKind.
# Precise units have a constant length in milliseconds and never consult
# a calendar. Imprecise units are linked to the field that counts them
# and defer to its calendar arithmetic.

# Differences are directed: `difference(start, stop)` is the number of whole
# units from &start to &stop, negative when &stop precedes &start.
"""
from . import core
from .types import DurationUnitKind

class Unit(object):
	"""
	# Base class of duration units.
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

	def is_precise(self):
		raise NotImplementedError("subclasses must identify their precision")

	def unit_millis(self, instant=None):
		"""
		# The length of one unit in milliseconds. For imprecise units, the
		# length of the unit starting at &instant or an average when &instant is &None.
		"""
		raise NotImplementedError("subclasses must define unit_millis")

	def add(self, instant, value):
		"""
		# Add &value units to &instant.
		"""
		raise NotImplementedError("subclasses must define add")

	def difference(self, start, stop):
		"""
		# Count the whole units from &start to &stop.
		"""
		raise NotImplementedError("subclasses must define difference")

	def millis(self, value, instant=None):
		"""
		# Convert &value units, starting at &instant, into milliseconds.
		"""
		raise NotImplementedError("subclasses must define millis")

	def value(self, duration, instant=None):
		"""
		# Convert the milliseconds &duration, starting at &instant, into
		# whole units truncated toward zero.
		"""
		raise NotImplementedError("subclasses must define value")

class Precise(Unit):
	"""
	# Unit of a fixed number of milliseconds.

	# [ Properties ]
	# /size/
		# The length of the unit in milliseconds.
	"""
	__slots__ = ('size',)

	def __init__(self, kind, size):
		if size < 1:
			raise core.IllegalArgument("unit size must be at least one millisecond")
		super().__init__(kind)
		self.size = size

	def __repr__(self):
		return "<%s %s: %d>" %(self.__class__.__name__, self.kind.name, self.size)

	def is_precise(self):
		return True

	def unit_millis(self, instant=None):
		return self.size

	def add(self, instant, value, add=core.add, multiply=core.multiply):
		return add(instant, multiply(value, self.size))

	def difference(self, start, stop, quotient=core.quotient, subtract=core.subtract):
		return quotient(subtract(stop, start), self.size)

	def millis(self, value, instant=None):
		return core.multiply(value, self.size)

	def value(self, duration, instant=None):
		return core.quotient(duration, self.size)

class Millis(Precise):
	"""
	# The unit of instants.
	"""
	__slots__ = ()

	def __init__(self):
		super().__init__(DurationUnitKind.millis, 1)

	def add(self, instant, value):
		return core.add(instant, value)

	def difference(self, start, stop):
		return core.subtract(stop, start)

#: The millisecond unit is shared by all chronologies.
millis = Millis()

class Scaled(Unit):
	"""
	# Unit that is a fixed multiple of another unit. Centuries are scaled years.
	"""
	__slots__ = ('unit', 'scalar')

	def __init__(self, unit, kind, scalar):
		super().__init__(kind)
		self.unit = unit
		self.scalar = scalar

	def is_precise(self):
		return self.unit.is_precise()

	def unit_millis(self, instant=None):
		if instant is None:
			return core.multiply(self.unit.unit_millis(), self.scalar)
		return self.millis(1, instant)

	def add(self, instant, value):
		return self.unit.add(instant, core.multiply(value, self.scalar))

	def difference(self, start, stop):
		return core.quotient(self.unit.difference(start, stop), self.scalar)

	def millis(self, value, instant=None):
		return self.unit.millis(core.multiply(value, self.scalar), instant)

	def value(self, duration, instant=None):
		return core.quotient(self.unit.value(duration, instant), self.scalar)

class Linked(Unit):
	"""
	# Imprecise unit counted by a calendar field; months are counted by monthOfYear.

	# [ Properties ]
	# /field/
		# The field performing the unit's arithmetic.
	# /average/
		# The average length of the unit in milliseconds.
	"""
	__slots__ = ('field', 'average')

	def __init__(self, kind, field, average):
		super().__init__(kind)
		self.field = field
		self.average = average

	def is_precise(self):
		return False

	def unit_millis(self, instant=None):
		if instant is None:
			return self.average
		return core.subtract(self.field.add(instant, 1), instant)

	def add(self, instant, value):
		return self.field.add(instant, value)

	def difference(self, start, stop):
		return self.field.difference(start, stop)

	def millis(self, value, instant=None):
		if instant is None:
			return core.multiply(value, self.average)
		return core.subtract(self.field.add(instant, value), instant)

	def value(self, duration, instant=None):
		if instant is None:
			return core.quotient(duration, self.average)
		return self.field.difference(instant, core.add(instant, duration))

class Unsupported(Unit):
	"""
	# Unit with no meaning in the chronology; every operation raises
	# &core.UnsupportedOperation.
	"""
	__slots__ = ()

	def is_supported(self):
		return False

	def is_precise(self):
		return True

	def _fail(self, operation):
		raise core.UnsupportedOperation(self.kind, operation)

	def unit_millis(self, instant=None):
		self._fail('unit_millis')

	def add(self, instant, value):
		self._fail('add')

	def difference(self, start, stop):
		self._fail('difference')

	def millis(self, value, instant=None):
		self._fail('millis')

	def value(self, duration, instant=None):
		self._fail('value')
