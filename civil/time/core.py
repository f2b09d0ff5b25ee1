"""
# Exceptions and checked instant arithmetic.

# Instants and durations are plain &int milliseconds restricted to the signed
# 64-bit range. The functions here are used by every field and unit to detect
# results that leave that range instead of producing a value that cannot be
# represented by the other parts of the system.

# [ Elements ]

# /minimum/
	# The earliest representable instant.
# /maximum/
	# The latest representable instant.
"""

minimum = -(2**63)
maximum = (2**63) - 1

class IllegalArgument(ValueError):
	"""
	# A parameter was outside of the domain of the operation.
	"""

class IllegalFieldValue(IllegalArgument):
	"""
	# The value given to a field was outside of its bounds for the instant.

	# [ Properties ]
	# /kind/
		# The &.types.FieldKind of the field, when known.
	# /value/
		# The rejected value.
	# /lower/
		# The inclusive lower bound, when known.
	# /upper/
		# The inclusive upper bound, when known.
	"""

	def __init__(self, kind, value, lower=None, upper=None, message=None):
		self.kind = kind
		self.value = value
		self.lower = lower
		self.upper = upper
		self.message = message
		super().__init__(kind, value, lower, upper)

	def __str__(self):
		name = getattr(self.kind, 'name', self.kind)
		if self.message is not None:
			return "value %r for %s is not supported: %s" %(self.value, name, self.message)
		if self.lower is None:
			return "value %r for %s is not supported" %(self.value, name)
		return "value %r for %s must be in the range [%r,%r]" %(
			self.value, name, self.lower, self.upper
		)

class IllegalInstant(IllegalArgument):
	"""
	# A local date-time does not exist in the zone; it falls in the gap
	# created by an offset transition.
	"""

	def __init__(self, instant, zone=None):
		self.instant = instant
		self.zone = zone
		super().__init__(instant, zone)

	def __str__(self):
		zid = getattr(self.zone, 'id', None)
		if zid is None:
			return "illegal instant due to time zone offset transition: %d" %(self.instant,)
		return "illegal instant due to time zone offset transition (%s): %d" %(zid, self.instant)

class LimitExceeded(IllegalArgument):
	"""
	# An instant given to or produced by a limited chronology was outside of
	# its bounds.

	# [ Properties ]
	# /instant/
		# The rejected instant.
	# /limit/
		# The bound that was exceeded; the lower limit is inclusive and
		# the upper limit is exclusive.
	# /below/
		# Whether &instant was before the lower limit.
	# /description/
		# The role of the instant in the operation, `'resulting'` for results.
	"""

	def __init__(self, instant, limit, below, description=None):
		self.instant = instant
		self.limit = limit
		self.below = below
		self.description = description
		super().__init__(instant, limit, below)

	def __str__(self):
		subject = "instant" if self.description is None else self.description + " instant"
		if self.below:
			return "the %s %d is below the supported minimum of %d" %(subject, self.instant, self.limit)
		return "the %s %d is not before the supported maximum of %d" %(subject, self.instant, self.limit)

class UnknownZone(IllegalArgument):
	"""
	# No zone data exists for the requested identifier.
	"""

	def __init__(self, identifier):
		self.identifier = identifier
		super().__init__(identifier)

	def __str__(self):
		return "the zone identifier %r is not recognised" %(self.identifier,)

class UnsupportedOperation(Exception):
	"""
	# The field or unit has no meaning in the chronology that produced it.
	"""

	def __init__(self, kind, operation=None):
		self.kind = kind
		self.operation = operation
		super().__init__(kind, operation)

	def __str__(self):
		name = getattr(self.kind, 'name', self.kind)
		if self.operation is None:
			return "%s is not supported" %(name,)
		return "%s is not supported: %s" %(name, self.operation)

class ArithmeticOverflow(OverflowError):
	"""
	# Instant or field arithmetic left the signed 64-bit millisecond range.
	"""

class ZoneDataError(Exception):
	"""
	# The data backing a zone was corrupt or could not be interpreted.

	# [ Properties ]
	# /identifier/
		# The zone identifier whose data was being read.
	"""

	def __init__(self, identifier, reason):
		self.identifier = identifier
		self.reason = reason
		super().__init__(identifier, reason)

	def __str__(self):
		return "zone data for %r could not be read: %s" %(self.identifier, self.reason)

def check(value, minimum=minimum, maximum=maximum):
	"""
	# Identify &value as representable or raise &ArithmeticOverflow.
	"""
	if value < minimum or value > maximum:
		raise ArithmeticOverflow("value exceeds the 64-bit range: %d" %(value,))
	return value

def add(x, y, minimum=minimum, maximum=maximum):
	r = x + y
	if r < minimum or r > maximum:
		raise ArithmeticOverflow("the addition overflows: %d + %d" %(x, y))
	return r

def subtract(x, y, minimum=minimum, maximum=maximum):
	r = x - y
	if r < minimum or r > maximum:
		raise ArithmeticOverflow("the subtraction overflows: %d - %d" %(x, y))
	return r

def multiply(x, y, minimum=minimum, maximum=maximum):
	r = x * y
	if r < minimum or r > maximum:
		raise ArithmeticOverflow("the multiplication overflows: %d * %d" %(x, y))
	return r

def negate(x):
	if x == minimum:
		raise ArithmeticOverflow("the negation overflows: %d" %(x,))
	return -x

def quotient(x, y):
	"""
	# Divide &x by &y truncating toward zero.
	"""
	q = abs(x) // abs(y)
	if (x < 0) != (y < 0):
		return -q
	return q

def verify(kind, value, lower, upper):
	"""
	# Raise &IllegalFieldValue if &value is not within `[lower, upper]`.
	"""
	if value < lower or value > upper:
		raise IllegalFieldValue(kind, value, lower, upper)
	return value

def wrap(value, lower, upper):
	"""
	# Wrap &value into the inclusive range `[lower, upper]`.

	#!python
		assert wrap(13, 1, 12) == 1
		assert wrap(0, 1, 12) == 12
	"""
	if lower >= upper:
		raise IllegalArgument("minimum must be less than the maximum")
	return ((value - lower) % (upper - lower + 1)) + lower
