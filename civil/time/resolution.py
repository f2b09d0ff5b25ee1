"""
# Strict and lenient interpretation of the values given to &set.

# A strict field rejects any value outside of the bounds of the field at the
# instant being changed. A lenient field accepts any value and carries the
# excess into the larger fields, so that setting the thirty-second day of
# January produces the first of February.

# [ Elements ]
# /modes/
	# The names accepted by the `resolution` parameter of a chronology.
"""
from . import core
from . import libfield
from .types import FieldKind

class Strict(libfield.Delegated):
	__slots__ = ()

	def set(self, instant, value):
		core.verify(self.kind, value, self.field.minimum(instant), self.field.maximum(instant))
		return self.field.set(instant, value)

class Lenient(libfield.Delegated):
	__slots__ = ()

	def set(self, instant, value):
		difference = core.subtract(value, self.field.get(instant))
		return self.field.add(instant, difference)

modes = {
	'strict': Strict,
	'lenient': Lenient,
}

def apply(a, mode):
	"""
	# Replace the supported fields of the &.assembly.Assembly, &a, with the
	# fields interpreting values according to &mode.
	"""
	Class = modes[mode]
	for k in FieldKind:
		f = a.fields.get(k)
		if f is not None and f.is_supported():
			a.fields[k] = Class(f)
	return a
