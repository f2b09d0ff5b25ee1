"""
# Protocols of the units, fields, zones, and chronologies.

# Primarily, this module exists to document the interfaces implemented by
# &.libunit, &.libfield, &.libzone, and &.chronology.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Unit(typing.Protocol):
	"""
	# A duration unit of a chronology.
	"""

	@abstractmethod
	def is_supported(self) -> bool:
		"""
		# Whether the unit has meaning in the chronology that produced it.
		"""

	@abstractmethod
	def is_precise(self) -> bool:
		"""
		# Whether every unit has the same length in milliseconds.
		"""

	@abstractmethod
	def unit_millis(self, instant=None) -> int:
		"""
		# The length of a unit; at &instant when given, otherwise the average.
		"""

	@abstractmethod
	def add(self, instant:int, value:int) -> int:
		"""
		# Add &value units to &instant.
		"""

	@abstractmethod
	def difference(self, start:int, stop:int) -> int:
		"""
		# The whole units from &start to &stop; negative when &stop precedes &start.
		"""

@typing.runtime_checkable
class Field(typing.Protocol):
	"""
	# A calendar field of a chronology.
	"""

	@abstractmethod
	def get(self, instant:int) -> int:
		"""
		# The value of the field at &instant.
		"""

	@abstractmethod
	def set(self, instant:int, value:int) -> int:
		"""
		# The instant with the field's value replaced by &value.
		"""

	@abstractmethod
	def add(self, instant:int, value:int) -> int:
		"""
		# Add &value units of the field carrying into larger fields.
		"""

	@abstractmethod
	def add_wrap_field(self, instant:int, value:int) -> int:
		"""
		# Add &value to the field wrapping within its bounds.
		"""

	@abstractmethod
	def difference(self, start:int, stop:int) -> int:
		"""
		# The whole units of the field from &start to &stop.
		"""

	@abstractmethod
	def round_floor(self, instant:int) -> int:
		"""
		# Truncate &instant to the start of the field's current value.
		"""

	@abstractmethod
	def round_ceiling(self, instant:int) -> int:
		"""
		# The start of the field's next value unless &instant is already a boundary.
		"""

	@abstractmethod
	def minimum(self, instant=None) -> int:
		pass

	@abstractmethod
	def maximum(self, instant=None) -> int:
		pass

@typing.runtime_checkable
class Zone(typing.Protocol):
	"""
	# A policy of offsets from UTC.
	"""

	@abstractmethod
	def offset(self, instant:int) -> int:
		"""
		# The wall offset in milliseconds at &instant.
		"""

	@abstractmethod
	def standard_offset(self, instant:int) -> int:
		"""
		# The offset at &instant without daylight saving time.
		"""

	@abstractmethod
	def name_key(self, instant:int) -> str:
		"""
		# The abbreviation of the offset at &instant.
		"""

	@abstractmethod
	def is_fixed(self) -> bool:
		pass

	@abstractmethod
	def next_transition(self, instant:int) -> int:
		"""
		# The first transition after &instant, or &instant when there is none.
		"""

	@abstractmethod
	def previous_transition(self, instant:int) -> int:
		"""
		# The last transition before &instant, or &instant when there is none.
		"""

@typing.runtime_checkable
class Chronology(typing.Protocol):
	"""
	# A calendar system bound to a zone.
	"""

	@abstractmethod
	def field(self, kind) -> Field:
		pass

	@abstractmethod
	def unit(self, kind) -> Unit:
		pass

	@abstractmethod
	def instant(self, year, month=1, day=1, hour=0, minute=0, second=0, millisecond=0) -> int:
		"""
		# The instant of the date-time in the chronology's zone.
		"""

	@abstractmethod
	def with_zone(self, zone):
		pass

	@abstractmethod
	def with_utc(self):
		pass
