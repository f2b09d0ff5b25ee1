"""
# Time zones and their transition engine.

# A &Zone answers the offset from UTC, in milliseconds, for any instant.
# &FixedZone instances have a constant &Offset. &RuledZone instances select
# the &Offset of an instant from a &TransitionTable loaded from TZif data and,
# after its last transition, from the recurring POSIX rule of the data's footer.

# The conversions between UTC and local instants are shared by all zones and
# are defined in terms of &Zone.offset, &Zone.next_transition, and
# &Zone.previous_transition.

# [ Elements ]
# /fixed_pattern/
	# The accepted spellings of fixed offset identifiers: `+HH`, `+HH:MM`, and `-HH:MM`.
"""
import re
import bisect
import functools

from . import core
from . import earth
from . import posix

fixed_pattern = re.compile(r'^([+-])(\d{2})(?::?(\d{2}))?$')
utc_identifiers = frozenset(['UTC', 'Z'])

class Offset(tuple):
	"""
	# An offset from UTC: `(magnitude, standard, abbreviation)`.

	# The &magnitude is the wall offset in milliseconds east of Greenwich and
	# &standard is the same offset without daylight saving time.
	"""
	__slots__ = ()

	@property
	def magnitude(self):
		return self[0]

	@property
	def standard(self):
		return self[1]

	@property
	def abbreviation(self):
		return self[2]

	@property
	def savings(self):
		"""
		# Milliseconds of daylight saving time included in the &magnitude.
		"""
		return self[0] - self[1]

	@property
	def is_dst(self):
		return self[0] != self[1]

	def __str__(self):
		return '%s%s' %(self.abbreviation, format_offset(self.magnitude))

	def __repr__(self):
		return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

	def __int__(self):
		return self.magnitude

	@classmethod
	def from_tzinfo(Class, tzinfo, standard=None):
		"""
		# Construct an offset from a &.tzif.tzinfo tuple.
		"""
		magnitude = tzinfo.tz_offset * 1000
		if standard is None:
			standard = magnitude
		return Class((magnitude, standard, tzinfo.tz_abbrev.decode('ascii', 'replace')))

def format_offset(millis):
	"""
	# Format the offset, &millis, as `+HH:MM`, adding seconds and milliseconds when present.
	"""
	sign = '-' if millis < 0 else '+'
	h, m, s, ms = earth.time_of_day(abs(millis))
	r = '%s%02d:%02d' %(sign, h, m)
	if s or ms:
		r += ':%02d' %(s,)
		if ms:
			r += '.%03d' %(ms,)
	return r

def parse_fixed(identifier):
	"""
	# Parse a fixed offset identifier into milliseconds.

	# [ Exceptions ]
	# /&core.IllegalArgument/
		# The identifier did not match the accepted spellings.
	"""
	if identifier in utc_identifiers:
		return 0
	m = fixed_pattern.match(identifier)
	if m is None:
		raise core.IllegalArgument("malformed fixed offset zone identifier: %r" %(identifier,))

	sign, hours, minutes = m.groups()
	hours = int(hours)
	minutes = int(minutes or 0)
	if hours > 23 or minutes > 59:
		raise core.IllegalArgument("fixed offset out of range: %r" %(identifier,))

	millis = (hours * earth.millis_in_hour) + (minutes * earth.millis_in_minute)
	return -millis if sign == '-' else millis

def is_fixed_identifier(identifier):
	return identifier in utc_identifiers or fixed_pattern.match(identifier) is not None

class Zone(object):
	"""
	# Base class of zones.

	# [ Properties ]
	# /id/
		# The identifier of the zone; an IANA name, a fixed offset, or `UTC`.
	"""
	__slots__ = ('id', '__weakref__')

	def __init__(self, id):
		self.id = id

	def __repr__(self):
		return "<%s %s>" %(self.__class__.__name__, self.id)

	def __str__(self):
		return self.id

	def __eq__(self, ob):
		if self is ob:
			return True
		if not isinstance(ob, Zone):
			return NotImplemented
		return self.identity == ob.identity

	def __hash__(self):
		return hash(self.identity)

	@property
	def identity(self):
		return (self.__class__.__name__, self.id)

	def find(self, instant):
		"""
		# The &Offset in effect at &instant.
		"""
		raise NotImplementedError("subclasses must define find")

	def is_fixed(self):
		raise NotImplementedError("subclasses must define is_fixed")

	def offset(self, instant):
		"""
		# The wall offset in milliseconds at &instant.
		"""
		return self.find(instant)[0]

	def standard_offset(self, instant):
		"""
		# The offset at &instant without daylight saving time.
		"""
		return self.find(instant)[1]

	def name_key(self, instant):
		"""
		# The abbreviation of the offset at &instant.
		"""
		return self.find(instant)[2]

	def is_standard_offset(self, instant):
		o = self.find(instant)
		return o[0] == o[1]

	def next_transition(self, instant):
		"""
		# The first transition after &instant or &instant itself when there is none.
		"""
		raise NotImplementedError("subclasses must define next_transition")

	def previous_transition(self, instant):
		"""
		# The last transition before &instant or &instant itself when there is none.
		"""
		raise NotImplementedError("subclasses must define previous_transition")

	def _next(self, instant):
		# Transitions with the sentinel replaced by the maximum instant.
		n = self.next_transition(instant)
		if n == instant:
			return core.maximum
		return n

	def offset_from_local(self, local):
		"""
		# Identify the offset that applies to the local instant, &local.

		# Local times in an overlap resolve to the earlier offset; local times
		# in a gap resolve to the offset after the transition.
		"""
		offset_local = self.offset(local)
		adjusted = local - offset_local
		offset_adjusted = self.offset(adjusted)

		if offset_local != offset_adjusted:
			if offset_local - offset_adjusted < 0:
				# Not a gap when both offsets lead to the same next transition.
				if self._next(adjusted) != self._next(local - offset_adjusted):
					return offset_local
		elif offset_local >= 0:
			prev = self.previous_transition(adjusted)
			if prev < adjusted:
				offset_prev = self.offset(prev - 1)
				if adjusted - prev < offset_prev - offset_local:
					return offset_prev

		return offset_adjusted

	def convert_utc_to_local(self, instant):
		"""
		# The local instant of the UTC &instant.
		"""
		offset = self.offset(instant)
		local = instant + offset
		if (instant ^ local) < 0 and (instant ^ offset) >= 0:
			raise core.ArithmeticOverflow("adding the time zone offset overflows")
		return core.check(local)

	def convert_local_to_utc(self, local, strict=False, original=None):
		"""
		# The UTC instant of the local instant, &local.

		# [ Parameters ]
		# /strict/
			# Raise &core.IllegalInstant when &local is in a gap instead of
			# using the offset before the transition.
		# /original/
			# The UTC instant that &local was derived from. When its offset is
			# still valid for &local, it is used so that overlaps keep their
			# earlier or later selection.
		"""
		if original is not None:
			offset_original = self.offset(original)
			utc = local - offset_original
			if self.offset(utc) == offset_original:
				return core.check(utc)

		offset_local = self.offset(local)
		offset = self.offset(local - offset_local)

		if offset_local != offset:
			if strict or offset_local < 0:
				if self._next(local - offset_local) != self._next(local - offset):
					if strict:
						raise core.IllegalInstant(local, self)
					offset = offset_local

		utc = local - offset
		if (local ^ utc) < 0 and (local ^ offset) < 0:
			raise core.ArithmeticOverflow("subtracting the time zone offset overflows")
		return core.check(utc)

	def is_local_gap(self, local):
		"""
		# Whether the local instant, &local, does not exist in the zone.
		"""
		if self.is_fixed():
			return False
		try:
			self.convert_local_to_utc(local, True)
		except core.IllegalInstant:
			return True
		return False

	def adjust_offset(self, instant, later):
		"""
		# Select the earlier or &later instant that shares the local time of
		# &instant when &instant is inside an overlap.
		"""
		before = instant - (3 * earth.millis_in_hour)
		after = instant + (3 * earth.millis_in_hour)
		offset_before = self.offset(before)
		offset_after = self.offset(after)
		if offset_before <= offset_after:
			return instant

		diff = offset_before - offset_after
		transition = self.next_transition(before)
		overlap_start = transition - diff
		overlap_end = transition + diff
		if instant < overlap_start or instant >= overlap_end:
			return instant

		if instant - overlap_start >= diff:
			return instant if later else instant - diff
		else:
			return instant + diff if later else instant

	def millis_keep_local(self, zone, instant):
		"""
		# The instant in &zone with the same local time that &instant has in this zone.
		"""
		if zone == self:
			return instant
		local = self.convert_utc_to_local(instant)
		return zone.convert_local_to_utc(local, False, instant)

	def slice(self, start, stop):
		"""
		# Iterate over the `(instant, Offset)` pairs of the period from &start
		# to &stop. The first pair is &start and its offset; the following are
		# the transitions within the period.
		"""
		yield (start, self.find(start))
		t = start
		while True:
			n = self.next_transition(t)
			if n == t or n >= stop:
				break
			yield (n, self.find(n))
			t = n

class FixedZone(Zone):
	"""
	# A zone whose offset never changes.
	"""
	__slots__ = ('fixed',)

	def __init__(self, id, offset):
		super().__init__(id)
		self.fixed = offset

	@classmethod
	def from_offset(Class, millis, id=None):
		if id is None:
			id = 'UTC' if millis == 0 else format_offset(millis)
		return Class(id, Offset((millis, millis, id)))

	@property
	def identity(self):
		return ('fixed', self.id, self.fixed[0])

	def is_fixed(self):
		return True

	def find(self, instant):
		return self.fixed

	def offset(self, instant):
		return self.fixed[0]

	def next_transition(self, instant):
		return instant

	def previous_transition(self, instant):
		return instant

	def convert_utc_to_local(self, instant):
		return core.add(instant, self.fixed[0])

	def convert_local_to_utc(self, local, strict=False, original=None):
		return core.subtract(local, self.fixed[0])

	def offset_from_local(self, local):
		return self.fixed[0]

class TransitionTable(object):
	"""
	# The transitions of a ruled zone.

	# [ Properties ]
	# /instants/
		# Strictly increasing transition instants.
	# /offsets/
		# The &Offset that starts at the corresponding instant.
	# /initial/
		# The &Offset of instants before the first transition.
	# /rule/
		# The &.posix.Rule of instants after the last transition; &None when
		# the last offset is permanent.
	"""
	__slots__ = ('instants', 'offsets', 'initial', 'rule', 'standard', 'daylight')

	def __init__(self, instants, offsets, initial, rule=None):
		self.instants = tuple(instants)
		self.offsets = tuple(offsets)
		self.initial = initial
		if rule is not None and rule.is_fixed():
			rule = None
		self.rule = rule

		if rule is not None:
			abbr, std = rule.standard
			self.standard = Offset((std, std, abbr))
			abbr, dst = rule.daylight
			self.daylight = Offset((dst, std, abbr))
		else:
			self.standard = self.daylight = None

	def __len__(self):
		return len(self.instants)

	@property
	def last(self):
		if self.instants:
			return self.instants[-1]
		return None

	def find(self, instant, bisect=bisect.bisect_right):
		i = bisect(self.instants, instant) - 1
		if self.rule is not None and (i == len(self.instants) - 1) and (i < 0 or instant > self.instants[i]):
			return self.daylight if self.rule.is_daylight(instant) else self.standard
		if i < 0:
			return self.initial
		return self.offsets[i]

	def next_transition(self, instant, bisect=bisect.bisect_right):
		i = bisect(self.instants, instant)
		if i < len(self.instants):
			return self.instants[i]
		if self.rule is None:
			return instant

		n = self.rule.next_transition(instant)
		if n is None or n > core.maximum:
			return instant
		return n

	def previous_transition(self, instant, bisect=bisect.bisect_left):
		last = self.last
		if self.rule is not None and (last is None or instant > last):
			p = self.rule.previous_transition(instant)
			if p is not None and (last is None or p > last) and p >= core.minimum:
				return p

		i = bisect(self.instants, instant) - 1
		if i < 0:
			return instant
		return self.instants[i]

class RuledZone(Zone):
	"""
	# A zone whose offsets are selected from a &TransitionTable.
	"""
	__slots__ = ('table',)

	def __init__(self, id, table):
		super().__init__(id)
		self.table = table

	def __repr__(self):
		return '<%s: %s[%d]>' %(self.__class__.__name__, self.id, len(self.table))

	def is_fixed(self):
		return False

	def find(self, instant):
		return self.table.find(instant)

	def next_transition(self, instant):
		return self.table.next_transition(instant)

	def previous_transition(self, instant):
		return self.table.previous_transition(instant)

def standard_offsets(transitions):
	"""
	# Infer the standard offset, in seconds, of each `(time, tzinfo)` transition.

	# TZif data does not record the standard offset of daylight saving types.
	# The offset of the nearest preceding standard type is used, or the
	# following one when none precedes.
	"""
	r = [None] * len(transitions)
	std = None
	for i, (t, info) in enumerate(transitions):
		if not info.tz_isdst:
			std = info.tz_offset
		r[i] = std

	std = None
	for i in range(len(transitions) - 1, -1, -1):
		info = transitions[i][1]
		if not info.tz_isdst:
			std = info.tz_offset
		elif r[i] is None:
			r[i] = std

	for i, (t, info) in enumerate(transitions):
		if r[i] is None:
			# Only daylight saving types; assume one hour of savings.
			r[i] = info.tz_offset - earth.seconds_in_hour
	return r

def from_tzif_data(tzd, name):
	"""
	# Construct the &Zone described by the structured TZif data, &tzd.

	# [ Parameters ]
	# /tzd/
		# A &.tzif.tzdata instance.
	# /name/
		# The identifier of the zone.
	"""
	if not tzd.types:
		raise core.ZoneDataError(name, "no local time types")

	rule = None
	if tzd.footer:
		try:
			rule = posix.parse(tzd.footer)
		except core.IllegalArgument as err:
			raise core.ZoneDataError(name, "invalid footer: " + str(err))

	# Transitions in seconds that cannot be represented in milliseconds are dropped.
	lower = core.minimum // 1000
	upper = core.maximum // 1000
	transitions = [x for x in tzd.transitions if lower <= x[0] <= upper]
	standards = standard_offsets(transitions)

	cache = functools.lru_cache(maxsize=None)(Offset.from_tzinfo)
	instants = []
	offsets = []
	for (t, info), std in zip(transitions, standards):
		ms = t * 1000
		if instants and ms <= instants[-1]:
			raise core.ZoneDataError(name, "transition times are not strictly increasing")
		instants.append(ms)
		offsets.append(cache(info, std * 1000))

	first = tzd.types[0]
	if first.tz_isdst:
		initial = cache(first, standard_offsets([(0, first)])[0] * 1000)
	else:
		initial = cache(first)

	if not instants:
		if rule is None:
			return FixedZone(name, initial)
		elif rule.is_fixed():
			abbr, off = rule.standard
			return FixedZone(name, Offset((off, off, abbr)))

	return RuledZone(name, TransitionTable(instants, offsets, initial, rule))
