"""
# Calendar systems bound to a zone.

# A &Chronology is an immutable value identified by its &.types.CalendarKind,
# its zone, and its parameters. Its fields and units are held in a completed
# strategy table, see &.assembly, and retrieved by kind.

# Chronologies are constructed by &build and are normally retrieved through
# the cache of a &.registry.Registry so that equal configurations are
# represented by the same instance.

# [ Parameters ]
# Calendar kinds accept the following keywords.

# /minimum_days/
	# Minimum number of days in the first week of a weekyear; `1` through `7`.
	# Not accepted by &.types.CalendarKind.iso which is always `4`.
# /cutover/
	# The instant at which &.types.CalendarKind.gj changes from the Julian
	# calendar to the Gregorian calendar.
# /leap_years/
	# The leap year pattern of &.types.CalendarKind.islamic; a key of
	# &.islamic.leap_year_patterns.
# /lower/
	# The earliest instant that the chronology accepts; see &.limits.
# /upper/
	# The instant after the last that the chronology accepts.
# /resolution/
	# `'strict'` or `'lenient'`; how values given to a field's `set` are
	# interpreted. See &.resolution.
"""
import functools

from . import core
from . import earth
from . import constants
from . import assembly
from . import gregorian
from . import julian
from . import coptic
from . import islamic
from . import limits as liblimits
from . import resolution as libresolution
from .types import CalendarKind, FieldKind, DurationUnitKind

class Chronology(object):
	"""
	# A calendar system bound to a single zone.

	# [ Properties ]
	# /kind/
		# The &.types.CalendarKind of the chronology.
	# /zone/
		# The &.libzone.Zone that the fields are relative to.
	# /parameters/
		# Sorted tuple of the `(name, value)` pairs configuring the calendar.
	# /base/
		# The UTC chronology that a zoned chronology wraps; &None for UTC chronologies.
	"""
	__slots__ = ('kind', 'zone', 'parameters', 'base', '_fields', '_units', '_construct', '__weakref__')

	def __init__(self, kind, zone, table, construct, parameters=(), base=None):
		self.kind = kind
		self.zone = zone
		self.parameters = tuple(parameters)
		self.base = base
		self._fields, self._units = table.complete()
		self._construct = construct

	@property
	def identity(self):
		return (self.kind, self.zone.id, self.parameters)

	def __eq__(self, ob):
		if self is ob:
			return True
		if not isinstance(ob, Chronology):
			return NotImplemented
		return self.identity == ob.identity

	def __hash__(self):
		return hash(self.identity)

	def __repr__(self):
		if self.parameters:
			params = ', '.join('%s=%r' %(k, v) for k, v in self.parameters)
			return "<%s %s[%s] %s>" %(self.__class__.__name__, self.kind.value, self.zone.id, params)
		return "<%s %s[%s]>" %(self.__class__.__name__, self.kind.value, self.zone.id)

	def __str__(self):
		return "%s[%s]" %(self.kind.value, self.zone.id)

	def parameter(self, name, default=None):
		for k, v in self.parameters:
			if k == name:
				return v
		return default

	def is_utc(self):
		return self.base is None

	def field(self, kind):
		"""
		# The implementation of the &.types.FieldKind, &kind.
		"""
		return self._fields[kind]

	def unit(self, kind):
		"""
		# The implementation of the &.types.DurationUnitKind, &kind.
		"""
		return self._units[kind]

	def fields(self):
		"""
		# Iterate over the supported fields.
		"""
		for f in self._fields.values():
			if f.is_supported():
				yield f

	def units(self):
		for u in self._units.values():
			if u.is_supported():
				yield u

	def date_instant(self, year, month, day, millis):
		"""
		# Construct the instant of the date and the milliseconds of its day.
		"""
		core.verify(FieldKind.millisOfDay, millis, 0, earth.millis_in_day - 1)
		return self._construct(year, month, day, millis)

	def instant(self, year, month=1, day=1, hour=0, minute=0, second=0, millisecond=0):
		"""
		# Construct the instant of the date-time.

		# [ Exceptions ]
		# /&core.IllegalFieldValue/
			# A component was outside of its bounds.
		# /&core.IllegalInstant/
			# The local date-time does not exist in the zone.
		"""
		core.verify(FieldKind.hourOfDay, hour, 0, 23)
		core.verify(FieldKind.minuteOfHour, minute, 0, 59)
		core.verify(FieldKind.secondOfMinute, second, 0, 59)
		core.verify(FieldKind.millisOfSecond, millisecond, 0, 999)
		return self._construct(year, month, day, earth.millis_of_day(hour, minute, second, millisecond))

	def select(self, instant, *kinds):
		"""
		# Get the values of the fields identified by &kinds.

		#!python
			y, m, d = chronology.select(ts, FieldKind.year, FieldKind.monthOfYear, FieldKind.dayOfMonth)
		"""
		if len(kinds) == 1:
			return self._fields[kinds[0]].get(instant)
		return tuple([self._fields[k].get(instant) for k in kinds])

	def date(self, instant):
		return self.select(instant, FieldKind.year, FieldKind.monthOfYear, FieldKind.dayOfMonth)

	def add(self, instant, kind, value):
		"""
		# Add &value units of the &.types.DurationUnitKind, &kind.
		"""
		if value == 0:
			return instant
		return self._units[kind].add(instant, value)

	def with_zone(self, zone, registry=None):
		"""
		# The chronology of the same kind and parameters bound to &zone.
		"""
		from . import registry as libregistry # Defer import until usage.
		r = registry or libregistry.instance()
		zone = r.zone(zone) if isinstance(zone, str) else zone
		if zone == self.zone:
			return self
		return r.chronology(self.kind, zone, **dict(self.parameters))

	def with_utc(self, registry=None):
		if self.base is not None:
			return self.base
		return self

def basic_constructor(calendar, year_zero=True):
	"""
	# Construct instants directly from the days of &calendar.

	# [ Parameters ]
	# /year_zero/
		# Whether the calendar numbers the year before `1` as `0`. When &False,
		# `-1` is the year before `1` and `0` is rejected.
	"""
	def construct(year, month, day, millis):
		if not year_zero:
			if year == 0:
				raise core.IllegalFieldValue(FieldKind.year, year)
			elif year < 0:
				year += 1
		days = calendar.days_from_valid_date(year, month, day)
		return calendar.instant(days, millis)
	return construct

def field_constructor(fields):
	"""
	# Construct instants by setting the year, month, day, and millisecond of day
	# fields starting from the epoch.
	"""
	year = fields.field(FieldKind.year)
	month = fields.field(FieldKind.monthOfYear)
	day = fields.field(FieldKind.dayOfMonth)
	mod = fields.field(FieldKind.millisOfDay)

	def construct(y, m, d, millis):
		instant = year.set(0, y)
		instant = month.set(instant, m)
		instant = day.set(instant, d)
		return mod.set(instant, millis)
	return construct

@functools.lru_cache(64)
def calendar(kind, minimum_days=constants.first_week_minimum, leap_years=None):
	"""
	# Get the &.calendar.Calendar used by the &kind of chronology.
	"""
	if kind in (CalendarKind.iso, CalendarKind.gregorian):
		return gregorian.Calendar(minimum_days)
	elif kind is CalendarKind.julian:
		return julian.Calendar(minimum_days)
	elif kind is CalendarKind.coptic:
		return coptic.Coptic(minimum_days)
	elif kind is CalendarKind.ethiopic:
		return coptic.Ethiopic(minimum_days)
	elif kind is CalendarKind.islamic:
		return islamic.Calendar(minimum_days, leap_years or islamic.default_leap_years)
	raise core.IllegalArgument("no single calendar for chronology kind: " + kind.value)

def parameters(kind, minimum_days=None, cutover=None, leap_years=None,
		lower=None, upper=None, resolution=None):
	"""
	# Validate and normalize the parameters of a chronology of &kind.

	# [ Returns ]
	# A sorted tuple of `(name, value)` pairs including defaults.
	"""
	kind = CalendarKind(kind)
	params = []

	if kind is CalendarKind.iso:
		if minimum_days not in (None, constants.first_week_minimum):
			raise core.IllegalArgument("the minimum days of the first ISO week are fixed")
	else:
		if minimum_days is None:
			minimum_days = constants.first_week_minimum
		elif minimum_days < 1 or minimum_days > 7:
			raise core.IllegalArgument("invalid minimum days in first week: %r" %(minimum_days,))
		params.append(('minimum_days', minimum_days))

	if kind is CalendarKind.gj:
		if cutover is None:
			cutover = constants.gregorian_cutover
		params.append(('cutover', cutover))
	elif cutover is not None:
		raise core.IllegalArgument("cutover is only accepted by the GJ chronology")

	if kind is CalendarKind.islamic:
		if leap_years is None:
			leap_years = islamic.default_leap_years
		elif leap_years not in islamic.leap_year_patterns:
			raise core.IllegalArgument("unknown leap year pattern: %r" %(leap_years,))
		params.append(('leap_years', leap_years))
	elif leap_years is not None:
		raise core.IllegalArgument("leap year patterns are only accepted by the Islamic chronology")

	if lower is not None or upper is not None:
		liblimits.Limits(lower, upper)
		if lower is not None:
			params.append(('lower', core.check(lower)))
		if upper is not None:
			params.append(('upper', core.check(upper)))

	if resolution is not None:
		if resolution not in libresolution.modes:
			raise core.IllegalArgument("unknown resolution: %r" %(resolution,))
		params.append(('resolution', resolution))

	return tuple(sorted(params))

def build_utc(registry, kind, params):
	"""
	# Construct the UTC chronology of &kind with the normalized &params.
	"""
	from . import cutover as libcutover
	from . import eras

	options = dict(params)
	utc = registry.utc
	minimum_days = options.get('minimum_days', constants.first_week_minimum)
	lower = options.get('lower')
	upper = options.get('upper')

	if kind is CalendarKind.gj:
		julian_utc = registry.chronology(CalendarKind.julian, utc, minimum_days=minimum_days)
		gregorian_utc = registry.chronology(CalendarKind.gregorian, utc, minimum_days=minimum_days)
		table, construct = libcutover.assemble(julian_utc, gregorian_utc, options['cutover'])
	elif kind is CalendarKind.buddhist:
		gj = registry.chronology(CalendarKind.gj, utc, minimum_days=minimum_days)
		table, construct = eras.buddhist(gj)
	else:
		c = calendar(kind, minimum_days, options.get('leap_years'))
		table = assembly.dates(assembly.time(assembly.Assembly()), c)
		if kind is CalendarKind.iso:
			assembly.zero_based_centuries(table)
			construct = basic_constructor(c)
		elif kind is CalendarKind.gregorian:
			construct = basic_constructor(c)
		elif kind is CalendarKind.islamic:
			assembly.single_era(table)
			construct = basic_constructor(c)
			# Instants before the first year are outside of the calendar.
			first = c.instant(c.year_start(1), 0)
			lower = first if lower is None else max(lower, first)
		else:
			assembly.without_year_zero(table)
			if kind in (CalendarKind.coptic, CalendarKind.ethiopic):
				assembly.single_era(table)
			construct = basic_constructor(c, year_zero=False)

	if lower is not None or upper is not None:
		table, construct = liblimits.assemble(table, construct, liblimits.Limits(lower, upper))
	if 'resolution' in options:
		libresolution.apply(table, options['resolution'])

	return Chronology(kind, utc, table, construct, params)

def build(registry, kind, zone, params):
	"""
	# Construct the chronology of &kind bound to &zone.
	"""
	if zone == registry.utc:
		return build_utc(registry, kind, params)

	from . import zoned # Defer import until usage.
	options = dict(params)
	base = registry.chronology(kind, registry.utc, **options)

	# Resolution applies to the zoned fields; zone the base without it.
	mode = options.pop('resolution', None)
	if mode is None:
		table, construct = zoned.assemble(base, zone)
	else:
		table, construct = zoned.assemble(registry.chronology(kind, registry.utc, **options), zone)
		libresolution.apply(table, mode)

	return Chronology(kind, zone, table, construct, params, base=base)
