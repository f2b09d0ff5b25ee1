"""
# Process-wide access to zones, chronologies, and the current time.

# A &Registry caches the zones loaded from its provider and the chronologies
# built from them so that equal configurations share a single instance.
# Populating a key holds a lock for that key alone; other keys, and readers
# of populated keys, are not blocked. Failures are not cached.

# The registry used by default is created on first use by &instance and can
# be replaced by &install, typically during application startup.
"""
import logging
import threading

from . import core
from . import libzone
from . import chronology as libchronology
from .types import CalendarKind

logger = logging.getLogger(__name__)

class Cache(object):
	"""
	# Mapping populated at most once per key.
	"""
	__slots__ = ('name', 'items', 'locks', 'lock')

	def __init__(self, name):
		self.name = name
		self.items = {}
		self.locks = {}
		self.lock = threading.Lock()

	def __len__(self):
		return len(self.items)

	def __contains__(self, key):
		return key in self.items

	def get(self, key, build):
		"""
		# Get the value of &key, calling &build to create it when missing.
		"""
		try:
			return self.items[key]
		except KeyError:
			pass

		with self.lock:
			keylock = self.locks.get(key)
			if keylock is None:
				keylock = self.locks[key] = threading.Lock()

		with keylock:
			try:
				return self.items[key]
			except KeyError:
				pass

			try:
				value = build()
				self.items[key] = value
				logger.debug("%s cache populated: %r", self.name, key)
			finally:
				with self.lock:
					self.locks.pop(key, None)

		return value

class Registry(object):
	"""
	# Zone provider, default zone, clock, and the caches built from them.

	# [ Properties ]
	# /provider/
		# The &.provider.Provider loading zone data.
	# /clock/
		# Callable returning the current instant.
	# /utc/
		# The UTC zone.
	"""

	def __init__(self, provider=None, clock=None, default=None):
		if provider is None:
			from . import provider as libprovider
			provider = libprovider.Provider()
		if clock is None:
			from . import system
			clock = system.system()

		self.provider = provider
		self.clock = clock
		self.utc = libzone.FixedZone.from_offset(0)
		self._default = default
		self.zones = Cache('zone')
		self.chronologies = Cache('chronology')

	def __repr__(self):
		return "<%s: %d zones, %d chronologies>" %(
			self.__class__.__name__, len(self.zones), len(self.chronologies)
		)

	def zone(self, identifier):
		"""
		# Get the zone identified by &identifier.

		# [ Exceptions ]
		# /&core.IllegalArgument/
			# A fixed offset identifier was malformed.
		# /&core.UnknownZone/
			# No data exists for the identifier.
		# /&core.ZoneDataError/
			# The data of the zone was corrupt.
		"""
		if isinstance(identifier, libzone.Zone):
			return identifier
		if identifier in libzone.utc_identifiers:
			return self.utc
		return self.zones.get(identifier, lambda: self._load(identifier))

	def _load(self, identifier):
		if identifier[:1] in ('+', '-'):
			millis = libzone.parse_fixed(identifier)
			if millis == 0:
				return self.utc
			return libzone.FixedZone.from_offset(millis)
		return self.provider.load(identifier)

	def fixed(self, millis):
		"""
		# Get the zone with the constant offset &millis.
		"""
		if millis == 0:
			return self.utc
		return self.zone(libzone.format_offset(millis))

	@property
	def default_zone(self):
		"""
		# The zone used when none is given.
		"""
		if self._default is None:
			from . import system
			self._default = system.default_zone(self)
		elif isinstance(self._default, str):
			self._default = self.zone(self._default)
		return self._default

	def chronology(self, kind, zone=None, **parameters):
		"""
		# Get the chronology of &kind bound to &zone.

		# [ Parameters ]
		# /kind/
			# The &CalendarKind or its name.
		# /zone/
			# The zone or its identifier; &None selects &default_zone.
		# /parameters/
			# Calendar parameters; see &.chronology.
		"""
		kind = CalendarKind(kind)
		if zone is None:
			zone = self.default_zone
		else:
			zone = self.zone(zone)
		params = libchronology.parameters(kind, **parameters)

		key = (kind, zone.id, params)
		return self.chronologies.get(key, lambda: libchronology.build(self, kind, zone, params))

	def now(self):
		"""
		# The current instant according to the &clock.
		"""
		return core.check(self.clock())

_lock = threading.Lock()
_instance = None

def instance():
	"""
	# The registry installed for the process, creating the default on first use.
	"""
	global _instance
	r = _instance
	if r is None:
		with _lock:
			if _instance is None:
				_instance = Registry()
			r = _instance
	return r

def install(registry):
	"""
	# Replace the registry used by the process; returns the previous registry.
	"""
	global _instance
	with _lock:
		previous = _instance
		_instance = registry
	return previous
