"""
# System clock access and default zone discovery.

# Clocks are callables returning the current instant in milliseconds. The
# registry's clock is used by &utc and &local and can be replaced with
# &fixed or &offset clocks when a test needs a predictable time.
"""
import os
import os.path
import time
import logging

from . import core
from . import tzif
from . import libzone

logger = logging.getLogger(__name__)

def system(time_ns=time.time_ns):
	"""
	# Create a clock reading the system's real time.
	"""
	def read():
		return time_ns() // 1000000
	return read

def fixed(instant):
	"""
	# Create a clock that always returns &instant.
	"""
	core.check(instant)
	def read():
		return instant
	return read

def offset(clock, millis):
	"""
	# Create a clock that adds &millis to the readings of &clock.
	"""
	def read():
		return core.add(clock(), millis)
	return read

def identify(path, marker='zoneinfo' + os.sep):
	"""
	# Derive the zone identifier from the target of a `localtime` link.
	"""
	target = os.path.realpath(path)
	i = target.rfind(marker)
	if i == -1:
		return None
	return target[i+len(marker):]

def load_file(filepath, identifier):
	"""
	# Construct a zone from the TZif file at &filepath.
	"""
	try:
		tzd = tzif.get_timezone_data(filepath)
	except tzif.FormatError as err:
		raise core.ZoneDataError(identifier, str(err)) from err
	if tzd is None:
		raise core.ZoneDataError(identifier, "not a TZif file")
	return libzone.from_tzif_data(tzd, identifier)

def default_zone(registry, environ=os.environ, localtime=tzif.tzdefault):
	"""
	# Identify the default zone of the process.

	# The `TZ` environment variable is used when set, ignoring a leading colon.
	# Otherwise, the zone linked by `/etc/localtime` is used. UTC is the
	# default when neither identifies a zone.
	"""
	tz = environ.get(tzif.tzenviron)
	if tz:
		if tz.startswith(':'):
			tz = tz[1:]
		try:
			if tz.startswith('/'):
				return load_file(tz, identify(tz) or tz)
			return registry.zone(tz)
		except (core.IllegalArgument, core.ZoneDataError, OSError) as err:
			logger.warning("TZ=%r does not identify a zone: %s", tz, err)

	if os.path.exists(localtime):
		identifier = identify(localtime)
		try:
			if identifier is not None:
				return registry.zone(identifier)
			return load_file(localtime, 'localtime')
		except (core.IllegalArgument, core.ZoneDataError, OSError) as err:
			logger.warning("%s does not identify a zone: %s", localtime, err)

	logger.debug("no default zone configured; using UTC")
	return registry.utc

def utc(registry=None):
	"""
	# Get the current instant.
	"""
	from . import registry as libregistry # Defer import until usage.
	r = registry or libregistry.instance()
	return r.now()

def local(registry=None):
	"""
	# Get the current instant on the local time line of the default zone.

	# The result is not a UTC instant; it should only be used where the local
	# time is needed without its zone.
	"""
	from . import registry as libregistry # Defer import until usage.
	r = registry or libregistry.instance()
	return r.default_zone.convert_utc_to_local(r.now())
