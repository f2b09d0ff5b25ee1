"""
# Zone data provider reading compiled TZif files.

# Zone identifiers are resolved against the directories of &Provider.path:
# the `TZDIR` environment variable, when set, then the system zoneinfo
# directories. When no directory holds the zone, the `tzdata` package is
# consulted so that zones are available on systems without zoneinfo.

# [ Elements ]
# /system_directories/
	# The zoneinfo directories searched after `TZDIR`.
"""
import os
import os.path
import logging
import importlib.resources

from . import core
from . import tzif
from . import libzone

logger = logging.getLogger(__name__)

system_directories = (
	tzif.tzdir,
	'/usr/lib/zoneinfo',
	'/usr/share/lib/zoneinfo',
	'/etc/zoneinfo',
)

def validate(identifier):
	"""
	# Check that &identifier names a file inside of a zoneinfo directory.

	# [ Exceptions ]
	# /&core.UnknownZone/
		# The identifier is empty, absolute, or escapes the directory.
	"""
	if not identifier or identifier.startswith('/') or '\\' in identifier or '\0' in identifier:
		raise core.UnknownZone(identifier)
	parts = identifier.split('/')
	if any(p in ('', '.', '..') for p in parts):
		raise core.UnknownZone(identifier)
	return parts

class Provider(object):
	"""
	# Source of zone data.

	# [ Properties ]
	# /directories/
		# Explicit directories to search; &None to use `TZDIR` and &system_directories.
	# /package/
		# The name of the package holding zoneinfo resources; &None to disable.
	"""
	__slots__ = ('directories', 'package')

	def __init__(self, directories=None, package='tzdata'):
		self.directories = None if directories is None else tuple(directories)
		self.package = package

	def __repr__(self):
		return "%s(%r, package=%r)" %(self.__class__.__name__, self.directories, self.package)

	def path(self, environ=os.environ):
		"""
		# The directories that will be searched in order.
		"""
		if self.directories is not None:
			return list(self.directories)
		r = []
		tzdir = environ.get(tzif.tzdirenviron)
		if tzdir:
			r.append(tzdir)
		r.extend(system_directories)
		return r

	def _resources(self):
		if self.package is None:
			return None
		try:
			return importlib.resources.files(self.package + '.zoneinfo')
		except ModuleNotFoundError:
			logger.debug("zoneinfo package %r is not installed", self.package)
			return None

	def read(self, identifier):
		"""
		# Get the TZif data of &identifier.

		# [ Exceptions ]
		# /&core.UnknownZone/
			# No source has data for the identifier.
		"""
		parts = validate(identifier)

		for directory in self.path():
			filepath = os.path.join(directory, *parts)
			if os.path.isfile(filepath):
				logger.debug("reading zone %r from %s", identifier, filepath)
				with open(filepath, 'rb') as f:
					return f.read()
			logger.debug("zone %r not present in %s", identifier, directory)

		resources = self._resources()
		if resources is not None:
			r = resources
			for p in parts:
				r = r.joinpath(p)
			if r.is_file():
				logger.debug("reading zone %r from package %s", identifier, self.package)
				return r.read_bytes()

		raise core.UnknownZone(identifier)

	def load(self, identifier):
		"""
		# Construct the &libzone.Zone identified by &identifier.

		# [ Exceptions ]
		# /&core.UnknownZone/
			# No source has data for the identifier.
		# /&core.ZoneDataError/
			# The data of the identifier was not TZif or was corrupt.
		"""
		data = self.read(identifier)
		try:
			tzd = tzif.read(data)
		except (tzif.FormatError, ValueError) as err:
			logger.warning("corrupt zone data for %r: %s", identifier, err)
			raise core.ZoneDataError(identifier, str(err)) from err

		if tzd is None:
			logger.warning("zone data for %r is not TZif", identifier)
			raise core.ZoneDataError(identifier, "not a TZif file")

		try:
			zone = libzone.from_tzif_data(tzd, identifier)
		except core.ZoneDataError as err:
			logger.warning("corrupt zone data for %r: %s", identifier, err.reason)
			raise

		logger.debug("loaded zone %r with %d transitions", identifier,
			len(zone.table) if isinstance(zone, libzone.RuledZone) else 0)
		return zone

	def identifiers(self):
		"""
		# The set of zone identifiers available from all sources.
		"""
		r = set()
		for directory in self.path():
			if not os.path.isdir(directory):
				continue
			for root, dirs, files in os.walk(directory):
				dirs.sort()
				for name in files:
					filepath = os.path.join(root, name)
					try:
						with open(filepath, 'rb') as f:
							if f.read(4) != tzif.magic:
								continue
					except OSError:
						continue
					r.add(os.path.relpath(filepath, directory).replace(os.sep, '/'))

		if self.package is not None:
			try:
				zones = importlib.resources.files(self.package).joinpath('zones')
				if zones.is_file():
					r.update(x.strip() for x in zones.read_text().splitlines() if x.strip())
			except ModuleNotFoundError:
				logger.debug("zoneinfo package %r is not installed", self.package)

		# Links to the system default are not zones.
		r.discard('localtime')
		return r
