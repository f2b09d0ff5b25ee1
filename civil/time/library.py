"""
# Primary public module.

# Provides access to the cached chronologies and zones of the installed
# &.registry.Registry and the current time.
"""
from . import registry as libregistry
from .core import *
from .types import CalendarKind, FieldKind, DurationUnitKind

__shortname__ = 'libtime'

def zone(identifier=None, registry=None):
	"""
	# Get the zone identified by &identifier; the default zone when &None.

	# [ Parameters ]
	# /identifier/
		# An IANA zone name, `UTC`, or a fixed offset such as `+05:30`.
	"""
	r = registry or libregistry.instance()
	if identifier is None:
		return r.default_zone
	return r.zone(identifier)

def utc(registry=None):
	"""
	# The UTC zone.
	"""
	return (registry or libregistry.instance()).utc

def chronology(kind='iso', zone=None, registry=None, **parameters):
	"""
	# Get the chronology of &kind bound to &zone.

	#!/pl/python
		gj = libtime.chronology('gj', 'Europe/Paris', cutover=-12219292800000)

	# [ Parameters ]
	# /kind/
		# The &CalendarKind or its name.
	# /zone/
		# The zone or its identifier; &None selects the default zone.
	# /parameters/
		# `minimum_days` for all kinds but ISO, and `cutover` for GJ.
	"""
	r = registry or libregistry.instance()
	return r.chronology(kind, zone, **parameters)

def chronology_utc(kind='iso', registry=None, **parameters):
	"""
	# Get the chronology of &kind bound to UTC.
	"""
	r = registry or libregistry.instance()
	return r.chronology(kind, r.utc, **parameters)

def now(registry=None):
	"""
	# The current instant according to the registry's clock.
	"""
	return (registry or libregistry.instance()).now()
