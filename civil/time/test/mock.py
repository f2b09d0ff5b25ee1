"""
# Registries isolated from the host's zoneinfo and clock, and synthetic zone data.
"""
import struct

from .. import provider
from .. import registry as libregistry
from .. import system

#: 2002-06-09T00:00:00Z
june9 = 1023580800000

def registry(instant=june9, default='UTC'):
	"""
	# Create a registry reading zones from the `tzdata` package with a fixed clock.
	"""
	return libregistry.Registry(
		provider.Provider(directories=(), package='tzdata'),
		clock=system.fixed(instant),
		default=default,
	)

def tzif(transitions, types, footer=None, version=b'2'):
	"""
	# Construct TZif data.

	# [ Parameters ]
	# /transitions/
		# Sequence of `(seconds, type_index)`.
	# /types/
		# Sequence of `(offset_seconds, isdst, abbreviation)`.
	"""
	abbrs = b''
	indexes = []
	for offset, isdst, abbr in types:
		indexes.append(len(abbrs))
		abbrs += abbr.encode('ascii') + b'\0'

	def block(fmt):
		counts = (0, 0, 0, len(transitions), len(types), len(abbrs))
		data = struct.pack('!4sc15x6l', b'TZif', version, *counts)
		data += struct.pack('!%d%s' %(len(transitions), fmt), *[t for t, i in transitions])
		data += bytes([i for t, i in transitions])
		for (offset, isdst, abbr), idx in zip(types, indexes):
			data += struct.pack('!lBB', offset, isdst, idx)
		return data + abbrs

	if version == b'\x00':
		return block('l')
	return block('l') + block('q') + b'\n' + (footer or '').encode('ascii') + b'\n'

#: Standard and daylight types toggled at 1000000 and 2000000 seconds.
synthetic_types = [(0, 0, 'STD'), (3600, 1, 'DST')]
synthetic_transitions = [(1000000, 1), (2000000, 0)]
synthetic_rule = 'STD0DST,M3.5.0/1,M10.5.0'
