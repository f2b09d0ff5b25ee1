"""
# Read TZif, time zone information, files (zic output; RFC 8536).

# Version 1 files hold a single data block of 32-bit times. Version 2 and
# later files repeat the block with 64-bit times and end with a footer
# holding a POSIX TZ string that describes the offsets after the last
# transition. Only the 64-bit block is used when present.

# ! WARNING:
	# This module is intended for internal use only. The protocol is subject to change without warning.
"""
import struct
import collections

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

class FormatError(ValueError):
	"""
	# The data was identified as TZif, but its contents are inconsistent.
	"""

header_fields = (
	'tzh_ttisutcnt',   # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of ``transition times'' for which data is stored in the file.
	'tzh_typecnt',     # The number of ``local time types'' for which data is stored in the file (must not be zero).
	'tzh_charcnt',     # The number of characters of ``time zone abbreviation strings'' stored in the file.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Magic, version, and fifteen reserved bytes precede the counts.
prefix_struct = struct.Struct("!4sc15x")
header_struct = struct.Struct("!" + (len(header_fields) * "l"))
header_size = prefix_struct.size + header_struct.size

ttinfo_fields = (
	'tt_utoff',
	'tt_isdst',
	'tt_desigidx',
)
tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ttinfo_fields)
ttinfo_struct = struct.Struct("!lBB")

leappairs_struct_v1 = struct.Struct("!ll")
leappairs_struct_v2 = struct.Struct("!ql")

# Local time type with its resolved abbreviation and indicators.
tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isut',
))

# The structured contents of a TZif file.
tzdata = collections.namedtuple('tzdata', (
	'types',
	'transitions',
	'leaps',
	'footer',
))

def block_size(header, time_size):
	"""
	# The number of bytes occupied by a data block described by &header.
	"""
	return (
		(header.tzh_timecnt * time_size) +
		header.tzh_timecnt +
		(header.tzh_typecnt * ttinfo_struct.size) +
		header.tzh_charcnt +
		(header.tzh_leapcnt * (time_size + 4)) +
		header.tzh_ttisstdcnt +
		header.tzh_ttisutcnt
	)

def parse_header(data, offset):
	if len(data) < offset + header_size:
		raise FormatError("truncated header")
	ident, version = prefix_struct.unpack_from(data, offset)
	if ident != magic:
		raise FormatError("missing magic at offset %d" %(offset,))
	header = tzinfo_header(*header_struct.unpack_from(data, offset + prefix_struct.size))
	if header.tzh_typecnt == 0:
		raise FormatError("no local time types")
	if min(header) < 0:
		raise FormatError("negative count in header")
	return version, header

def parse_block(data, offset, header, time_size):
	"""
	# Parse the data block of &header starting at &offset.

	# Returns a tuple of: `(transtimes, types, leaps, isstd, isut, timeinfo)` and the
	# offset following the block. See tzfile(5) for information about the fields.
	"""
	if len(data) < offset + block_size(header, time_size):
		raise FormatError("truncated data block")

	if time_size == 4:
		transtime_struct = struct.Struct("!%dl" %(header.tzh_timecnt,))
		leappairs_struct = leappairs_struct_v1
	else:
		transtime_struct = struct.Struct("!%dq" %(header.tzh_timecnt,))
		leappairs_struct = leappairs_struct_v2

	transtimes = transtime_struct.unpack_from(data, offset)
	offset += transtime_struct.size

	# unsigned char's
	types = tuple(bytes(data[offset:offset+header.tzh_timecnt]))
	offset += header.tzh_timecnt
	if types and max(types) >= header.tzh_typecnt:
		raise FormatError("transition refers to an undefined local time type")

	timetypinfo = []
	for i in range(header.tzh_typecnt):
		timetypinfo.append(tzinfo_ttinfo(*ttinfo_struct.unpack_from(data, offset)))
		offset += ttinfo_struct.size

	abbr = bytes(data[offset:offset+header.tzh_charcnt])
	offset += header.tzh_charcnt

	leaps = []
	for i in range(header.tzh_leapcnt):
		leaps.append(leappairs_struct.unpack_from(data, offset))
		offset += leappairs_struct.size

	isstd = tuple(bytes(data[offset:offset+header.tzh_ttisstdcnt]))
	offset += header.tzh_ttisstdcnt

	isut = tuple(bytes(data[offset:offset+header.tzh_ttisutcnt]))
	offset += header.tzh_ttisutcnt

	##
	# Resolve the abbrind. Append a NUL terminator to the
	# string to guarantee that abbr.find() will not return -1.
	abbr += b'\0'
	for x in timetypinfo:
		if x.tt_desigidx >= len(abbr):
			raise FormatError("abbreviation index out of range")
	timeinfo = tuple([
		(abbr[x.tt_desigidx:abbr.find(b'\0', x.tt_desigidx)], x.tt_utoff, x.tt_isdst)
		for x in timetypinfo
	])

	return (transtimes, types, tuple(leaps), isstd, isut, timeinfo), offset

def parse_footer(data, offset):
	"""
	# Extract the POSIX TZ string following the version 2 data block.
	"""
	if data[offset:offset+1] != b'\n':
		return None
	end = bytes(data).find(b'\n', offset + 1)
	if end == -1:
		raise FormatError("unterminated footer")
	footer = bytes(data[offset+1:end])
	if not footer:
		return None
	try:
		return footer.decode('ascii')
	except UnicodeDecodeError:
		raise FormatError("footer is not ASCII")

def parse(data):
	"""
	# Given TZif data, identify the appropriate version and unpack the timezone information.

	# Returns &None when the data is not TZif, otherwise a tuple of
	# `(transtimes, types, leaps, isstd, isut, timeinfo, footer)`.
	"""
	if data[:4] != magic:
		# not a TZif file
		return None

	version, header = parse_header(data, 0)
	offset = header_size
	if version in (b'\x00', b'1'):
		block, offset = parse_block(data, offset, header, 4)
		return block + (None,)

	# Skip the 32-bit block and read the 64-bit block and footer.
	offset += block_size(header, 4)
	version, header = parse_header(data, offset)
	block, offset = parse_block(data, offset + header_size, header, 8)
	return block + (parse_footer(data, offset),)

def structure(tzif):
	"""
	# Given the parse fields from &parse, make a more accessible structure.
	"""
	(transtimes, types, leaps, isstd, isut, timeinfo, footer) = tzif
	ltt = []
	for i, x in enumerate(timeinfo):
		ttyp = tzinfo(
			tz_abbrev = x[0],
			tz_offset = x[1],
			tz_isdst = bool(x[2]),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isut = bool(isut[i]) if i < len(isut) else False,
		)
		ltt.append(ttyp)

	r = list(zip(transtimes, map(ltt.__getitem__, types)))
	# order by the transition time
	r.sort(key = lambda x: x[0])
	return tzdata(tuple(ltt), r, leaps, footer)

def get_timezone_data(filepath):
	"""
	# Get the structured timezone data out of the specified file.
	# &None if the file is not TZif.
	"""
	with open(filepath, 'rb') as f:
		return read(f.read())

def read(data):
	"""
	# Get the structured timezone data from the bytes, &data.
	"""
	d = parse(data)
	if d is None:
		return None
	return structure(d)
