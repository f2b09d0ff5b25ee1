"""
# Calendars composed from another chronology by renumbering its years.

# The day arithmetic of the base chronology is reused unchanged; only the
# year, era, and century fields are replaced.
"""
from . import constants
from . import libfield
from . import libcalendar
from .assembly import Assembly
from .types import FieldKind, DurationUnitKind

def copy(base):
	"""
	# Create an &Assembly holding the supported fields and units of &base.
	"""
	return Assembly(
		[(k, base.field(k)) for k in FieldKind if base.field(k).is_supported()],
		[(k, base.unit(k)) for k in DurationUnitKind if base.unit(k).is_supported()],
	)

def shift(base, offset):
	"""
	# Renumber the years of the &base chronology by adding &offset.

	# The base is expected to lack a year zero; the year zero is restored
	# before shifting so that the shifted years are contiguous. The result
	# has a single era and one-based centuries.
	"""
	F = FieldKind
	U = DurationUnitKind
	a = copy(base)
	f = a.fields
	eras = a.unit(U.eras)

	f[F.era] = libcalendar.SingleEra()

	year = f[F.year] = libfield.Offset(libfield.SkipUndo(f[F.year]), offset)
	yoe = f[F.yearOfEra] = libfield.Delegated(
		year, kind=F.yearOfEra, unit=year.duration_unit(), range=eras
	)
	weekyear = f[F.weekyear] = libfield.Offset(libfield.SkipUndo(f[F.weekyear]), offset)

	century = f[F.centuryOfEra] = libfield.Divided(
		libfield.Offset(yoe, 99), F.centuryOfEra, 100, range=eras
	)
	centuries = a.units[U.centuries] = century.duration_unit()
	f[F.yearOfCentury] = libfield.Offset(
		libfield.Remainder.from_divided(century, F.yearOfCentury), 1
	)
	f[F.weekyearOfCentury] = libfield.Offset(
		libfield.Remainder(weekyear, 100, F.weekyearOfCentury, range=centuries), 1
	)
	return a

def buddhist(gj):
	"""
	# Build the strategy table and constructor of the Buddhist chronology
	# from the UTC GJ chronology: year 2545 BE is 2002 CE.
	"""
	from .chronology import field_constructor
	a = shift(gj, constants.buddhist_year_offset)
	return a, field_constructor(a)
