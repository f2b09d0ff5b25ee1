"""
# Print the transitions of a zone.

# The default zone is used when no identifier is given. Without a period,
# the transitions recorded in the zone's table are printed; with `start`
# and `stop` years, the transitions between them, including those
# produced by the recurring rule.

#!/pl/sh
	python3 -m civil.time.bin.zone Europe/London 2000 2005
"""
import os
import sys

from .. import library as libtime
from .. import libzone
from ..types import CalendarKind, FieldKind

iso_fields = (
	FieldKind.year, FieldKind.monthOfYear, FieldKind.dayOfMonth,
	FieldKind.hourOfDay, FieldKind.minuteOfHour, FieldKind.secondOfMinute,
)

def describe(iso, instant, offset):
	y, m, d, h, mi, s = iso.select(instant, *iso_fields)
	return "%04d-%02d-%02dT%02d:%02d:%02dZ: %s\n" %(y, m, d, h, mi, s, offset)

def print_zone_transitions(identifier=None, start=None, stop=None, write=sys.stdout.write):
	zone = libtime.zone(identifier)
	iso = libtime.chronology_utc(CalendarKind.iso)

	if start is None:
		if isinstance(zone, libzone.RuledZone):
			pairs = zip(zone.table.instants, zone.table.offsets)
		else:
			pairs = [(0, zone.find(0))]
	else:
		pairs = zone.slice(iso.instant(start), iso.instant(stop))

	write("%s\n" %(zone.id,))
	for transition, offset in pairs:
		write(describe(iso, transition, offset))

usage = "[!# ERROR: usage: civil-zone [identifier [start-year stop-year]]]\n"

def main(inv=sys.argv, error=sys.stderr.write):
	args = inv[1:]
	if len(args) not in {0, 1, 3}:
		error(usage)
		return os.EX_USAGE

	identifier = args[0] if args else None
	if len(args) == 3:
		try:
			start, stop = int(args[1]), int(args[2])
		except ValueError:
			error("[!# ERROR: years (%r, %r) must be integers]\n" %(args[1], args[2]))
			return os.EX_USAGE
		print_zone_transitions(identifier, start, stop)
	else:
		print_zone_transitions(identifier)
	return 0

if __name__ == '__main__':
	sys.exit(main())
