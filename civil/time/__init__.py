"""
[ About ]
---------

civil.time converts between instants, plain &int milliseconds since
1970-01-01T00:00:00Z, and the fields of a calendar: year, month of year,
day of month, hour of day and so on. Conversion is performed by a
&.chronology.Chronology, a calendar system bound to a single &.libzone.Zone.

Calendar Support:

	- ISO-8601
	- Proleptic Gregorian
	- Proleptic Julian
	- Gregorian/Julian cutover (GJ)
	- Buddhist
	- Coptic
	- Ethiopic

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	from civil.time import library as libtime
	from civil.time.types import FieldKind, DurationUnitKind

[ Fields ]
----------

Fields are looked up by their kind. A kind that has no meaning in
a calendar system resolves to an unsupported field rather than &None.

#!/pl/python
	iso = libtime.chronology('iso', 'Europe/London')
	ts = iso.instant(2002, 6, 9)
	assert FieldKind.monthOfYear.get(iso).get(ts) == 6
	ts = FieldKind.monthOfYear.get(iso).add(ts, 8)
	assert iso.select(ts, FieldKind.year, FieldKind.monthOfYear) == (2003, 2)

Wrapping is explicit:

#!/pl/python
	ts = iso.instant(2002, 6, 9)
	ts = FieldKind.monthOfYear.get(iso).add_wrap_field(ts, 8)
	assert iso.select(ts, FieldKind.year, FieldKind.monthOfYear) == (2002, 2)

[ Zones ]
---------

Zones are read from the system's zoneinfo directories or the `tzdata`
distribution and cached for the life of the process.

#!/pl/python
	london = libtime.zone('Europe/London')
	jan = libtime.chronology_utc('iso').instant(2002, 1, 9)
	assert london.offset(jan) == 0
	assert london.next_transition(jan) == 1017536400000
"""
