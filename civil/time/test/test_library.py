import os

from .. import library as libtime
from .. import registry as libregistry
from .. import abstract
from ..bin import zone as binzone
from ..types import CalendarKind, FieldKind, DurationUnitKind
from . import mock

def test_facade(test):
	r = mock.registry(default='Europe/London')
	test/libtime.zone(registry=r) % r.default_zone
	test/libtime.zone('Europe/London', registry=r) % r.zone('Europe/London')
	test/libtime.utc(r) % r.utc
	test/libtime.now(r) == mock.june9

	c = libtime.chronology('gj', registry=r)
	test/c.zone.id == 'Europe/London'
	test/c % r.chronology(CalendarKind.gj, 'Europe/London')
	test/libtime.chronology_utc('coptic', registry=r, minimum_days=1).zone % r.utc
	test/libtime.chronology(registry=r).kind == CalendarKind.iso

def test_exports(test):
	from .. import core
	test/libtime.IllegalArgument is core.IllegalArgument
	test/libtime.UnknownZone is core.UnknownZone
	test/libtime.FieldKind is FieldKind

def test_installed_registry(test):
	previous = libregistry.install(mock.registry(instant=0))
	try:
		test/libtime.now() == 0
		test/libtime.zone() % libtime.utc()
		test/libtime.chronology('iso', 'UTC').date(libtime.now()) == (1970, 1, 1)
	finally:
		libregistry.install(previous)

def test_protocols(test):
	r = mock.registry()
	c = r.chronology('iso', 'Europe/London')
	test/isinstance(c, abstract.Chronology) == True
	test/isinstance(c.zone, abstract.Zone) == True
	test/isinstance(r.utc, abstract.Zone) == True
	test/isinstance(c.field(FieldKind.year), abstract.Field) == True
	test/isinstance(c.base.field(FieldKind.year), abstract.Field) == True
	test/isinstance(c.unit(DurationUnitKind.days), abstract.Unit) == True
	test/isinstance(c.base.unit(DurationUnitKind.months), abstract.Unit) == True
	test/isinstance(r, abstract.Zone) == False

def test_print_zone_transitions(test):
	previous = libregistry.install(mock.registry())
	try:
		lines = []
		binzone.print_zone_transitions('Europe/London', 2002, 2003, write=lines.append)
		test/lines == [
			'Europe/London\n',
			'2002-01-01T00:00:00Z: GMT+00:00\n',
			'2002-03-31T01:00:00Z: BST+01:00\n',
			'2002-10-27T01:00:00Z: GMT+00:00\n',
		]

		lines = []
		binzone.print_zone_transitions('+05:30', write=lines.append)
		test/lines == ['+05:30\n', '1970-01-01T00:00:00Z: +05:30+05:30\n']

		lines = []
		binzone.print_zone_transitions(write=lines.append)
		test/lines == ['UTC\n', '1970-01-01T00:00:00Z: UTC+00:00\n']
	finally:
		libregistry.install(previous)

def test_zone_script_arguments(test):
	errors = []
	test/binzone.main(['civil-zone', 'Europe/London', '2002'], error=errors.append) == os.EX_USAGE
	test/errors == [binzone.usage]

	errors = []
	test/binzone.main(['civil-zone', 'Europe/London', '2002', 'next'], error=errors.append) == os.EX_USAGE
	test/len(errors) == 1
	test/("'next'" in errors[0]) == True

	errors = []
	args = ['civil-zone', 'UTC', '2002', '2003', '2004']
	test/binzone.main(args, error=errors.append) == os.EX_USAGE
	test/errors == [binzone.usage]
