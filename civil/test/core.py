"""
# Contention primitives used by the test modules of &civil.

# Test functions take a &Test instance and state their expectations
# with the true division operator; a false comparison raises &Absurdity:

#!/pl/python
	def test_leap(test):
		test/gregorian.year_is_leap(2000) == True
		test/core.IllegalArgument ^ (lambda: core.wrap(1, 1, 1))

# Division binds tighter than comparison, so the expression reads as
# the assertion that it performs.
"""
import operator
import contextlib

import pytest

class Absurdity(AssertionError):
	"""
	# A contention that did not hold.

	# [ Properties ]
	# /operator/
		# The name of the comparison or check that failed.
	# /former/
		# The object given to the &Test.
	# /latter/
		# The object it was compared with.
	# /inverse/
		# Whether the contention was negated.
	"""

	symbols = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=False):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter)

	def __str__(self):
		expression = "%r %s %r" %(self.former, self.symbols.get(self.operator, self.operator), self.latter)
		if self.inverse:
			return "not " + expression
		return expression

def comparison(name, compare):
	def contend(self, other):
		if bool(compare(self.subject, other)) is self.inverse:
			raise Absurdity(name, self.subject, other, inverse=self.inverse)
	contend.__name__ = name
	return contend

class Contention(object):
	"""
	# The object of a contention; created by dividing a &Test.

	# Comparisons raise &Absurdity when false, `%` checks identity,
	# `^` and `with` trap exceptions of the subject's type, and `<<`
	# checks containment.

	#!/pl/python
		test/chronology.instant(2002) == 1009843200000
		test/zone % registry.utc
		with test/core.UnknownZone as exc:
			registry.zone('Nowhere')
		test/exc().identifier == 'Nowhere'
	"""
	__slots__ = ('test', 'subject', 'inverse', 'trapped')

	def __init__(self, test, subject, inverse=False):
		self.test = test
		self.subject = subject
		self.inverse = inverse
		self.trapped = None

	__hash__ = None

	def __enter__(self):
		return self.caught

	def caught(self):
		return self.trapped

	def __exit__(self, typ, val, tb):
		if val is not None and not isinstance(val, Exception):
			# Outcomes of the runner pass through.
			return False

		self.trapped = val
		if not isinstance(val, self.subject):
			raise Absurdity("raises", self.subject, val)
		return True

	def __xor__(self, call):
		"""
		# Contend that &call raises the exception type of the subject;
		# returns the exception.
		"""
		with self as exc:
			call()
		return exc()
	__rxor__ = __xor__

	def __lshift__(self, item):
		"""
		# Contend that &item is contained by the subject.
		"""
		if item not in self.subject:
			raise Absurdity("contains", self.subject, item)

for name, compare in (
	('__eq__', operator.eq),
	('__ne__', operator.ne),
	('__lt__', operator.lt),
	('__gt__', operator.gt),
	('__le__', operator.le),
	('__ge__', operator.ge),
	('__mod__', operator.is_),
):
	setattr(Contention, name, comparison(name, compare))
del name, compare

class Test(object):
	"""
	# The state of a single test function.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /exits/
		# Cleanup performed when the test completes.
	"""
	__slots__ = ('identifier', 'exits')

	def __init__(self, identifier):
		self.identifier = identifier
		self.exits = contextlib.ExitStack()

	def __truediv__(self, subject):
		return Contention(self, subject)
	__rtruediv__ = __truediv__

	def __floordiv__(self, subject):
		return Contention(self, subject, True)
	__rfloordiv__ = __floordiv__

	def isinstance(self, ob, types):
		if not isinstance(ob, types):
			raise Absurdity("isinstance", ob, types)

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))
