"""
# Test primitives: &Test, the &Contention objects it produces, and the
# &Absurdity and &Fate exceptions that report the outcome.
"""
import builtins
import operator
import functools
import contextlib

class Absurdity(Exception):
	"""
	# A contention did not hold.
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

	def __init__(self, operator, former, latter):
		super().__init__(operator, former, latter)
		self.operator = operator
		self.former = former
		self.latter = latter

	def __str__(self):
		op = self.symbols.get(self.operator, self.operator)
		return ' '.join((repr(self.former), op, repr(self.latter)))

class Contention(object):
	"""
	# The left side of an assertion made with `test/subject`.

	#!/pl/python
		def test_feature(test):
			test/featurelib.functionality() == expectation
			test/ValueError ^ (lambda: featurelib.invalid())
	"""
	__slots__ = ('test', 'object', 'storage')

	def __init__(self, test, object):
		self.test = test
		self.object = object

	def _operation(name, check):
		def contend(self, latter):
			if not check(self.object, latter):
				raise self.test.Absurdity(name, self.object, latter)
		contend.__name__ = name
		return contend

	__eq__ = _operation('__eq__', operator.eq)
	__ne__ = _operation('__ne__', operator.ne)
	__lt__ = _operation('__lt__', operator.lt)
	__gt__ = _operation('__gt__', operator.gt)
	__le__ = _operation('__le__', operator.le)
	__ge__ = _operation('__ge__', operator.ge)
	__mod__ = _operation('__mod__', operator.is_)
	del _operation

	##
	# `with test/Exception as exc:` traps the exception for inspection.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		self.storage = val
		if isinstance(val, self.test.Fate):
			return None

		if not isinstance(val, self.object):
			raise self.test.Absurdity("isinstance", self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Contend that calling &subject raises the exception class on the left.
		"""
		with self as exc:
			subject()
		return exc()

class Fate(BaseException):
	"""
	# The conclusion of a &Test. Raised by &Test.skip and trapped by &Test.seal.
	"""

	impacts = {
		'return': 1,
		'skip': 0,
		'fail': -1,
		'interrupt': -1,
	}

	line = None

	def __init__(self, content, subtype='fail'):
		super().__init__(content)
		self.content = content
		self.subtype = subtype

	@property
	def negative(self):
		"""
		# Whether the fate should be reported as a failure.
		"""
		return self.impacts[self.subtype] < 0

class Test(object):
	"""
	# A single test function and its resolution.

	# [ Properties ]
	# /identifier/
		# The name of the test function in its module.
	# /subject/
		# The callable performing the contentions; given the &Test as its only argument.
	# /fate/
		# The &Fate assigned by &seal.
	# /exits/
		# A &contextlib.ExitStack for cleanup registered by the subject.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args)

	def skip(self, condition):
		"""
		# Conclude the test as skipped when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def seal(self, Exception=Exception):
		"""
		# Run the subject and assign the &fate. Control exceptions such as
		# &KeyboardInterrupt are noted and re-raised.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		tb = None
		try:
			self.subject(self)
			self.fate = self.Fate(None, subtype='return')
		except self.Fate as fate:
			tb = fate.__traceback__.tb_next
			self.fate = fate
		except Exception as err:
			tb = err.__traceback__.tb_next
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise

		if tb is not None:
			self.fate.line = tb.tb_lineno
