"""
# Collect the `test_` functions of a module and resolve their fates in the
# order they were written.
"""
from . import core

def source_line(subject, AttributeError=AttributeError):
	"""
	# The first line of the &subject's code; &None for callables without code.
	"""
	try:
		return subject.__code__.co_firstlineno
	except AttributeError:
		return None

def gather(module, prefix='test_', getattr=getattr):
	"""
	# The names of the callables in &module starting with &prefix, ordered
	# by their position in the source. Those without a position follow, by name.
	"""
	names = sorted(
		name for name in dir(module)
		if name.startswith(prefix) and callable(getattr(module, name))
	)

	def position(name):
		line = source_line(getattr(module, name))
		return (line is None, line or 0)

	names.sort(key=position)
	return names

class Harness(object):
	"""
	# The tests of a module and the means to run them.
	"""

	Test = core.Test

	@classmethod
	def from_module(Class, module):
		tests = [Class.Test(name, getattr(module, name)) for name in gather(module)]
		return Class(module.__name__, tests)

	def __init__(self, identity, tests):
		self.identity = identity
		self.tests = tests

	def reveal(self):
		"""
		# Seal each test in turn, closing its exit stack afterwards, and yield it.
		"""
		for test in self.tests:
			with test.exits:
				test.seal()
			yield test

def execute(module):
	"""
	# Run the tests of &module, raising the &core.Fate of the first one that
	# did not succeed.
	"""
	for test in Harness.from_module(module).reveal():
		if test.fate.negative:
			raise test.fate
