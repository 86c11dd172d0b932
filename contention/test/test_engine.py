import types

from .. import core
from .. import engine

def sample_module(failing=False):
	"""
	# Construct a module whose tests are defined out of alphabetical order.
	"""
	m = types.ModuleType('sample')
	m.calls = []

	def test_zulu(test):
		m.calls.append('zulu')
		test/1 == 1

	def test_alpha(test):
		m.calls.append('alpha')
		if failing:
			test/1 == 2

	def test_skipped(test):
		m.calls.append('skipped')
		test.skip("not applicable")

	def helper(test):
		pass

	m.test_zulu = test_zulu
	m.test_alpha = test_alpha
	m.test_skipped = test_skipped
	m.helper = helper
	m.test_value = 1
	return m

def test_gather_order(test):
	m = sample_module()
	test/engine.gather(m) == ['test_zulu', 'test_alpha', 'test_skipped']

def test_gather_without_code(test):
	m = sample_module()
	m.test_builtin = len
	test/engine.gather(m)[-1] == 'test_builtin'
	test/engine.source_line(len) == None

def test_execute(test):
	m = sample_module()
	engine.execute(m)
	test/m.calls == ['zulu', 'alpha', 'skipped']

def test_execute_failure(test):
	m = sample_module(failing=True)
	fate = None
	try:
		engine.execute(m)
	except core.Fate as err:
		fate = err

	test.isinstance(fate, core.Fate)
	test/fate.subtype == 'fail'
	test.isinstance(fate.__cause__, core.Absurdity)

	# The harness stops at the first failure.
	test/m.calls == ['zulu', 'alpha']

def test_harness_reveal(test):
	h = engine.Harness.from_module(sample_module())
	test/h.identity == 'sample'
	fates = [(x.identifier, x.fate.subtype) for x in h.reveal()]
	test/fates == [
		('test_zulu', 'return'),
		('test_alpha', 'return'),
		('test_skipped', 'skip'),
	]

def test_seal_once(test):
	t = core.Test('once', lambda x: None)
	t.seal()
	test/t.fate.negative == False
	test/RuntimeError ^ t.seal

def test_exits_closed(test):
	closed = []
	def subject(t):
		t.exits.callback(closed.append, 'closed')

	h = engine.Harness('closing', [core.Test('subject', subject)])
	list(h.reveal())
	test/closed == ['closed']

def test_contention(test):
	t = core.Test('contention', None)
	test/core.Absurdity ^ (lambda: (t/1 == 2))
	test/core.Absurdity ^ (lambda: (t/1 != 1))
	test/core.Absurdity ^ (lambda: (t/[] % []))
	test/core.Absurdity ^ (lambda: t.isinstance(1, str))
	test/core.Absurdity ^ (lambda: (t/ValueError ^ (lambda: None)))

	with test/core.Absurdity as exc:
		t/'former' == 'latter'
	test/str(exc()) == "'former' == 'latter'"
	test/exc().operator == '__eq__'

if __name__ == '__main__':
	import sys
	engine.execute(sys.modules[__name__])
