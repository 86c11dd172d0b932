"""
# Provide the `test` parameter of contention style test functions to pytest.
"""
import pytest

from contention import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
