"""
# Provide &civil.test.core.Test to the test functions taking `test`.
"""
import pytest

from civil.test import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.name)
	with t.exits:
		yield t
