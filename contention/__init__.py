"""
# Test harness used by the projects in this repository.

# Test modules define functions whose names begin with `test_` and accept a
# single &core.Test parameter that is used to state contentions:

#!/pl/python
	def test_feature(test):
		test/featurelib.functionality() == expectation
		test/ValueError ^ (lambda: featurelib.invalid())

# A module can be executed directly with &engine.execute. Under pytest, the
# repository's `conftest.py` provides the `test` fixture.
"""
