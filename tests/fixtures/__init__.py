"""
Test Fixtures

Synthetic bank record builders shared by unit and integration tests.
"""
