"""
Test Suite for Seed Bank

Test Structure:
- fixtures/: Synthetic record builders
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

All test data is synthetic. Real owner data is never included in tests.
"""
