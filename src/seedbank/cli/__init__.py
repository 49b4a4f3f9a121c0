"""
Command Line Interface Package

Command Structure:
- seedbank: main entry point with utility commands (version, config)
- seedbank obfuscate: load production records, obfuscate, save for integration tests
"""
