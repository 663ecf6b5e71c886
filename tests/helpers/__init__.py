"""Test helper modules for the USpin test suite.

- fake_manager: call-recording PackageManager with failure injection
- io_utils: dedenting file writer for YAML fixtures
"""
