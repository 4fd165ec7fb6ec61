"""Configuration and injectable fixtures for Pytest."""
pytest_plugins = ["labbook.testing.fixtures"]
