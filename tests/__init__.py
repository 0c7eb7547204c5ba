# tests/__init__.py
"""
Test suite for the Pokemon Review API.

Organization:
- `http_api`: controller tests with mocked repositories.
- `repositories`: repository tests against an in-memory SQLite database.
- `integration`: end-to-end HTTP flows against an in-memory SQLite database.
"""
