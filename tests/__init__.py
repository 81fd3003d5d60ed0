#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run without external services:

    # Run all tests
    python -m pytest tests/ -v

    # Only tests that touch the (in-memory SQLite) database
    python -m pytest tests/ -v -m "db"

    # Using unittest (TestCase-based modules only)
    python -m unittest discover tests -v

Repository and API tests use an in-memory SQLite database created from
the SQLAlchemy models; the portable column types (JSON with a JSONB
variant) make this possible. LLM clients and Redis are always mocked.
"""
