# tests\__init__.py
"""
Test Suite for lexis.

Organization:
- `core`: Domain model, grouping and use case tests, with the language context
  supplied through fixtures.
- `shared`: Configuration, logging, tracing and container wiring.
"""
