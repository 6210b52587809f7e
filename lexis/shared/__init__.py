# lexis\shared\__init__.py
"""
Cross-cutting infrastructure: settings, logging, tracing and dependency wiring.
"""
