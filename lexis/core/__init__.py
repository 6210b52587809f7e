# lexis\core\__init__.py
"""
Core Domain Layer.

This package contains the pure linguistic logic and entities of the system.
It follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on infrastructure (files, network, processes).
- Defines Interfaces (Ports) that collaborators must implement.
"""
