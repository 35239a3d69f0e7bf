# enellerett/core/__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system:
- No HTTP handling.
- No file access.
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
