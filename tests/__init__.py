# tests\__init__.py
"""
Test Suite for en eller ett.

Organization:
- `core`: Domain models and use cases with mocked ports.
- `adapters`: Word list loader, in-memory store, hit recorder and the HTTP API.
"""
