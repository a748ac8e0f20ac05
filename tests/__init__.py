"""Test suite for the album client.

Test structure follows the test pyramid:
- unit/: Unit tests - Test core, domain and adapters in isolation
- integration/: Integration tests - Drive the albums API client against
  mocked HTTP (pytest-httpx) or stub httpx transports

No test touches the real network.
"""
