"""Test package for the knowledge base client.

Unit tests cover isolated logic and integration tests cover full page flows.

Structure:
    - unit/: Models, configuration, formatting, API client and controller
    - integration/: Client and controller against an in-memory server
    - fakes.py: Recording views, fake fields and the in-memory server

Leverages pytest with pytest-check for soft assertions.
"""
