"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and wire key mapping
    - client/: Request building and error mapping via httpx.MockTransport
    - ui/: Formatting helpers and PageController behavior

Uses fake fields and recording views instead of NiceGUI widgets.
"""
