"""Integration tests for the client and controller working as a system.

Coverage:
    - API client against a FastAPI server over ASGITransport
    - Full page flow from initial load to upload, viewing and asking
    - The NiceGUI page itself, through a simulated user

The server keeps documents in memory. No network access is required.
"""
