"""Knowledge Base Client - document upload and Q&A web page.

Combines NiceGUI for the page, HTTPX for talking to the knowledge base
server, and Pydantic for data validation.

Components:
    - client: Async API client and configuration
    - ui: Page controller and NiceGUI page
    - models: Request/response schemas and action results
"""

__version__ = "0.1.0"
