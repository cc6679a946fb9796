"""Pydantic models for API payloads and page results.

Provides type safety and validation at the boundary with the server.

Models:
    - DocumentSummary: Stored document as listed by the server
    - QuestionRequest: Outgoing question payload
    - AnswerResponse: Returned question/answer pair
    - SelectedFile: File picked in the upload control
    - ActionResult: Success/failure outcome of a page action
"""

from src.models.schemas import (
    ActionResult,
    ActionStatus,
    AnswerResponse,
    DocumentSummary,
    QuestionRequest,
    SelectedFile,
)

__all__ = [
    "ActionResult",
    "ActionStatus",
    "AnswerResponse",
    "DocumentSummary",
    "QuestionRequest",
    "SelectedFile",
]
