from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ActionStatus(str, Enum):
    """Outcome of a page action."""

    SUCCESS = "success"
    FAILURE = "failure"


class DocumentSummary(BaseModel):
    """A stored document as returned by the documents endpoint.

    Attributes:
        id: Server-side identifier, when the server exposes one.
        title: Document title given at upload time.
        content: Full document text.
        created_at: Creation timestamp (``createdAt`` on the wire).
        file_type: Content type of the uploaded file (``fileType`` on the wire).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    title: str
    content: str
    created_at: datetime = Field(..., alias="createdAt")
    file_type: str | None = Field(None, alias="fileType")


class QuestionRequest(BaseModel):
    """Request payload for the question-answering endpoint.

    Attributes:
        question: Free-text question. May be empty; the server validates.
    """

    question: str


class AnswerResponse(BaseModel):
    """Question/answer pair returned by the question-answering endpoint.

    Attributes:
        question: The question as echoed by the server.
        answer: The server's answer text.
    """

    model_config = ConfigDict(extra="ignore")

    question: str
    answer: str


class SelectedFile(BaseModel):
    """A file picked in the upload control, held until submission.

    Attributes:
        name: Original file name.
        content: Raw file bytes.
        content_type: MIME type reported by the browser.
    """

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


class ActionResult(BaseModel):
    """Structured result of a page action.

    Attributes:
        status: Whether the action succeeded or failed.
        message: User-facing text to present, if any.
        error: Technical detail of the failure.
    """

    status: ActionStatus
    message: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ActionStatus.SUCCESS

    @classmethod
    def success(cls, message: str | None = None) -> "ActionResult":
        return cls(status=ActionStatus.SUCCESS, message=message)

    @classmethod
    def failure(cls, message: str, error: str | None = None) -> "ActionResult":
        return cls(status=ActionStatus.FAILURE, message=message, error=error)
