"""Text helpers for rendering documents and answers."""

from datetime import datetime

from pydantic import BaseModel

from src.models.schemas import AnswerResponse, DocumentSummary

PREVIEW_LENGTH = 100
ELLIPSIS = "..."


class DocumentEntry(BaseModel):
    """Display values for one row of the document list."""

    document_id: int | None
    title: str
    created: str
    preview: str


def content_preview(content: str) -> str:
    """Return the first 100 characters of content followed by an ellipsis.

    The ellipsis is always appended, even when nothing was cut.
    """
    return content[:PREVIEW_LENGTH] + ELLIPSIS


def format_created_at(created_at: datetime) -> str:
    """Format a creation timestamp as a date.

    Uses the process LC_TIME locale, which main() takes from the environment
    at startup. Without it, Python stays in the C locale (MM/DD/YY).
    """
    return created_at.strftime("%x")


def document_entries(documents: list[DocumentSummary]) -> list[DocumentEntry]:
    """Build one list entry per document, in order."""
    return [
        DocumentEntry(
            document_id=doc.id,
            title=doc.title,
            created=format_created_at(doc.created_at),
            preview=content_preview(doc.content),
        )
        for doc in documents
    ]


def answer_lines(answer: AnswerResponse) -> tuple[str, str]:
    return f"Q: {answer.question}", f"A: {answer.answer}"
