"""Test doubles for the page controller and an in-memory knowledge base server.

- FakeField: stands in for a NiceGUI input
- RecordingListView / RecordingAnswerView: record what the controller renders
- create_backend: FastAPI app serving the same endpoints as the real server
- FakeServer: MockTransport handler with canned responses
"""

import json
from collections import Counter
from datetime import datetime
from typing import Annotated

import httpx
from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from src.models.schemas import AnswerResponse, DocumentSummary
from src.ui.formatting import DocumentEntry, answer_lines, document_entries

FIXED_CREATED_AT = datetime(2024, 3, 15, 9, 30, 0)


class FakeField:
    """Input element with a mutable ``value``."""

    def __init__(self, value: str = "") -> None:
        self.value = value


class RecordingListView:
    """Records each full render and each detail view."""

    def __init__(self) -> None:
        self.renders: list[list[DocumentSummary]] = []
        self.details: list[DocumentSummary] = []

    def render(self, documents: list[DocumentSummary]) -> None:
        self.renders.append(list(documents))

    def show_detail(self, document: DocumentSummary) -> None:
        self.details.append(document)

    @property
    def entries(self) -> list[DocumentEntry]:
        """Entries of the most recent render."""
        return document_entries(self.renders[-1]) if self.renders else []


class RecordingAnswerView:
    """Records shown answers and whether the area has been revealed."""

    def __init__(self) -> None:
        self.lines: tuple[str, str] | None = None
        self.visible = False
        self.shown: list[AnswerResponse] = []

    def show(self, answer: AnswerResponse) -> None:
        self.shown.append(answer)
        self.lines = answer_lines(answer)
        self.visible = True


def create_backend() -> FastAPI:
    """Create an in-memory knowledge base server.

    Request counts are kept on ``app.state`` for assertions.
    """
    app = FastAPI()
    app.state.documents = []
    app.state.list_calls = 0
    app.state.questions = []

    @app.get("/api/documents")
    async def list_documents() -> list[dict]:
        app.state.list_calls += 1
        return app.state.documents

    @app.get("/api/documents/{document_id}")
    async def get_document(document_id: int) -> dict:
        for doc in app.state.documents:
            if doc["id"] == document_id:
                return doc
        raise HTTPException(status_code=404, detail="Document not found")

    @app.post("/api/documents")
    async def upload_document(
        title: Annotated[str, Form()],
        file: Annotated[UploadFile, File()],
    ) -> dict:
        content = (await file.read()).decode("utf-8")
        doc = {
            "id": len(app.state.documents) + 1,
            "title": title,
            "content": content,
            "fileType": file.content_type,
            "createdAt": FIXED_CREATED_AT.isoformat(),
        }
        app.state.documents.append(doc)
        return doc

    @app.post("/api/qa/ask")
    async def ask(payload: dict[str, str]) -> dict[str, str]:
        question = payload.get("question", "")
        app.state.questions.append(question)
        return {"question": question, "answer": f"Answer to: {question}"}

    return app


SAMPLE_DOCUMENTS = [
    {"id": 1, "title": "Handbook", "content": "a" * 150, "createdAt": "2024-03-15T09:30:00"},
    {"id": 2, "title": "Memo", "content": "short", "createdAt": "2024-03-16T10:00:00"},
]


class FakeServer:
    """httpx.MockTransport handler with canned responses per route.

    Counts calls per route and keeps the raw upload bodies. Routes listed
    in ``fail`` raise a connection error instead of answering.
    """

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()
        self.documents: list[dict] = list(SAMPLE_DOCUMENTS)
        self.upload_status = 200
        self.uploads: list[bytes] = []
        self.fail: set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        route = f"{request.method} {request.url.path}"
        self.calls[route] += 1
        if route in self.fail:
            raise httpx.ConnectError("Connection refused", request=request)
        if route == "GET /api/documents":
            return httpx.Response(200, json=self.documents)
        if route == "POST /api/documents":
            self.uploads.append(request.content)
            return httpx.Response(self.upload_status)
        if route == "POST /api/qa/ask":
            question = json.loads(request.content)["question"]
            return httpx.Response(200, json={"question": question, "answer": "A1"})
        if route == "GET /api/documents/1":
            return httpx.Response(200, json=SAMPLE_DOCUMENTS[0])
        return httpx.Response(404, json={"detail": "Not found"})
