"""Page controller for the knowledge base page.

Holds the behavior of the page independent of NiceGUI. The controller is
constructed with references to the page's fields and views, so it can be
driven in tests with plain fakes.

Operations:
    - load_documents: refresh the document list
    - upload_document: submit the upload form, then refresh the list
    - ask_question: submit the question form and show the answer
    - open_document: show one document in full

Each operation returns an ActionResult. Results carrying a message are also
passed to the on_result callback, which the page uses for notifications.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from src.client.api_client import KnowledgeBaseClient, KnowledgeBaseError
from src.models.schemas import (
    ActionResult,
    AnswerResponse,
    DocumentSummary,
    SelectedFile,
)

logger = logging.getLogger(__name__)

MSG_LOAD_FAILED = "Error loading documents"
MSG_UPLOAD_OK = "Document uploaded successfully"
MSG_UPLOAD_FAILED = "Error uploading document"
MSG_ASK_FAILED = "Error asking question"
MSG_OPEN_FAILED = "Error loading document"


class TextField(Protocol):
    """An input element exposing its current text as ``value``."""

    value: str


class DocumentListView(Protocol):
    """Renders the document list and single-document details."""

    def render(self, documents: list[DocumentSummary]) -> None: ...

    def show_detail(self, document: DocumentSummary) -> None: ...


class AnswerView(Protocol):
    """Displays the latest question/answer pair."""

    def show(self, answer: AnswerResponse) -> None: ...


class FileSelection:
    """Holds the file currently picked in the upload control.

    Args:
        on_clear: Called after the selection is cleared, e.g. to reset the
            upload widget.
    """

    def __init__(self, on_clear: Callable[[], None] | None = None) -> None:
        self.value: SelectedFile | None = None
        self._on_clear = on_clear

    def select(self, file: SelectedFile) -> None:
        self.value = file

    def clear(self) -> None:
        self.value = None
        if self._on_clear is not None:
            self._on_clear()


class PageController:
    """Binds the page's fields and views to the knowledge base client.

    Args:
        client: API client used for every request.
        title_field: Upload form title input.
        file_selection: Upload form file selection.
        question_field: Question form input.
        document_list: View that renders the document list.
        answer_view: View that renders the answer area.
        on_result: Receives every result that carries a user-facing message.
    """

    def __init__(
        self,
        client: KnowledgeBaseClient,
        title_field: TextField,
        file_selection: FileSelection,
        question_field: TextField,
        document_list: DocumentListView,
        answer_view: AnswerView,
        on_result: Callable[[ActionResult], None] | None = None,
    ) -> None:
        self._client = client
        self._title = title_field
        self._file = file_selection
        self._question = question_field
        self._documents = document_list
        self._answer = answer_view
        self._on_result = on_result

    def _report(self, result: ActionResult) -> ActionResult:
        if result.message is not None and self._on_result is not None:
            self._on_result(result)
        return result

    async def initialize(self) -> ActionResult:
        """Run the page-load routine: render the current document list."""
        return await self.load_documents()

    async def load_documents(self) -> ActionResult:
        """Fetch all documents and replace the rendered list.

        On failure the previously rendered list is left as it was.
        """
        try:
            documents = await self._client.list_documents()
        except KnowledgeBaseError as e:
            logger.error(f"Error loading documents: {e}")
            return self._report(ActionResult.failure(MSG_LOAD_FAILED, str(e)))

        self._documents.render(documents)
        logger.info(f"Rendered {len(documents)} documents")
        return self._report(ActionResult.success())

    async def upload_document(self) -> ActionResult:
        """Submit the title and selected file, then reload the list.

        Fields are cleared only after a successful upload so the user can
        retry a failed one.
        """
        title = self._title.value
        file = self._file.value

        try:
            await self._client.upload_document(title, file)
        except KnowledgeBaseError as e:
            logger.error(f"Error uploading document: {e}")
            return self._report(ActionResult.failure(MSG_UPLOAD_FAILED, str(e)))

        logger.info(f"Uploaded document '{title}'")
        result = self._report(ActionResult.success(MSG_UPLOAD_OK))
        self._title.value = ""
        self._file.clear()
        await self.load_documents()
        return result

    async def ask_question(self) -> ActionResult:
        """Submit the question and show the returned answer pair."""
        try:
            answer = await self._client.ask_question(self._question.value)
        except KnowledgeBaseError as e:
            logger.error(f"Error asking question: {e}")
            return self._report(ActionResult.failure(MSG_ASK_FAILED, str(e)))

        self._answer.show(answer)
        self._question.value = ""
        return self._report(ActionResult.success())

    async def open_document(self, document_id: int) -> ActionResult:
        """Fetch one document and show it in full."""
        try:
            document = await self._client.get_document(document_id)
        except KnowledgeBaseError as e:
            logger.error(f"Error loading document {document_id}: {e}")
            return self._report(ActionResult.failure(MSG_OPEN_FAILED, str(e)))

        self._documents.show_detail(document)
        return self._report(ActionResult.success())
