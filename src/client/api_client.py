"""Async HTTP client for the knowledge base server.

Wraps the documents and question-answering endpoints behind typed methods.
Every failure surfaces as a KnowledgeBaseError subclass so callers handle a
single exception family:

- RequestFailedError: the request never produced a response
- UnexpectedStatusError: a checked endpoint answered with a non-2xx status
- InvalidResponseError: the body is not JSON or does not match the schema

Only the upload and single-document endpoints check the HTTP status. Listing
and asking validate the body regardless of status.
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from src.client.config import ClientConfig, get_client_config
from src.models.schemas import (
    AnswerResponse,
    DocumentSummary,
    QuestionRequest,
    SelectedFile,
)

logger = logging.getLogger(__name__)

DOCUMENTS_PATH = "/api/documents"
ASK_PATH = "/api/qa/ask"

_document_list = TypeAdapter(list[DocumentSummary])


class KnowledgeBaseError(Exception):
    """Raised when a knowledge base request fails."""

    pass


class RequestFailedError(KnowledgeBaseError):
    """Raised when the server could not be reached or the transfer broke off."""

    pass


class UnexpectedStatusError(KnowledgeBaseError):
    """Raised when a checked endpoint returns a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(KnowledgeBaseError):
    """Raised when a response body cannot be parsed or validated."""

    pass


class KnowledgeBaseClient:
    """Client for the knowledge base REST API.

    A fresh httpx.AsyncClient is opened per call, so instances are cheap and
    hold no connection state between requests.

    Args:
        config: Client configuration. Loaded from the environment if omitted.
        transport: Optional httpx transport, used to route requests to an
            in-process app or a mock in tests.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {self._config.api_base_url}{path}")
        async with self._client() as client:
            try:
                return await client.request(method, path, **kwargs)
            except httpx.RequestError as e:
                raise RequestFailedError(f"Connection failed: {e}") from e

    @staticmethod
    def _check_status(response: httpx.Response) -> None:
        if not response.is_success:
            raise UnexpectedStatusError(
                response.status_code,
                f"HTTP {response.status_code} from {response.request.url.path}",
            )

    @staticmethod
    def _json(response: httpx.Response) -> object:
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Response from {response.request.url.path} is not JSON"
            ) from e

    async def list_documents(self) -> list[DocumentSummary]:
        """Fetch the full document collection.

        Returns:
            All documents, in server order.

        Raises:
            RequestFailedError: If the request fails in transit.
            InvalidResponseError: If the body is not a JSON list of documents.
        """
        response = await self._send("GET", DOCUMENTS_PATH)
        payload = self._json(response)
        try:
            return _document_list.validate_python(payload)
        except ValidationError as e:
            raise InvalidResponseError(f"Unexpected document list payload: {e}") from e

    async def get_document(self, document_id: int) -> DocumentSummary:
        """Fetch a single document by id.

        Args:
            document_id: Server-side document identifier.

        Returns:
            The stored document.

        Raises:
            RequestFailedError: If the request fails in transit.
            UnexpectedStatusError: If the server answers with a non-2xx status.
            InvalidResponseError: If the body is not a valid document.
        """
        response = await self._send("GET", f"{DOCUMENTS_PATH}/{document_id}")
        self._check_status(response)
        try:
            return DocumentSummary.model_validate(self._json(response))
        except ValidationError as e:
            raise InvalidResponseError(f"Unexpected document payload: {e}") from e

    async def upload_document(self, title: str, file: SelectedFile | None) -> None:
        """Upload a document as multipart/form-data.

        The ``file`` part is left out when no file is given; the request is
        still sent as multipart so the server can reject it.

        Args:
            title: Document title, sent as the ``title`` field.
            file: File to upload, sent as the ``file`` field.

        Raises:
            RequestFailedError: If the request fails in transit.
            UnexpectedStatusError: If the server answers with a non-2xx status.
        """
        parts: dict[str, tuple] = {"title": (None, title.encode("utf-8"))}
        if file is not None:
            parts["file"] = (file.name, file.content, file.content_type)

        response = await self._send("POST", DOCUMENTS_PATH, files=parts)
        self._check_status(response)

    async def ask_question(self, question: str) -> AnswerResponse:
        """Submit a question and return the answer pair.

        The HTTP status is not checked; a non-2xx response is logged and its
        body is still parsed as an answer.

        Args:
            question: Free-text question.

        Returns:
            The question as echoed by the server and its answer.

        Raises:
            RequestFailedError: If the request fails in transit.
            InvalidResponseError: If the body is not a valid answer pair.
        """
        payload = QuestionRequest(question=question)
        response = await self._send("POST", ASK_PATH, json=payload.model_dump())
        if not response.is_success:
            logger.warning(
                f"Question endpoint returned HTTP {response.status_code}; parsing body anyway"
            )
        try:
            return AnswerResponse.model_validate(self._json(response))
        except ValidationError as e:
            raise InvalidResponseError(f"Unexpected answer payload: {e}") from e
