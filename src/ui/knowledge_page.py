"""NiceGUI page for uploading documents and asking questions."""

import os
from collections.abc import Awaitable, Callable

from nicegui import events, ui

from src.client.api_client import KnowledgeBaseClient
from src.models.schemas import (
    ActionResult,
    AnswerResponse,
    DocumentSummary,
    SelectedFile,
)
from src.ui.controller import FileSelection, PageController
from src.ui.formatting import (
    DocumentEntry,
    answer_lines,
    document_entries,
    format_created_at,
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .document-entry { transition: background 0.2s; }
    .document-entry:hover { background: #f3f4f6; }

    .answer-area {
        display: none;
        background: #f3f4f6;
        border-radius: 12px;
    }
    .answer-area.show { display: block; }

    .primary-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
</style>
"""


class DocumentListPanel:
    """Renders documents into a container, replacing its contents each time."""

    def __init__(
        self,
        container: ui.column,
        dialog: ui.dialog,
        on_open: Callable[[int], Awaitable[ActionResult]],
    ) -> None:
        self._container = container
        self._dialog = dialog
        self._on_open = on_open

    def render(self, documents: list[DocumentSummary]) -> None:
        self._container.clear()
        with self._container:
            for entry in document_entries(documents):
                self._render_entry(entry)

    def _render_entry(self, entry: DocumentEntry) -> None:
        card_classes = "w-full document-entry cursor-pointer"
        with ui.card().classes(card_classes).props("flat bordered").mark("document") as card:
            with ui.row().classes("w-full justify-between items-baseline"):
                ui.label(entry.title).classes("text-base font-semibold")
                ui.label(entry.created).classes("text-xs text-gray-500")
            ui.label(entry.preview).classes("text-sm text-gray-700")
        if entry.document_id is not None:
            card.on("click", lambda _, doc_id=entry.document_id: self._on_open(doc_id))

    def show_detail(self, document: DocumentSummary) -> None:
        self._dialog.clear()
        with self._dialog, ui.card().classes("w-full max-w-2xl"):
            with ui.row().classes("w-full justify-between items-baseline"):
                ui.label(document.title).classes("text-lg font-semibold")
                ui.label(format_created_at(document.created_at)).classes(
                    "text-xs text-gray-500"
                )
            if document.file_type:
                ui.label(document.file_type).classes("text-xs text-gray-400 font-mono")
            ui.label(document.content).classes("text-sm whitespace-pre-wrap")
            ui.button("Close", on_click=self._dialog.close).props("flat")
        self._dialog.open()


class AnswerPanel:
    """Shows the latest question/answer pair and reveals the answer area."""

    def __init__(self, container: ui.element) -> None:
        self._container = container

    def show(self, answer: AnswerResponse) -> None:
        question_line, answer_line = answer_lines(answer)
        self._container.clear()
        with self._container:
            ui.label(question_line).classes("font-semibold")
            ui.label(answer_line).classes("mt-2 whitespace-pre-wrap")
        self._container.classes(add="show")


def notify_result(result: ActionResult) -> None:
    """Present an action result as a toast notification."""
    ui.notify(result.message, type="positive" if result.ok else "negative")


@ui.page("/")
def knowledge_page() -> None:
    """Main page: upload form, document list and question form."""
    ui.add_head_html(CUSTOM_CSS)
    client = KnowledgeBaseClient()
    controller: PageController

    async def handle_upload(e: events.UploadEventArguments) -> None:
        file_selection.select(
            SelectedFile(
                name=e.file.name,
                content=await e.file.read(),
                content_type=e.file.content_type or "application/octet-stream",
            )
        )

    async def open_document(document_id: int) -> ActionResult:
        return await controller.open_document(document_id)

    detail_dialog = ui.dialog()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container"),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
            ui.icon("library_books").classes("text-white text-3xl")
            ui.label("Knowledge Base").classes("text-lg font-semibold text-white")

        with ui.column().classes("w-full p-5 gap-6"):
            # Upload form
            with ui.column().classes("w-full gap-2"):
                ui.label("Upload Document").classes("text-base font-semibold")
                title_input = ui.input(label="Title").classes("w-full").mark("title")
                file_upload = (
                    ui.upload(label="File", auto_upload=True, on_upload=handle_upload)
                    .props("flat bordered")
                    .classes("w-full")
                    .mark("file")
                )
                file_selection = FileSelection(on_clear=file_upload.reset)
                file_upload.on("removed", file_selection.clear, args=[])
                upload_btn = ui.button("Upload", icon="upload").classes("primary-btn text-white")

            # Question form
            with ui.column().classes("w-full gap-2"):
                ui.label("Ask a Question").classes("text-base font-semibold")
                with ui.row().classes("w-full gap-3 items-end no-wrap"):
                    question_input = ui.input(label="Question").classes("flex-grow").mark("question")
                    ask_btn = ui.button("Ask", icon="send").classes("primary-btn text-white")
                answer_area = ui.element("div").classes("w-full answer-area px-4 py-3").mark("answer")

            # Documents
            with ui.column().classes("w-full gap-2"):
                ui.label("Documents").classes("text-base font-semibold")
                document_list = ui.column().classes("w-full gap-2").mark("documentList")

    controller = PageController(
        client=client,
        title_field=title_input,
        file_selection=file_selection,
        question_field=question_input,
        document_list=DocumentListPanel(document_list, detail_dialog, open_document),
        answer_view=AnswerPanel(answer_area),
        on_result=notify_result,
    )

    upload_btn.on_click(controller.upload_document)
    ask_btn.on_click(controller.ask_question)
    question_input.on("keydown.enter", controller.ask_question)

    ui.timer(0, controller.initialize, once=True)


def main() -> None:
    ui.run(
        title="Knowledge Base",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8081")),
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "knowledge-client-secret"),
    )


if __name__ == "__main__":
    main()
