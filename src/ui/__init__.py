"""NiceGUI interface - thin visualization layer for the knowledge base page.

Responsibilities:
    - Upload form for titled documents
    - Document list with previews and full-text detail dialog
    - Question form with answer area

Behavior lives in PageController, which works against injected fields and
views. The NiceGUI page only builds widgets and presents results.
"""
