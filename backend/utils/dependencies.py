from fastapi import Request

from services.document_store import JsonDocumentStore


def get_store(request: Request) -> JsonDocumentStore:
    """The document store opened at startup."""
    return request.app.state.store
