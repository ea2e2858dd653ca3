"""FastAPI dependencies shared by route modules."""

from fastapi import Request

from docstore.core.store import Store


def get_store(request: Request) -> Store:
    return request.app.state.store
