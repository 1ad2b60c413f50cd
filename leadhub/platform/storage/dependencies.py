from fastapi import Request

from leadhub.platform.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the storage injected by ``create_app``."""
    return request.app.state.storage
