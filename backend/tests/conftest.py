"""Test fixtures: temporary storage directory and FastAPI test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.main import create_app


@pytest.fixture
def files_dir(tmp_path, monkeypatch):
    """Point the app at a storage directory that does not exist yet."""
    path = tmp_path / "public" / "files"
    monkeypatch.setattr(settings, "files_dir", str(path))
    return path


@pytest_asyncio.fixture
async def client(files_dir):
    """Provide an async test client bound to the temporary storage directory."""
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
