"""Tests for the upload page."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_index_page(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert 'id="file-upload"' in resp.text
    assert "/static/app.js" in resp.text


@pytest.mark.asyncio
async def test_page_script_uses_file_api(client: AsyncClient):
    resp = await client.get("/static/app.js")
    assert resp.status_code == 200
    assert '"/api/files"' in resp.text
    assert 'form.append("file"' in resp.text


@pytest.mark.asyncio
async def test_page_script_encodes_download_links(client: AsyncClient):
    resp = await client.get("/static/app.js")
    assert "encodeURIComponent(record.name)" in resp.text
