"""Page action tests."""

import pytest
from httpx import AsyncClient


async def _create_document(client: AsyncClient, headers: dict) -> str:
    resp = await client.post("/v1/actions/createDocument", json={"title": "Doc"}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["document"]["id"]


@pytest.mark.asyncio
async def test_create_and_list_pages(client: AsyncClient, auth_headers):
    headers = auth_headers()
    doc_id = await _create_document(client, headers)

    resp = await client.post("/v1/actions/createPage", json={
        "documentId": doc_id,
        "pageNumber": 1,
        "textContent": "Abstract. We study...",
    }, headers=headers)
    assert resp.status_code == 200, resp.text
    page = resp.json()["data"]["page"]
    assert page["documentId"] == doc_id
    assert page["pageNumber"] == 1
    assert page["textContent"] == "Abstract. We study..."
    assert page["createdAt"]

    resp = await client.post("/v1/actions/createPage", json={
        "documentId": doc_id,
        "pageNumber": 2,
    }, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["page"]["textContent"] is None

    resp = await client.post("/v1/actions/listPages", json={"documentId": doc_id}, headers=headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["total"] == 2
    assert page in data["items"]


@pytest.mark.asyncio
async def test_duplicate_page_numbers_are_accepted(client: AsyncClient, auth_headers):
    headers = auth_headers()
    doc_id = await _create_document(client, headers)

    for _ in range(2):
        resp = await client.post("/v1/actions/createPage", json={
            "documentId": doc_id,
            "pageNumber": 3,
        }, headers=headers)
        assert resp.status_code == 200

    resp = await client.post("/v1/actions/listPages", json={"documentId": doc_id}, headers=headers)
    items = resp.json()["data"]["items"]
    assert [p["pageNumber"] for p in items] == [3, 3]
    assert items[0]["id"] != items[1]["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("page_number", [0, -4, 1.5, "2"])
async def test_page_number_must_be_positive_integer(client: AsyncClient, auth_headers, page_number):
    headers = auth_headers()
    doc_id = await _create_document(client, headers)

    resp = await client.post("/v1/actions/createPage", json={
        "documentId": doc_id,
        "pageNumber": page_number,
    }, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_create_page_requires_document_ownership(client: AsyncClient, auth_headers):
    owner = auth_headers("owner")
    doc_id = await _create_document(client, owner)

    resp = await client.post("/v1/actions/createPage", json={
        "documentId": doc_id,
        "pageNumber": 1,
    }, headers=auth_headers("someone-else"))
    assert resp.status_code == 404
    assert resp.json()["error"] == {"code": "NOT_FOUND", "message": "PDF document not found."}

    resp = await client.post("/v1/actions/listPages", json={"documentId": doc_id}, headers=owner)
    assert resp.json()["data"]["total"] == 0


@pytest.mark.asyncio
async def test_list_pages_for_foreign_document(client: AsyncClient, auth_headers):
    doc_id = await _create_document(client, auth_headers("owner"))

    resp = await client.post(
        "/v1/actions/listPages", json={"documentId": doc_id}, headers=auth_headers("other"),
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_list_pages_requires_document_id(client: AsyncClient, auth_headers):
    resp = await client.post("/v1/actions/listPages", json={}, headers=auth_headers())
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_list_pages_foreign_document_looks_missing(client: AsyncClient, auth_headers):
    doc_id = await _create_document(client, auth_headers("owner"))
    other = auth_headers("other")

    foreign = await client.post("/v1/actions/listPages", json={"documentId": doc_id}, headers=other)
    missing = await client.post("/v1/actions/listPages", json={"documentId": "no-such-doc"}, headers=other)

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()
