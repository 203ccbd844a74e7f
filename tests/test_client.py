import httpx
import pytest
from httpx import ASGITransport

from note_summarizer.client import SummarizerClient
from note_summarizer.main import create_application


@pytest.fixture(scope="module")
def test_app():
    return create_application()


@pytest.mark.anyio
async def test_client_returns_server_summary(test_app, four_sentence_text):
    client = SummarizerClient(
        base_url="http://testserver", transport=ASGITransport(app=test_app)
    )
    summary = await client.summarize(four_sentence_text, "medium")
    assert summary == "The main result of the study was clear and simple to read."


@pytest.mark.anyio
async def test_client_falls_back_on_server_error(four_sentence_text):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "http_error"})

    client = SummarizerClient(
        base_url="http://summarizer", transport=httpx.MockTransport(handler)
    )
    summary = await client.summarize(four_sentence_text, "medium")
    assert summary == "Cats sleep a lot during the day."


@pytest.mark.anyio
async def test_client_falls_back_when_unreachable(four_sentence_text):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = SummarizerClient(
        base_url="http://summarizer", transport=httpx.MockTransport(handler)
    )
    summary = await client.summarize(four_sentence_text, "long")
    assert summary == (
        "Cats sleep a lot during the day. "
        "The main result of the study was clear and simple to read."
    )


@pytest.mark.anyio
async def test_client_validate_and_upload(test_app):
    client = SummarizerClient(
        base_url="http://testserver", transport=ASGITransport(app=test_app)
    )
    report = await client.validate("Too short here.")
    assert report["isValid"] is False

    uploaded = await client.upload("notes.txt", b"Plain text notes for later.")
    assert uploaded["content"] == "Plain text notes for later."


@pytest.mark.anyio
async def test_client_upload_propagates_errors(test_app):
    client = SummarizerClient(
        base_url="http://testserver", transport=ASGITransport(app=test_app)
    )
    with pytest.raises(httpx.HTTPStatusError):
        await client.upload("slides.pdf", b"%PDF", content_type="application/pdf")
