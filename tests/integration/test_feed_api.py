"""Integration tests for the RSS feed endpoints."""

import xml.etree.ElementTree as ET

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from newshub.config import Settings
from newshub.main import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings(_env_file=None, base_url="https://news.example.com", feed_max_items=2))


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def _publish(client: AsyncClient, title: str, day: int, **extra) -> dict:
    payload = {
        "title": title,
        "content": "Body",
        "excerpt": f"Summary of {title}",
        "author": "Desk",
        "category": "World",
        "status": "published",
        "publish_date": f"2024-03-{day:02d}T08:00:00Z",
    }
    payload.update(extra)
    response = await client.post("/api/v1/articles", json=payload)
    assert response.status_code == 201
    return response.json()


def _items(rss: str) -> list[str]:
    channel = ET.fromstring(rss).find("channel")
    return [ET.tostring(item, encoding="unicode") for item in channel.findall("item")]


@pytest.mark.asyncio
async def test_inline_and_attachment_serve_same_items(app: FastAPI):
    async with _client(app) as client:
        await _publish(client, "One", 1, image_url="https://img.example.com/1.jpg")
        await _publish(client, "Two", 2)

        inline = await client.get("/api/v1/rss")
        attachment = await client.get("/api/v1/rss.xml")

    assert inline.status_code == attachment.status_code == 200
    assert inline.headers["content-type"] == "application/rss+xml; charset=utf-8"
    assert attachment.headers["content-type"] == "application/rss+xml; charset=utf-8"
    assert inline.headers["content-disposition"] == 'inline; filename="rss.xml"'
    assert attachment.headers["content-disposition"] == 'attachment; filename="rss.xml"'
    assert inline.text.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert _items(inline.text) == _items(attachment.text)


@pytest.mark.asyncio
async def test_feed_is_truncated_newest_first(app: FastAPI):
    async with _client(app) as client:
        await _publish(client, "Oldest", 1)
        await _publish(client, "Middle", 2)
        newest = await _publish(client, "Newest", 3)
        await client.post("/api/v1/articles", json={
            "title": "Hidden", "content": "x", "excerpt": "x", "author": "x", "category": "x",
        })

        response = await client.get("/api/v1/rss.xml")

    channel = ET.fromstring(response.text).find("channel")
    titles = [item.findtext("title") for item in channel.findall("item")]
    assert titles == ["Newest", "Middle"]
    assert channel.find("item").findtext("link") == f"https://news.example.com/articles/{newest['id']}"
    atom_link = channel.find("{http://www.w3.org/2005/Atom}link")
    assert atom_link.get("href") == "https://news.example.com/api/v1/rss.xml"


@pytest.mark.asyncio
async def test_preview_counts_all_published(app: FastAPI):
    async with _client(app) as client:
        for day in (1, 2, 3):
            await _publish(client, f"Story {day}", day)

        response = await client.get("/api/v1/rss/preview")

    assert response.status_code == 200
    body = response.json()
    assert body["article_count"] == 3
    assert len(_items(body["rss"])) == 2


@pytest.mark.asyncio
async def test_empty_feed_is_valid(app: FastAPI):
    async with _client(app) as client:
        response = await client.get("/api/v1/rss")

    channel = ET.fromstring(response.text).find("channel")
    assert channel.findall("item") == []
    assert channel.findtext("ttl") == "60"


@pytest.mark.asyncio
async def test_control_characters_in_articles_keep_feed_well_formed(app: FastAPI):
    async with _client(app) as client:
        created = await _publish(client, "Breaking\x0bnews", 1, excerpt="Bad\x00byte")
        response = await client.get("/api/v1/rss.xml")

    assert created["title"] == "Breakingnews"
    item = ET.fromstring(response.text).find("channel").find("item")
    assert item.findtext("title") == "Breakingnews"
    assert item.findtext("description") == "Badbyte"
