"""Unit tests for the in-memory ArticleRepository."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from newshub.domain.entities import ArticleDraft, ArticleStatus
from newshub.infrastructure.storage import InMemoryArticleRepository


class FakeClock:
    """Strictly increasing clock so ordering by timestamp is deterministic."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, tzinfo=timezone.utc)):
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


def _draft(title: str = "A", **kwargs) -> ArticleDraft:
    fields = dict(content="B", excerpt="C", author="D", category="E")
    fields.update(kwargs)
    return ArticleDraft(title=title, **fields)


@pytest.fixture
def repo() -> InMemoryArticleRepository:
    return InMemoryArticleRepository(clock=FakeClock())


@pytest.mark.asyncio
async def test_create_defaults(repo: InMemoryArticleRepository):
    article = await repo.create(_draft())

    assert article.id
    assert article.status == ArticleStatus.DRAFT
    assert article.views == 0
    assert article.tags == []
    assert article.image_url is None
    assert article.created_at == article.updated_at
    assert article.publish_date == article.created_at


@pytest.mark.asyncio
async def test_create_keeps_supplied_publish_date_and_duplicate_tags(repo: InMemoryArticleRepository):
    publish_date = datetime(2030, 1, 1, tzinfo=timezone.utc)
    article = await repo.create(
        _draft(status=ArticleStatus.SCHEDULED, publish_date=publish_date, tags=["x", "x", "y"])
    )

    assert article.publish_date == publish_date
    assert article.status == ArticleStatus.SCHEDULED
    assert article.tags == ["x", "x", "y"]


@pytest.mark.asyncio
async def test_ids_are_never_reused(repo: InMemoryArticleRepository):
    seen: set[str] = set()
    for i in range(20):
        article = await repo.create(_draft(f"T{i}"))
        assert article.id not in seen
        seen.add(article.id)
        if i % 2 == 0:
            await repo.delete(article.id)


@pytest.mark.asyncio
async def test_returned_articles_are_snapshots(repo: InMemoryArticleRepository):
    article = await repo.create(_draft(tags=["a"]))
    article.title = "mutated"
    article.tags.append("b")

    stored = await repo.get_by_id(article.id)
    assert stored.title == "A"
    assert stored.tags == ["a"]

    await repo.increment_views(article.id)
    assert stored.views == 0


@pytest.mark.asyncio
async def test_get_all_sorted_by_created_at_desc(repo: InMemoryArticleRepository):
    first = await repo.create(_draft("first"))
    second = await repo.create(_draft("second"))
    third = await repo.create(_draft("third"))

    articles = await repo.get_all()
    assert [a.id for a in articles] == [third.id, second.id, first.id]


@pytest.mark.asyncio
async def test_get_by_id_unknown_returns_none(repo: InMemoryArticleRepository):
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_update_merges_fields_and_bumps_updated_at(repo: InMemoryArticleRepository):
    created = await repo.create(_draft(tags=["a"]))

    updated = await repo.update(created.id, {"title": "New", "status": "published"})

    assert updated.title == "New"
    assert updated.status == ArticleStatus.PUBLISHED
    assert updated.content == "B"
    assert updated.tags == ["a"]
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


@pytest.mark.asyncio
async def test_update_unknown_returns_none(repo: InMemoryArticleRepository):
    assert await repo.update("missing", {"title": "x"}) is None


@pytest.mark.asyncio
async def test_update_rejects_repository_owned_fields(repo: InMemoryArticleRepository):
    created = await repo.create(_draft())
    with pytest.raises(ValueError):
        await repo.update(created.id, {"views": 100})
    with pytest.raises(ValueError):
        await repo.update(created.id, {"id": "other"})


@pytest.mark.asyncio
async def test_delete(repo: InMemoryArticleRepository):
    created = await repo.create(_draft())
    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_list_published_filters_and_orders_by_publish_date(repo: InMemoryArticleRepository):
    january = await repo.create(
        _draft("Jan", status=ArticleStatus.PUBLISHED, publish_date=datetime(2024, 1, 1, tzinfo=timezone.utc))
    )
    february = await repo.create(
        _draft("Feb", status=ArticleStatus.PUBLISHED, publish_date=datetime(2024, 2, 1, tzinfo=timezone.utc))
    )
    await repo.create(_draft("Draft"))
    await repo.create(_draft("Later", status=ArticleStatus.SCHEDULED))

    published = await repo.list_published()
    assert [a.id for a in published] == [february.id, january.id]


@pytest.mark.asyncio
async def test_naive_publish_dates_are_stored_as_utc(repo: InMemoryArticleRepository):
    naive = await repo.create(_draft("Naive", status=ArticleStatus.PUBLISHED, publish_date=datetime(2024, 1, 1)))
    defaulted = await repo.create(_draft("Now", status=ArticleStatus.PUBLISHED))

    assert naive.publish_date == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert [a.id for a in await repo.list_published()] == [defaulted.id, naive.id]

    moved = await repo.update(defaulted.id, {"publish_date": datetime(2023, 6, 1)})
    assert moved.publish_date.tzinfo is not None
    assert [a.id for a in await repo.list_published()] == [naive.id, defaulted.id]


@pytest.mark.asyncio
async def test_increment_views_leaves_updated_at(repo: InMemoryArticleRepository):
    created = await repo.create(_draft())

    assert await repo.increment_views(created.id) is True
    assert await repo.increment_views(created.id) is True

    stored = await repo.get_by_id(created.id)
    assert stored.views == 2
    assert stored.updated_at == created.updated_at


@pytest.mark.asyncio
async def test_increment_views_unknown_is_noop(repo: InMemoryArticleRepository):
    await repo.create(_draft())
    assert await repo.increment_views("missing") is False
    assert all(a.views == 0 for a in await repo.get_all())


@pytest.mark.asyncio
async def test_concurrent_increments_are_not_lost(repo: InMemoryArticleRepository):
    created = await repo.create(_draft())

    await asyncio.gather(*(repo.increment_views(created.id) for _ in range(200)))

    assert (await repo.get_by_id(created.id)).views == 200


def test_increments_from_threads_are_not_lost():
    repo = InMemoryArticleRepository()
    created = asyncio.run(repo.create(_draft()))

    def bump() -> None:
        for _ in range(250):
            asyncio.run(repo.increment_views(created.id))

    with ThreadPoolExecutor(max_workers=4) as pool:
        for future in [pool.submit(bump) for _ in range(4)]:
            future.result()

    assert asyncio.run(repo.get_by_id(created.id)).views == 1000


@pytest.mark.asyncio
async def test_cleanup_removes_exactly_unpublished(repo: InMemoryArticleRepository):
    kept = await repo.create(_draft("kept", status=ArticleStatus.PUBLISHED))
    await repo.create(_draft("draft"))
    await repo.create(_draft("scheduled", status=ArticleStatus.SCHEDULED))
    published_before = await repo.list_published()

    removed = await repo.cleanup_unpublished()

    assert removed == 2
    assert [a.id for a in await repo.get_all()] == [kept.id]
    assert await repo.list_published() == published_before
    assert await repo.cleanup_unpublished() == 0


@pytest.mark.asyncio
async def test_example_scenario_draft_lifecycle(repo: InMemoryArticleRepository):
    article = await repo.create(ArticleDraft(title="A", content="B", excerpt="C", author="D", category="E"))

    assert article.status == ArticleStatus.DRAFT
    assert article.views == 0
    assert await repo.list_published() == []
    assert await repo.cleanup_unpublished() == 1
    assert await repo.get_all() == []
