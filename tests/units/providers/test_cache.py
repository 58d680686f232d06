from unittest.mock import MagicMock

import pytest
from caritas_sobral.providers.cache import QueryCache


class FakeClock:
    """A controllable monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Provides a clock starting at zero."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> QueryCache:
    """Provides a cache with a 60 second TTL."""
    return QueryCache(ttl_seconds=60, clock=clock)


def test_get_or_load_caches_until_expiry(cache: QueryCache, clock: FakeClock) -> None:
    """Should call the loader once per key until the entry expires."""
    loader = MagicMock(side_effect=["first", "second"])

    assert cache.get_or_load("editais", {"busca": "x"}, 1, loader) == "first"
    assert cache.get_or_load("editais", {"busca": "x"}, 1, loader) == "first"
    clock.now = 61
    assert cache.get_or_load("editais", {"busca": "x"}, 1, loader) == "second"
    assert loader.call_count == 2


def test_keys_differ_by_filters_and_page(cache: QueryCache) -> None:
    """Should keep separate entries per filter set and page."""
    loader = MagicMock(side_effect=["a", "b", "c"])

    cache.get_or_load("editais", {"busca": "x"}, 1, loader)
    cache.get_or_load("editais", {"busca": "y"}, 1, loader)
    cache.get_or_load("editais", {"busca": "x"}, 2, loader)

    assert loader.call_count == 3


def test_empty_filters_share_an_entry() -> None:
    """An absent filter and an empty one produce the same key."""
    assert QueryCache.make_key("noticias", {"busca": "", "ativo": None}, 1) == QueryCache.make_key(
        "noticias", {}, 1
    )


def test_invalidate_drops_only_the_entity(cache: QueryCache) -> None:
    """Should drop the entries of one entity and keep the others."""
    editais_loader = MagicMock(side_effect=["old", "new"])
    noticias_loader = MagicMock(return_value="news")

    cache.get_or_load("editais", None, 1, editais_loader)
    cache.get_or_load("noticias", None, 1, noticias_loader)
    cache.invalidate("editais")

    assert cache.get_or_load("editais", None, 1, editais_loader) == "new"
    cache.get_or_load("noticias", None, 1, noticias_loader)
    noticias_loader.assert_called_once()


def test_loader_errors_are_not_cached(cache: QueryCache) -> None:
    """Should propagate loader errors and retry on the next call."""
    loader = MagicMock(side_effect=[RuntimeError("boom"), "ok"])

    with pytest.raises(RuntimeError):
        cache.get_or_load("editais", None, 1, loader)
    assert cache.get_or_load("editais", None, 1, loader) == "ok"


def test_zero_ttl_disables_caching(clock: FakeClock) -> None:
    """Should always call the loader when the TTL is not positive."""
    cache = QueryCache(ttl_seconds=0, clock=clock)
    loader = MagicMock(return_value="value")

    cache.get_or_load("editais", None, 1, loader)
    cache.get_or_load("editais", None, 1, loader)

    assert loader.call_count == 2


def test_clear(cache: QueryCache) -> None:
    """Should drop every entry."""
    loader = MagicMock(side_effect=["a", "b"])
    cache.get_or_load("editais", None, 1, loader)
    cache.clear()
    assert cache.get_or_load("editais", None, 1, loader) == "b"


def test_expired_entries_are_removed_on_store(cache: QueryCache, clock: FakeClock) -> None:
    """Should free the entries of old searches once they expire."""
    # Arrange
    for term in range(500):
        cache.get_or_load("editais", {"busca": f"termo {term}"}, 1, lambda: ["edital"])
    assert len(cache) == 500

    # Act
    clock.now = 61
    cache.get_or_load("editais", {"busca": "novo"}, 1, lambda: ["edital"])

    # Assert
    assert len(cache) == 1


def test_size_is_bounded(clock: FakeClock) -> None:
    """Should evict the entry closest to expiry when full."""
    cache = QueryCache(ttl_seconds=60, max_entries=3, clock=clock)
    for term in ("a", "b", "c", "d"):
        cache.get_or_load("editais", {"busca": term}, 1, lambda: term)
        clock.now += 1

    assert len(cache) == 3
    reloaded = MagicMock(return_value="a again")
    assert cache.get_or_load("editais", {"busca": "a"}, 1, reloaded) == "a again"
    reloaded.assert_called_once()


def test_invalidation_during_load_is_not_lost(cache: QueryCache) -> None:
    """A value loaded before a concurrent invalidation must not be stored."""

    # Arrange
    def load_while_editing() -> list[str]:
        rows = ["old row"]
        cache.invalidate("editais")
        return rows

    fresh_loader = MagicMock(return_value=["new row"])

    # Act
    first = cache.get_or_load("editais", None, 1, load_while_editing)
    second = cache.get_or_load("editais", None, 1, fresh_loader)

    # Assert
    assert first == ["old row"]
    assert second == ["new row"]
    fresh_loader.assert_called_once()


def test_clear_during_load_is_not_lost(cache: QueryCache) -> None:
    """A value loaded before a concurrent clear must not be stored."""

    def load_while_clearing() -> str:
        cache.clear()
        return "old"

    cache.get_or_load("noticias", None, 1, load_while_clearing)

    assert len(cache) == 0
