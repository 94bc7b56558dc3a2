"""
==============================================================================
Search Debouncer Tests
==============================================================================

Tests for commit coalescing, cancellation and flushing.

==============================================================================
"""

import asyncio

import pytest

from catalog_state.services.scheduler import AsyncioScheduler
from catalog_state.services.search_debouncer import SearchDebouncer


@pytest.fixture
def commits():
    return []


@pytest.fixture
def debouncer(scheduler, commits) -> SearchDebouncer:
    return SearchDebouncer(commits.append, scheduler, delay=0.5)


class TestDebounce:
    """Tests for delayed commits."""

    def test_rapid_input_commits_once(self, debouncer, scheduler, commits):
        """Test three quick inputs produce a single commit of the last value."""
        debouncer.on_input("a")
        scheduler.advance(0.1)
        debouncer.on_input("ab")
        scheduler.advance(0.1)
        debouncer.on_input("abc")

        scheduler.advance(0.5)

        assert commits == ["abc"]
        assert not debouncer.is_pending

    def test_nothing_before_quiet_period(self, debouncer, scheduler, commits):
        """Test no commit happens while input keeps arriving."""
        debouncer.on_input("lap")
        scheduler.advance(0.49)
        assert commits == []
        assert debouncer.pending == "lap"

    def test_each_input_restarts_timer(self, debouncer, scheduler, commits):
        """Test the quiet period is measured from the latest input."""
        debouncer.on_input("c")
        scheduler.advance(0.4)
        debouncer.on_input("co")
        scheduler.advance(0.4)
        assert commits == []

        scheduler.advance(0.1)
        assert commits == ["co"]

    def test_single_pending_timer(self, debouncer, scheduler):
        """Test at most one scheduled commit is live."""
        for text in ("a", "ab", "abc", "abcd"):
            debouncer.on_input(text)
        assert len(scheduler.active) == 1

    def test_input_is_normalized(self, debouncer, scheduler, commits):
        """Test commits carry trimmed, case-folded text."""
        debouncer.on_input("  T-SHIRT ")
        scheduler.advance(0.5)
        assert commits == ["t-shirt"]

    def test_separate_bursts_commit_separately(self, debouncer, scheduler, commits):
        """Test input after a commit schedules a new commit."""
        debouncer.on_input("a")
        scheduler.advance(0.5)
        debouncer.on_input("")
        scheduler.advance(0.5)
        assert commits == ["a", ""]


class TestCancelAndFlush:
    """Tests for cancel() and flush()."""

    def test_cancel_drops_commit(self, debouncer, scheduler, commits):
        """Test a cancelled commit never fires."""
        debouncer.on_input("book")
        assert debouncer.cancel() is True
        scheduler.advance(1.0)
        assert commits == []
        assert debouncer.pending is None

    def test_cancel_without_pending(self, debouncer):
        """Test cancel() reports nothing was pending."""
        assert debouncer.cancel() is False

    def test_flush_commits_now(self, debouncer, scheduler, commits):
        """Test flush() commits immediately and only once."""
        debouncer.on_input("shoe")
        assert debouncer.flush() is True
        assert commits == ["shoe"]

        scheduler.advance(1.0)
        assert commits == ["shoe"]

    def test_flush_without_pending(self, debouncer, commits):
        """Test flush() with nothing pending is a no-op."""
        assert debouncer.flush() is False
        assert commits == []

    def test_negative_delay_rejected(self, scheduler, commits):
        """Test a negative quiet period is refused."""
        with pytest.raises(ValueError):
            SearchDebouncer(commits.append, scheduler, delay=-1)


class TestAsyncioScheduler:
    """Tests for the event-loop backed scheduler."""

    def test_commit_runs_on_event_loop(self):
        """Test a commit fires on the loop after the delay."""
        commits = []

        async def scenario():
            debouncer = SearchDebouncer(commits.append, AsyncioScheduler(), delay=0.01)
            debouncer.on_input("a")
            debouncer.on_input("ab")
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert commits == ["ab"]

    def test_requires_event_loop(self):
        """Test building without a loop outside asyncio fails up front."""
        with pytest.raises(ValueError):
            AsyncioScheduler()

    def test_explicit_loop_outside_asyncio(self):
        """Test an explicit loop is captured and used for timers."""
        loop = asyncio.new_event_loop()
        try:
            scheduler = AsyncioScheduler(loop)
            assert scheduler.loop is loop

            commits = []
            debouncer = SearchDebouncer(commits.append, scheduler, delay=0.01)
            debouncer.on_input("lap")
            loop.run_until_complete(asyncio.sleep(0.05))
            assert commits == ["lap"]
        finally:
            loop.close()
