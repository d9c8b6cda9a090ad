"""Tests for the Textual chat UI."""
import asyncio

import httpx
import pytest
from textual.widgets import Button, TextArea

from encore.session import FAILURE_DESCRIPTION, FAILURE_TITLE, GREETING, PENDING_PHRASES
from encore.ui import ChatHistoryWidget, DebugPanel, EncoreApp, PendingIndicator

from conftest import FakeTransport


async def settle(app: EncoreApp, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()
    await pilot.pause()


class TestLayout:
    """Tests for the initial screen."""

    @pytest.mark.asyncio
    async def test_greeting_rendered(self):
        """Test that the seed greeting is the only message on start."""
        app = EncoreApp(FakeTransport())
        async with app.run_test():
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            assert chat.message_count == 1
            assert chat.get_last_response() == GREETING

    @pytest.mark.asyncio
    async def test_panels_hidden_by_default(self):
        """Test that the log panel and pending indicator start hidden."""
        app = EncoreApp(FakeTransport())
        async with app.run_test():
            assert app.query_one("#debug-panel", DebugPanel).display is False
            assert app.query_one("#pending", PendingIndicator).display is False

    @pytest.mark.asyncio
    async def test_log_level_shows_panel(self):
        """Test that passing a log level shows the log panel."""
        app = EncoreApp(FakeTransport(), log_level="info")
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#debug-panel", DebugPanel).display is True


class TestSendAffordance:
    """Tests for Send button enablement."""

    @pytest.mark.asyncio
    async def test_send_disabled_until_text(self):
        """Test that Send is disabled for empty or blank input."""
        app = EncoreApp(FakeTransport())
        async with app.run_test() as pilot:
            button = app.query_one("#send-btn", Button)
            assert button.disabled is True

            await pilot.press("space", "space")
            assert button.disabled is True

            await pilot.press("h", "i")
            assert button.disabled is False


class TestSubmission:
    """Tests for submitting through the UI."""

    @pytest.mark.asyncio
    async def test_ctrl_j_submits(self):
        """Test that the key chord sends and the reply is rendered."""
        transport = FakeTransport("Bravo!")
        app = EncoreApp(transport)
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "ctrl+j")
            await settle(app, pilot)

            assert [m.content for m in app.session.messages] == [GREETING, "hi", "Bravo!"]
            assert app.query_one("#chat-input", TextArea).text == ""
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 3

    @pytest.mark.asyncio
    async def test_send_button_submits(self):
        """Test that clicking Send submits the trimmed input."""
        transport = FakeTransport("Encore!")
        app = EncoreApp(transport)
        async with app.run_test() as pilot:
            await pilot.press("space", "y", "o", "space")
            await pilot.click("#send-btn")
            await settle(app, pilot)

            assert transport.sent[0][-1].content == "yo"

    @pytest.mark.asyncio
    async def test_blank_chord_is_ignored(self):
        """Test that the key chord with blank input sends nothing."""
        transport = FakeTransport()
        app = EncoreApp(transport)
        async with app.run_test() as pilot:
            await pilot.press("space", "ctrl+j")
            await settle(app, pilot)

            assert transport.sent == []
            assert len(app.session.messages) == 1

    @pytest.mark.asyncio
    async def test_busy_locks_input_and_shows_pending(self):
        """Test that a pending reply disables input and shows the first phrase."""
        transport = FakeTransport("Done")
        transport.gate = asyncio.Event()
        app = EncoreApp(transport)
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "ctrl+j")
            await pilot.pause()

            assert app.session.busy is True
            assert app.query_one("#send-btn", Button).disabled is True
            assert app.query_one("#chat-input", TextArea).disabled is True
            indicator = app.query_one("#pending", PendingIndicator)
            assert indicator.display is True
            assert indicator.phrase == PENDING_PHRASES[0]

            transport.gate.set()
            await settle(app, pilot)

            assert app.session.busy is False
            assert indicator.display is False
            assert app.query_one("#chat-input", TextArea).disabled is False

    @pytest.mark.asyncio
    async def test_failure_notifies(self):
        """Test that a failed exchange raises one error notification."""
        app = EncoreApp(FakeTransport(httpx.ConnectError("down")))
        notifications = []
        app.notify = lambda message, **kwargs: notifications.append((message, kwargs))  # type: ignore
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "ctrl+j")
            await settle(app, pilot)

        assert notifications == [
            (FAILURE_DESCRIPTION, {"title": FAILURE_TITLE, "severity": "error", "timeout": 5})
        ]
        assert [m.role for m in app.session.messages] == ["assistant", "user"]

    @pytest.mark.asyncio
    async def test_arrow_keys_do_not_recall_sent_input(self):
        """Test that the input stays empty after sending, even on Up."""
        app = EncoreApp(FakeTransport("Bravo!"))
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "ctrl+j")
            await settle(app, pilot)
            await pilot.press("up")

            assert app.query_one("#chat-input", TextArea).text == ""


class TestTranscriptScroll:
    """Tests for scroll-to-newest behaviour."""

    @pytest.mark.asyncio
    async def test_scrolled_to_newest_after_each_exchange(self):
        """Test that the transcript ends at its maximum scroll offset."""
        reply = "\n".join(f"Line {i} of a show-stopping answer" for i in range(12))
        app = EncoreApp(FakeTransport(reply))
        async with app.run_test(size=(80, 30)) as pilot:
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            for _ in range(3):
                await pilot.press("h", "i", "ctrl+j")
                await settle(app, pilot)

                assert chat.max_scroll_y > 0
                assert chat.scroll_y == chat.max_scroll_y
