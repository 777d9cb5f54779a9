"""Unit tests for console output handler."""

from unittest.mock import MagicMock

import pytest
from rich.console import Console
from rich.table import Table

from midi_mixer.audio.protocols import SinkInfo
from midi_mixer.output.console import ConsoleOutputHandler
from midi_mixer.output.protocols import OutputHandler


class TestConsoleOutputHandler:
    """Tests for ConsoleOutputHandler."""

    @pytest.fixture
    def mock_console(self) -> MagicMock:
        """Create a mock Rich console."""
        return MagicMock(spec=Console)

    @pytest.fixture
    def handler(self, mock_console: MagicMock) -> ConsoleOutputHandler:
        """Create a ConsoleOutputHandler with mocked console."""
        return ConsoleOutputHandler(mock_console)

    def test_implements_protocol(self, handler: ConsoleOutputHandler) -> None:
        assert isinstance(handler, OutputHandler)

    def test_warning_and_error_markup(self, handler: ConsoleOutputHandler, mock_console: MagicMock) -> None:
        handler.warning("careful")
        handler.error("broken")

        assert mock_console.print.call_args_list[0].args[0] == "[yellow]Warning:[/yellow] careful"
        assert mock_console.print.call_args_list[1].args[0] == "[red]Error:[/red] broken"

    def test_sink_table(self, handler: ConsoleOutputHandler, mock_console: MagicMock) -> None:
        """Test that sinks are rendered as one table row each."""
        handler.sink_table("Applications", [
            SinkInfo(3, "firefox", 0.5, False),
            SinkInfo(7, "spotify", 1.0, True),
        ])

        table = mock_console.print.call_args[0][0]
        assert isinstance(table, Table)
        assert table.title == "Applications"
        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["Index", "Name", "Volume", "Muted"]

    def test_sink_table_renders(self) -> None:
        console = Console(record=True, width=80)
        ConsoleOutputHandler(console).sink_table("Playback Devices", [SinkInfo(0, "Speakers", 0.25, True)])

        text = console.export_text()
        assert "Speakers" in text
        assert "25%" in text
        assert "yes" in text
