"""Executable Textual app that hosts an editing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use line_editor.adapters.textual.app"
    ) from exc

from line_editor.buffer import BufferMirror
from line_editor.runtime import telemetry
from line_editor.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    output: List[str] = field(default_factory=list)


def _render_buffer(mirror: BufferMirror) -> str:
    if not mirror.lines:
        return "(empty buffer)"
    width = len(str(len(mirror.lines) - 1))
    return "\n".join(
        f"{row:>{width}} | {line}" for row, line in enumerate(mirror.lines)
    )


class LineEditorApp(App[None]):
    """Buffer view, status line, output pane, and a command input."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#output-view {
		height: auto;
		max-height: 10;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+z", "undo", "Undo"),
        ("ctrl+y", "redo", "Redo"),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self._state = UIState()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._output_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("line_editor.tui")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._output_widget = Static("", id="output-view")
        self._status_widget = Static("", id="status-line")
        yield self._output_widget
        yield self._status_widget
        yield Input(placeholder="help | insert <line> <index> <text> | ...", id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_output=self._show_output,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.query_one("#command-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        result = self.adapter.submit(event.value)
        event.input.value = ""
        if result.quit:
            self.exit()

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.submit("undo")

    def action_redo(self) -> None:
        if self.adapter:
            self.adapter.submit("redo")

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = _render_buffer(mirror)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)
        self.sub_title = f"undo {mirror.undo_depth} / redo {mirror.redo_depth}"

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_output(self, lines: List[str]) -> None:
        self._state.output = list(lines)
        if self._output_widget:
            self._output_widget.update("\n".join(lines))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.command_error" and isinstance(payload, str):
            self.bell()

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def run_app(session: Optional[EditorSession] = None) -> None:
    telemetry.configure(preset="quiet")
    LineEditorApp(session or EditorSession()).run()


__all__ = ["LineEditorApp", "run_app"]
