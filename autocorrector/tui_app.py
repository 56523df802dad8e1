# tui_app.py - Autocorrector terminal UI
# -------------------------------------------------------
# Text based terminal UI over one Autocorrector instance.
# Features:
#  - Live suggestions as you type
#  - Provenance-coloured suggestion list with scores
#  - Accept suggestions using TAB (top) or F1 to F5
#  - Latency readout for the last query
# -------------------------------------------------------

from __future__ import annotations

import re
import time
from typing import List

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from autocorrector.core.autocorrector import Autocorrector
from autocorrector.core.protocols import Candidate, Provenance

# trailing partial word (same character class as the tokenizer)
_partial_re = re.compile(r"[A-Za-z'\-]*$")

PROVENANCE_COLOURS = {
    Provenance.EXACT: "green",
    Provenance.PREFIX: "cyan",
    Provenance.WHITESPACE: "magenta",
    Provenance.EDIT: "yellow",
}


def replace_partial(text: str, word: str) -> str:
    """Swap the word being typed at the end of `text` for `word`, then add a space."""
    return _partial_re.sub("", text) + word + " "


class SuggestionPanel(Static):
    """
    Right-side suggestion panel.
    Displays up to 5 suggestions with their F-key shortcut, provenance and score.
    """

    def update_suggestions(self, ranked: List[Candidate], plain: List[str]) -> None:
        if ranked:
            lines = []
            for i, c in enumerate(ranked, 1):
                colour = PROVENANCE_COLOURS[c.provenance]
                lines.append(
                    f"[b]F{i}[/b] • [{colour}]{c.word}[/{colour}]  "
                    f"[dim]{c.score} {c.provenance.tag}[/dim]"
                )
            self.update("\n".join(lines))
        elif plain:
            # continuations after a complete word carry no per-candidate score
            self.update("\n".join(f"[b]F{i}[/b] • {w}" for i, w in enumerate(plain, 1)))
        else:
            self.update("[dim]No suggestions[/dim]")


class TypingLatency(Static):
    """Bottom-left readout showing how long the last suggest() took."""

    def set_latency(self, seconds: float) -> None:
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


class TUIAutocorrector(App):
    """
    UI events -> Autocorrector.suggest -> reactive state -> widget updates.
    """

    CSS = """
    #left { width: 2fr; padding: 1; }
    #right { width: 1fr; padding: 1; border-left: solid $accent; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept(0)", "Accept top", priority=True),
        Binding("f1", "accept(0)", "1st", show=False),
        Binding("f2", "accept(1)", "2nd", show=False),
        Binding("f3", "accept(2)", "3rd", show=False),
        Binding("f4", "accept(3)", "4th", show=False),
        Binding("f5", "accept(4)", "5th", show=False),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    suggestions = reactive(list, init=False, always_update=True)
    latency = reactive(0.0, init=False)

    def __init__(self, autocorrector: Autocorrector):
        super().__init__()
        self.ac = autocorrector
        self._ranked: List[Candidate] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…", id="text_input")
                yield Static(self.ac.config.describe(), id="config")
            with Container(id="right"):
                yield SuggestionPanel(id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Autocorrect"
        self.query_one(Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run suggest() every time the text changes."""
        start = time.perf_counter()
        self._ranked = self.ac.ranked(event.value)
        words = [c.word for c in self._ranked] or self.ac.suggest(event.value)
        self.latency = time.perf_counter() - start
        self.suggestions = words

    # Reactive state (watchers) ---------------------------------------
    def watch_suggestions(self, suggestions: List[str]) -> None:
        self.query_one(SuggestionPanel).update_suggestions(self._ranked, suggestions)

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # Actions -----------------------------------------------------------
    def action_accept(self, index: int) -> None:
        if not 0 <= index < len(self.suggestions):
            return
        box = self.query_one(Input)
        box.value = replace_partial(box.value, self.suggestions[index])
        box.cursor_position = len(box.value)

    def action_clear(self) -> None:
        self.query_one(Input).value = ""
