"""
cli.py - command line shell for the Autocorrector
Features:
- REPL: one query per stdin line, one suggestion per output line
- --explain: rich table with score and provenance for each suggestion
- --tui: live suggestions in a textual terminal UI
- --gui: Flask server exposing /autocorrect, /generate and /setflags
- Defaults read from a JSON settings file, overridden by flags
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from autocorrector.core.autocorrector import Autocorrector
from autocorrector.core.errors import AutocorrectError
from autocorrector.utils.config_manager import Config
from autocorrector.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

# suggestions go to stdout untouched: no markup, emoji codes, highlighting or wrapping
console = Console(highlight=False, emoji=False, soft_wrap=True)

USAGE = "autocorrect --data=<list of files> [--prefix] [--whitespace] [--led=<led>]"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="autocorrect",
        description="Suggest corrections and completions from a text corpus.",
    )
    p.add_argument("--data", help="comma separated corpus files")
    p.add_argument("--prefix", action="store_true", default=None, help="enable prefix completion")
    p.add_argument("--whitespace", action="store_true", default=None, help="enable two-word splits")
    p.add_argument("--led", type=int, default=None, help="maximum Levenshtein edit distance (0 = off)")
    p.add_argument("--explain", action="store_true", help="show scores and provenance for each line")
    p.add_argument("--tui", action="store_true", help="interactive terminal UI")
    p.add_argument("--gui", action="store_true", help="run the web server")
    p.add_argument("--port", type=int, default=None, help="web server port")
    p.add_argument("--config", default=None, help="JSON settings file")
    p.add_argument("--show-config", action="store_true", help="print effective settings and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("--log-file", default=None, help="also write logs to this file")
    return p


class CLI:
    """Merges settings + flags, builds the engine and runs the chosen front end."""

    def __init__(self, args: argparse.Namespace, cfg: Config):
        self.args = args
        self.cfg = cfg

    # settings (flags win over the settings file) ----------------------------
    def data_files(self) -> List[str]:
        if self.args.data:
            return [p.strip() for p in self.args.data.split(",") if p.strip()]
        return list(self.cfg.get("data") or [])

    def _flag(self, name: str):
        val = getattr(self.args, name)
        return self.cfg.get(name) if val is None else val

    def build(self) -> Autocorrector:
        return Autocorrector.from_paths(
            self.data_files(),
            prefix=bool(self._flag("prefix")),
            whitespace=bool(self._flag("whitespace")),
            led=int(self._flag("led")),
        )

    # front ends ----------------------------------------------------------
    def run(self, stdin: TextIO) -> int:
        if self.args.show_config:
            self.cfg.show(console)
            return EXIT_OK

        if self.args.gui:
            return self.run_gui()

        if not self.data_files():
            _error("usage")
            console.print(USAGE, markup=False)
            return EXIT_USAGE

        try:
            ac = self.build()
        except AutocorrectError as e:
            _error(str(e))
            return EXIT_ERROR

        if self.args.tui:
            from autocorrector.tui_app import TUIAutocorrector

            TUIAutocorrector(ac).run()
            return EXIT_OK

        return self.repl(ac, stdin)

    def repl(self, ac: Autocorrector, stdin: TextIO) -> int:
        """For each input line print its suggestions, one per line."""
        for line in stdin:
            text = line.rstrip("\r\n")
            if self.args.explain:
                self._display_ranked(ac, text)
                continue
            for s in ac.suggest(text):
                console.print(s, markup=False)
        return EXIT_OK

    def run_gui(self) -> int:
        from autocorrector.web.app import create_app, load_default

        port = self.args.port if self.args.port is not None else int(self.cfg.get("port"))
        try:
            initial = load_default(self.cfg.get("default_corpus"))
        except AutocorrectError as e:
            _error(str(e))
            return EXIT_ERROR
        app = create_app(
            initial,
            default_corpus=self.cfg.get("default_corpus"),
            default_index=initial.index,
        )
        logger.info("serving on port %d", port)
        app.run(port=port)
        return EXIT_OK

    # display -------------------------------------------------------------------------
    def _display_ranked(self, ac: Autocorrector, text: str) -> None:
        """Table of ranked candidates: #, word, score, source."""
        ranked = ac.ranked(text)
        if not ranked:
            # empty partial word: continuations only, no per-candidate scores
            words = ac.suggest(text)
            if not words:
                console.print("[dim](no suggestions)[/dim]")
                return
            for w in words:
                console.print(w, markup=False)
            return

        table = Table(title=Text(f"Suggestions for {text!r}"), box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Score", justify="right", style="magenta")
        table.add_column("Source", justify="left", style="dim")
        for i, c in enumerate(ranked, 1):
            table.add_row(str(i), Text(c.word), str(c.score), c.provenance.tag)
        console.print(table)


def _error(msg: str) -> None:
    console.print(Text(f"ERROR: {msg}", style="red"))


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_path=args.log_file)
    try:
        cfg = Config(args.config)
    except AutocorrectError as e:
        _error(str(e))
        return EXIT_ERROR
    return CLI(args, cfg).run(stdin if stdin is not None else sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
