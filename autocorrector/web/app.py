# autocorrector/web/app.py
"""
Flask front end.

  GET       /autocorrect   HTML page with a live suggestion box and flag form
  GET|POST  /generate      ?word=...  -> {"suggestions": [...]}
  POST      /setflags      flags="prefix whitespace" [&led=N] -> {"props": "..."}

The live Autocorrector sits in an AutocorrectorSlot handed to create_app().
/setflags builds a replacement over the default corpus (its index is built
once and reused) and swaps it in; in-flight requests keep the instance they
already read.
"""

from __future__ import annotations

import logging
import threading
import traceback
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, render_template, request
from markupsafe import escape
from werkzeug.exceptions import HTTPException

from autocorrector.core.autocorrector import Autocorrector, AutocorrectorConfig, CorpusIndex
from autocorrector.core.errors import AutocorrectError, ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CORPUS = "data/sample_corpus.txt"


class AutocorrectorSlot:
    """Holds the current Autocorrector; replacement is a locked reference swap."""

    def __init__(self, ac: Autocorrector):
        self._ac = ac
        self._lock = threading.Lock()

    def get(self) -> Autocorrector:
        return self._ac

    def swap(self, ac: Autocorrector) -> Autocorrector:
        with self._lock:
            old, self._ac = self._ac, ac
        return old


class DefaultIndex:
    """Lazily built, shared index over the default corpus."""

    def __init__(self, path: str, index: Optional[CorpusIndex] = None):
        self.path = path
        self._index = index
        self._lock = threading.Lock()

    def get(self) -> CorpusIndex:
        with self._lock:
            if self._index is None:
                self._index = CorpusIndex.build([self.path])
            return self._index

    def display_name(self) -> str:
        return Path(self.path).stem.replace("_", " ").replace("-", " ").title()


def load_default(path: Optional[str] = None) -> Autocorrector:
    """Autocorrector over the default corpus with every generator off (the server's start state)."""
    return Autocorrector(CorpusIndex.build([path or DEFAULT_CORPUS]))


def create_app(
    autocorrector: Autocorrector,
    default_corpus: Optional[str] = None,
    default_index: Optional[CorpusIndex] = None,
) -> Flask:
    app = Flask(__name__)
    slot = AutocorrectorSlot(autocorrector)
    corpus = DefaultIndex(default_corpus or DEFAULT_CORPUS, default_index)
    app.extensions["autocorrector"] = slot

    # ---------- UI ----------
    @app.get("/autocorrect")
    def autocorrect_page():
        return render_template(
            "autocorrect.html",
            title="Autocorrect: Generate suggestions",
            message="",
            props=slot.get().config.describe(),
        )

    # ---------- API ----------
    @app.route("/generate", methods=["GET", "POST"])
    def generate():
        word = request.values.get("word", "", type=str)
        ac = slot.get()
        return jsonify({"suggestions": ac.suggest(word)})

    @app.post("/setflags")
    def set_flags():
        flags = request.values.get("flags", "", type=str).split()
        led = request.values.get("led", 0, type=int)
        try:
            config = AutocorrectorConfig.from_flags(flags, led=led)
        except ConfigError as e:
            return jsonify({"error": str(e)}), 400
        try:
            ac = Autocorrector(corpus.get(), config)
        except AutocorrectError as e:
            logger.error("setflags failed: %s", e)
            return jsonify({"error": str(e)}), 500
        slot.swap(ac)
        props = (
            f"Autocorrector created with {config.describe()}"
            f" and a corpus with {corpus.display_name()} text"
        )
        logger.info(props)
        return jsonify({"props": props})

    @app.errorhandler(Exception)
    def show_traceback(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error on %s", request.path)
        body = "<pre>\n" + str(escape(traceback.format_exc())) + "</pre>\n"
        return body, 500

    return app
