# tests/test_corpus.py
import pytest

from autocorrector.core.corpus import CorpusModel
from autocorrector.core.errors import CorpusError


def test_unigram_and_bigram_counts(scenario_path):
    m = CorpusModel.from_paths([scenario_path])
    assert m.unigram("the") == 3
    assert m.unigram("quick") == 2
    assert m.unigram("jumps") == 1
    assert m.unigram("cat") == 0
    assert m.bigram("brown", "fox") == 2
    assert m.bigram("the", "lazy") == 1
    assert m.bigram("lazy", "the") == 0
    assert m.bigram("nope", "the") == 0
    assert m.token_count() == 14


def test_sentence_punctuation_does_not_reset_adjacency(scenario_path):
    m = CorpusModel.from_paths([scenario_path])
    # "... lazy dog . the brown ..."
    assert m.bigram("dog", "the") == 1


def test_vocabulary_matches_unigram_keys(scenario_path):
    m = CorpusModel.from_paths([scenario_path])
    vocab = list(m.vocabulary())
    assert vocab == sorted(["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog", "is"])
    assert all(m.unigram(w) > 0 for w in vocab)
    assert m.contains("fox") and "fox" in m
    assert not m.contains("") and "cat" not in m
    assert m.vocabulary_size() == len(m) == 9


def test_files_are_one_stream_in_order(write_corpus):
    a = write_corpus("alpha beta")
    b = write_corpus("gamma")
    m = CorpusModel.from_paths([a, b])
    assert m.bigram("beta", "gamma") == 1
    m2 = CorpusModel.from_paths([b, a])
    assert m2.bigram("gamma", "alpha") == 1
    assert m2.bigram("beta", "gamma") == 0


def test_invalid_utf8_is_replaced(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"good\xff\xfeword ok")
    m = CorpusModel.from_paths([p])
    assert list(m.vocabulary()) == ["good", "ok", "word"]
    assert m.bigram("good", "word") == 1


def test_missing_file_raises_corpus_error(tmp_path):
    with pytest.raises(CorpusError) as exc:
        CorpusModel.from_paths([tmp_path / "missing.txt"])
    assert "missing.txt" in str(exc.value)


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(CorpusError):
        CorpusModel.from_paths([tmp_path])


def test_failed_ingest_leaves_model_untouched(scenario_path, write_corpus, tmp_path):
    m = CorpusModel.from_paths([scenario_path])
    extra = write_corpus("zebra zebra")
    with pytest.raises(CorpusError):
        m.ingest([extra, tmp_path / "missing.txt"])
    assert m.unigram("zebra") == 0
    assert m.unigram("the") == 3
    assert m.token_count() == 14


def test_empty_corpus(write_corpus):
    m = CorpusModel.from_paths([write_corpus("123 ... !!!")])
    assert list(m.vocabulary()) == []
    assert m.top_next("", 5) == []


def test_top_next_successors_then_unigrams(scenario_path):
    m = CorpusModel.from_paths([scenario_path])
    assert m.successors("the") == [("brown", 1), ("lazy", 1), ("quick", 1)]
    assert m.top_next("the", 5) == ["brown", "lazy", "quick", "the", "fox"]
    assert m.top_next("brown", 2) == ["fox", "the"]
    assert m.top_next("", 5) == ["the", "brown", "fox", "quick", "dog"]
    assert m.top_next("unseen", 3) == ["the", "brown", "fox"]
    assert m.top_next("the", 0) == []


def test_path_rejected_by_the_os_raises_corpus_error(scenario_path):
    with pytest.raises(CorpusError) as exc:
        CorpusModel.from_paths([scenario_path, "bad\x00path.txt"])
    assert "null" in exc.value.reason
