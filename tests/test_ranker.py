# tests/test_ranker.py
import pytest

from autocorrector.core.protocols import Candidate, Provenance
from autocorrector.core.ranker import Ranker


@pytest.fixture
def ranker(scenario_index):
    return Ranker(scenario_index.corpus)


def test_score_components(ranker):
    # "the qu" -> quick: bigram(the, quick)=1 -> 10, unigram(quick)=2
    assert ranker.score(Candidate("quick", Provenance.PREFIX), "the", "qu") == 12
    # exact match bonus
    assert ranker.score(Candidate("the", Provenance.EXACT), "", "the") == 103
    # edit penalty is -2 per edit
    assert ranker.score(Candidate("quick", Provenance.EDIT, 2), "", "qk") == 2 - 4


def test_whitespace_scored_on_first_word(ranker):
    cand = Candidate("the quick", Provenance.WHITESPACE)
    breakdown = ranker.contributions(cand, "over", "thequick")
    assert breakdown == {"exact": 0, "bigram": 10, "unigram": 3, "provenance": -1, "final": 12}


def test_rank_orders_by_score_then_word(ranker):
    cands = [
        Candidate("lazy", Provenance.PREFIX),
        Candidate("brown", Provenance.PREFIX),
        Candidate("quick", Provenance.PREFIX),
        Candidate("dog", Provenance.EDIT, 1),
    ]
    out = ranker.rank(cands, "the", "x")
    # brown 10+2, quick 10+2, lazy 10+1, dog 1-2
    assert [c.word for c in out] == ["brown", "quick", "lazy", "dog"]
    assert [c.score for c in out] == [12, 12, 11, -1]


def test_rank_caps_and_handles_empty(ranker):
    cands = [Candidate(w, Provenance.PREFIX) for w in ["the", "quick", "brown", "fox", "jumps", "over", "lazy"]]
    assert len(ranker.rank(cands, "", "x")) == 5
    assert len(ranker.rank(cands, "", "x", topn=2)) == 2
    assert ranker.rank([], "", "x") == []
    assert ranker.rank(cands, "", "x", topn=0) == []


def test_exact_match_is_pinned_first(write_corpus):
    from autocorrector import CorpusIndex

    idx = CorpusIndex.build([write_corpus("there " * 150 + "the")])
    r = Ranker(idx.corpus)
    out = r.rank(
        [Candidate("there", Provenance.PREFIX), Candidate("the", Provenance.EXACT)], "", "the"
    )
    assert out[0].word == "the"
    assert out[1].score > out[0].score


class Shouting:
    """Extra feature: favours short words."""

    name = "short"

    def contribution(self, cand, prev, partial):
        return 50 if len(cand.word) <= 3 else 0


def test_extra_features_are_summed(scenario_index):
    from autocorrector.core.ranker import default_features

    r = Ranker(scenario_index.corpus, default_features(scenario_index.corpus) + [Shouting()])
    out = r.rank([Candidate("quick", Provenance.PREFIX), Candidate("fox", Provenance.EDIT, 1)], "", "x")
    assert [c.word for c in out] == ["fox", "quick"]
    assert r.contributions(out[0], "", "x")["short"] == 50
