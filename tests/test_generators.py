# tests/test_generators.py
from autocorrector.core.generators import (
    EditDistanceGen,
    ExactGen,
    PrefixGen,
    WhitespaceGen,
    merge_candidates,
)
from autocorrector.core.protocols import Candidate, CandidateGenerator, Provenance


def test_generators_satisfy_protocol(scenario_index):
    corpus, trie = scenario_index.corpus, scenario_index.trie
    for gen in (ExactGen(corpus), PrefixGen(trie), WhitespaceGen(corpus), EditDistanceGen(trie, 1)):
        assert isinstance(gen, CandidateGenerator)


def test_exact_gen(scenario_index):
    gen = ExactGen(scenario_index.corpus)
    assert gen.generate("", "quick") == [Candidate("quick", Provenance.EXACT)]
    assert gen.generate("", "quik") == []
    assert gen.generate("", "") == []


def test_prefix_gen_includes_the_word_itself(scenario_index):
    gen = PrefixGen(scenario_index.trie)
    assert [c.word for c in gen.generate("", "qu")] == ["quick"]
    assert [c.word for c in gen.generate("", "the")] == ["the"]
    assert all(c.provenance is Provenance.PREFIX for c in gen.generate("", "b"))
    assert gen.generate("", "zz") == []


def test_whitespace_gen_every_valid_split(write_corpus):
    from autocorrector import CorpusIndex

    idx = CorpusIndex.build([write_corpus("a aa in side inside")])
    gen = WhitespaceGen(idx.corpus)
    assert [c.word for c in gen.generate("", "aaa")] == ["a aa", "aa a"]
    assert [c.word for c in gen.generate("", "inside")] == ["in side"]
    assert gen.generate("", "a") == []
    assert gen.generate("", "") == []


def test_whitespace_scenario(scenario_index):
    gen = WhitespaceGen(scenario_index.corpus)
    out = gen.generate("", "thequick")
    assert out == [Candidate("the quick", Provenance.WHITESPACE)]
    left, right = out[0].word.split(" ")
    assert left + right == "thequick"


def test_edit_gen_records_distance(scenario_index):
    gen = EditDistanceGen(scenario_index.trie, 2)
    assert gen.generate("", "quik") == [Candidate("quick", Provenance.EDIT, distance=1)]
    # a vocabulary word comes back as its own distance-0 neighbour
    assert Candidate("fox", Provenance.EDIT, distance=0) in gen.generate("", "fox")
    assert EditDistanceGen(scenario_index.trie, 0).generate("", "quik") == []


def test_merge_keeps_lowest_provenance():
    merged = merge_candidates(
        [Candidate("quick", Provenance.EXACT)],
        [Candidate("quick", Provenance.PREFIX), Candidate("quickly", Provenance.PREFIX)],
        [Candidate("quick", Provenance.EDIT, 0), Candidate("quack", Provenance.EDIT, 1)],
    )
    assert merged == [
        Candidate("quack", Provenance.EDIT, 1),
        Candidate("quick", Provenance.EXACT),
        Candidate("quickly", Provenance.PREFIX),
    ]


def test_merge_is_order_independent():
    a = [Candidate("fox", Provenance.EDIT, 1)]
    b = [Candidate("fox", Provenance.PREFIX)]
    assert merge_candidates(a, b) == merge_candidates(b, a) == [Candidate("fox", Provenance.PREFIX)]
    assert merge_candidates() == []
