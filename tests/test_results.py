from anagramme import ResultSet
from anagramme.results import canonical_key, rank, render


class TestResultSet:
    def test_canonical_key(self):
        assert canonical_key(["niche", "chat"]) == ("chat", "niche")
        assert canonical_key(["chat", "niche"]) == canonical_key(["niche", "chat"])
        assert canonical_key(["a", "a", "b"]) != canonical_key(["a", "b", "b"])

    def test_add(self):
        results = ResultSet()
        assert results.add(["niche", "chat"])
        assert len(results) == 1
        assert ["chat", "niche"] in results
        assert ["niche", "chat"] in results

    def test_first_seen_wins(self):
        results = ResultSet()
        assert results.add(["niche", "chat"])
        assert not results.add(["chat", "niche"])
        assert not results.add(["niche", "chat"])
        assert len(results) == 1
        # sentences are stored with their words sorted
        assert list(results) == [["chat", "niche"]]

    def test_distinct_word_sets(self):
        results = ResultSet()
        assert results.add(["chat", "niche"])
        assert results.add(["chat", "chien"])
        assert results.add(["a", "a"])
        assert not results.add(["a", "a"])
        assert len(results) == 3
        assert ["chien", "niche"] not in results

    def test_empty(self):
        results = ResultSet()
        assert len(results) == 0
        assert list(results) == []


class TestRank:
    def test_descending_word_count(self):
        ranked = rank([["d"], ["e", "f"], ["a", "b", "c"]])
        assert ranked == ["a b c", "e f", "d"]

    def test_exact_duplicates(self):
        assert rank([["a", "b"], ["a", "b"], ["c"]]) == ["a b", "c"]

    def test_ties(self):
        ranked = rank([["niche", "chat"], ["chien", "chat"], ["x"]])
        assert ranked == ["chien chat", "niche chat", "x"]

    def test_result_set(self):
        results = ResultSet()
        results.add(["niche", "chat"])
        results.add(["a", "b", "c"])
        assert rank(results) == ["a b c", "chat niche"]

    def test_empty(self):
        assert rank([]) == []
        assert rank(ResultSet()) == []


class TestRender:
    def test_no_hint(self):
        assert render(["chat niche", "x"]) == ["chat niche", "x"]
        assert render(["chat niche"], "") == ["chat niche"]
        assert render(["chat niche"], "   ") == ["chat niche"]

    def test_hint(self):
        assert render(["niche", "chien"], "chat") == ["chat niche", "chat chien"]
        assert render(["niche"], "Le  Chat") == ["le chat niche"]

    def test_empty(self):
        assert render([], "chat") == []
