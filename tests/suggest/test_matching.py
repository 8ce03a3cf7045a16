"""Tests for candidate selection."""

from __future__ import annotations

from argsuggest.suggest.matching import rank_candidates, select_suggestion


class TestSelectSuggestion:
    def test_picks_closest(self) -> None:
        candidates = ["install", "uninstall", "list"]
        assert select_suggestion("instal", candidates) == "install"

    def test_tie_goes_to_first_candidate(self) -> None:
        assert select_suggestion("mat", ["cat", "bat", "hat"]) == "cat"

    def test_tie_follows_candidate_order(self) -> None:
        assert select_suggestion("mat", ["hat", "bat", "cat"]) == "hat"

    def test_empty_candidates(self) -> None:
        assert select_suggestion("anything", []) is None
        assert select_suggestion("", []) is None

    def test_no_cutoff(self) -> None:
        # Even a completely different candidate is suggested
        assert select_suggestion("zzzzzzzz", ["a"]) == "a"

    def test_returns_candidate_verbatim(self) -> None:
        assert select_suggestion("verbose", ["--Verbose", "--quiet"]) == "--Verbose"

    def test_empty_token_prefers_shortest(self) -> None:
        assert select_suggestion("", ["install", "ls", "list"]) == "ls"

    def test_accepts_any_iterable(self) -> None:
        assert select_suggestion("lst", iter(["install", "list"])) == "list"


class TestRankCandidates:
    def test_sorted_by_distance(self) -> None:
        ranking = rank_candidates("instal", ["list", "uninstall", "install"])
        assert ranking[0] == ("install", 1)
        assert ranking[1] == ("uninstall", 3)
        assert [name for name, _ in ranking] == ["install", "uninstall", "list"]

    def test_ties_keep_input_order(self) -> None:
        ranking = rank_candidates("mat", ["cat", "bat", "hat"])
        assert ranking == [("cat", 1), ("bat", 1), ("hat", 1)]

    def test_first_entry_agrees_with_selection(self) -> None:
        candidates = ["--version", "--verbose", "--quiet", "--help"]
        for token in ["--varbose", "--vers", "-q", "help", ""]:
            assert rank_candidates(token, candidates)[0][0] == select_suggestion(
                token, candidates
            )

    def test_empty_candidates(self) -> None:
        assert rank_candidates("x", []) == []
