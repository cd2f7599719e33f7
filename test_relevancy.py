import pytest

import omnirank as orank


@pytest.fixture(autouse=True)
def fresh_cache():
    orank.reset_default_cache()
    yield
    orank.reset_default_cache()


def test_score_term_no_match():
    assert orank.score_term("xyz", "hound dog") == (0, 0)
    assert orank.score_term("xyz", "") == (0, 0)


def test_score_term_tiers_are_additive():
    # Same term, same field length.
    anywhere = orank.score_term("com", "abcXcomY")
    start_of_word = orank.score_term("com", "abc comX")
    whole_word = orank.score_term("com", "abcX com")

    assert anywhere == (1, 3)
    assert start_of_word == (2, 3)
    assert whole_word == (3, 3)
    assert whole_word[0] == orank.MATCH_WEIGHTS.maximum_score


def test_score_term_counts_every_occurrence():
    assert orank.score_term("ab", "ab ab") == (3, 4)
    assert orank.score_term("a", "aaa") == (2, 3)


def test_score_term_custom_weights():
    weights = orank.MatchWeights(
        match_anywhere=2, match_start_of_word=1, match_whole_word=1, maximum_score=4
    )
    assert orank.score_term("com", "abcX com", weights=weights) == (4, 3)


def test_match_weights_require_consistent_maximum():
    with pytest.raises(ValueError):
        orank.MatchWeights(maximum_score=5)


def test_normalize_difference():
    assert orank.normalize_difference(10, 10) == 1.0
    assert orank.normalize_difference(5, 10) == 0.5
    assert orank.normalize_difference(0, 7) == 0.0
    assert orank.normalize_difference(0, 0) == 1.0


def test_score_higher_in_shorter_urls():
    high = orank.word_relevancy(["stack"], "http://stackoverflow.com/short", "a-title")
    low = orank.word_relevancy(["stack"], "http://stackoverflow.com/longer", "a-title")
    assert high > low


def test_score_higher_in_shorter_titles():
    high = orank.word_relevancy(["milk"], "a-url", "Milkshakes")
    low = orank.word_relevancy(["milk"], "a-url", "Milkshakes rocks")
    assert high > low
    assert high == pytest.approx(2 / 3 * 4 / 10)


def test_score_higher_for_start_of_word():
    low = orank.word_relevancy(["stack"], "http://Xstackoverflow.com/same", "a-title")
    high = orank.word_relevancy(["stack"], "http://stackoverflowX.com/same", "a-title")
    assert high > low

    low = orank.word_relevancy(["te"], "a-url", "Dist racted")
    high = orank.word_relevancy(["te"], "a-url", "Distrac ted")
    assert high > low


def test_score_higher_for_whole_word():
    low = orank.word_relevancy(["com"], "http://stackoverflow.comX/same", "a-title")
    high = orank.word_relevancy(["com"], "http://stackoverflowX.com/same", "a-title")
    assert high > low

    low = orank.word_relevancy(["com"], "a-url", "abc comX")
    high = orank.word_relevancy(["com"], "a-url", "abcX com")
    assert high > low


def test_word_relevancy_is_case_insensitive_for_lowercase_terms():
    assert orank.word_relevancy(["ari"], "MARIO", "MARio") > 0.0
    assert orank.word_relevancy(["DOES_NOT_MATCH"], "MARIO", "MARio") == 0.0


def test_word_relevancy_without_title_uses_url_score():
    assert orank.word_relevancy(["stack"], "stack") == pytest.approx(1.0)
    assert orank.word_relevancy(["stack"], "stack", "") == pytest.approx(1.0)


def test_word_relevancy_title_floors_url_score():
    # url: "cat" starts "catapult" (2/6 * 3/8); title: whole word "dog" (3/6 * 3/9).
    score = orank.word_relevancy(["cat", "dog"], "catapult", "hound dog")
    assert score == pytest.approx(1 / 6)


def test_word_relevancy_edge_cases():
    assert orank.word_relevancy([], "http://example.com", "Example") == 0.0
    assert orank.word_relevancy(["zzz"], "", None) == 0.0
    assert orank.word_relevancy(["zzz"], "http://example.com", "Example") == 0.0


def test_word_relevancy_rejects_bare_string_terms():
    with pytest.raises(TypeError):
        orank.word_relevancy("stack", "http://stackoverflow.com")
    with pytest.raises(TypeError):
        orank.RelevancyEngine().word_relevancy("stack", "http://stackoverflow.com")
