# tests/test_relevance.py
from kbsearch.relevance import filter_relevant, matches


def test_matches_title_ignoring_case(make_article):
    a = make_article("Go Basics", "intro")
    assert matches(a, "GO")
    assert matches(a, "basics")

def test_matches_content(make_article):
    a = make_article("Go Basics", "intro to goroutines")
    assert matches(a, "Goroutines")
    assert not matches(a, "borrow")

def test_filter_keeps_input_order(make_article):
    arts = [
        make_article("Zeta notes", "alpha"),
        make_article("Beta", "nothing here"),
        make_article("Alpha guide", "x"),
    ]
    got = filter_relevant(arts, "alpha")
    assert [a.title for a in got] == ["Zeta notes", "Alpha guide"]

def test_filter_empty_input(make_article):
    assert filter_relevant([], "anything") == []

def test_filter_partitions_articles(make_article):
    arts = [
        make_article("Go Basics", "intro to goroutines"),
        make_article("Rust Ownership", "borrow checker"),
        make_article("Python", "GIL and goroutine envy"),
        make_article("Ünïcode Title", "straße"),
    ]
    for q in ["go", "RUST", "er", "straße", "ünï", "zzz"]:
        kept = filter_relevant(arts, q)
        for a in kept:
            assert q.lower() in a.title.lower() or q.lower() in a.content.lower()
        for a in arts:
            if a not in kept:
                assert q.lower() not in a.title.lower() and q.lower() not in a.content.lower()

def test_query_is_not_trimmed(make_article):
    arts = [make_article("Rust Ownership", "borrow checker")]
    assert filter_relevant(arts, " rust") == []
