from __future__ import annotations

import pytest

from passbleed.domain.models import DomainSet

EXPORT = DomainSet(["example.com", "bank.co.uk"])
LEAKS = DomainSet(["example.com", "other.org"])


def test_add_keeps_domains_unique():
    domains = DomainSet()
    domains.add("example.com")
    domains.add("example.com")
    domains.add("other.org")
    assert domains.cardinality() == 2
    assert len(domains) == 2
    assert "example.com" in domains
    assert "missing.net" not in domains


def test_sorted_is_lexicographic():
    domains = DomainSet(["zeta.io", "alpha.com", "mid.org"])
    assert domains.sorted() == ["alpha.com", "mid.org", "zeta.io"]


def test_intersection_of_example_corpora():
    result = EXPORT.intersect(LEAKS)
    assert result == {"example.com"}
    assert result.cardinality() == 1


def test_intersection_is_commutative():
    assert EXPORT.intersect(LEAKS) == LEAKS.intersect(EXPORT)


def test_intersection_is_idempotent():
    assert EXPORT.intersect(EXPORT) == EXPORT


@pytest.mark.parametrize("domains", [EXPORT, LEAKS, DomainSet()])
def test_intersection_with_empty_set_is_empty(domains):
    assert domains.intersect(DomainSet()).cardinality() == 0
    assert DomainSet().intersect(domains).cardinality() == 0


def test_intersection_cardinality_is_bounded():
    a = DomainSet(f"site{i}.com" for i in range(50))
    b = DomainSet(f"site{i}.com" for i in range(40, 60))
    result = a.intersect(b)
    assert result.cardinality() == 10
    assert result.cardinality() <= min(a.cardinality(), b.cardinality())


def test_intersect_returns_new_set_and_leaves_inputs_alone():
    a = DomainSet(["a.com", "b.com"])
    b = DomainSet(["b.com", "c.com"])
    result = a.intersect(b)
    result.add("z.com")
    assert a == {"a.com", "b.com"}
    assert b == {"b.com", "c.com"}


def test_domain_set_is_unhashable():
    with pytest.raises(TypeError):
        hash(DomainSet())


def test_repr_previews_sorted_domains():
    assert repr(DomainSet(["b.com", "a.com"])) == "DomainSet({a.com, b.com})"
