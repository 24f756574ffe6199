from app.client.cache import ClinicCache, as_filters, filter_key
from app.schemas.clinic import ClinicSearchFilters


def test_put_then_get_returns_same_value():
    cache = ClinicCache()
    result = [{"id": "CL202200001", "services": []}]
    key = filter_key({"city": "Los Angeles"})

    cache.put(key, result)

    assert cache.get(key) == result


def test_miss_returns_none_and_counts():
    cache = ClinicCache()

    assert cache.get(filter_key({"city": "Nowhere"})) is None
    assert cache.stats()["misses"] == 1
    assert cache.stats()["hits"] == 0


def test_clear_drops_every_entry():
    cache = ClinicCache()
    k1, k2 = filter_key({"city": "a"}), filter_key({"state": "b"})
    cache.put(k1, [])
    cache.put(k2, [])

    cache.clear()

    assert len(cache) == 0
    assert cache.get(k1) is None
    assert cache.get(k2) is None


def test_stats_reports_keys():
    cache = ClinicCache()
    key = filter_key({"city": "Chicago"})
    cache.put(key, [])
    cache.get(key)

    stats = cache.stats()

    assert stats["size"] == 1
    assert stats["keys"] == [key]
    assert stats["hits"] == 1


def test_key_ignores_field_order_case_and_whitespace():
    a = filter_key({"city": "Los Angeles", "services": ["SRV003", "SRV001"], "searchTerm": "Health"})
    b = filter_key({"searchTerm": " health ", "services": ["SRV001", "SRV003", "SRV001"], "city": "los angeles"})

    assert a == b


def test_key_drops_blank_fields():
    assert filter_key({"city": "", "state": "  ", "services": [], "searchTerm": None}) == filter_key({})
    assert filter_key(None) == filter_key({})


def test_key_accepts_filter_model():
    model = ClinicSearchFilters(city="Chicago", service_ids=["SRV004"])

    assert filter_key(model) == filter_key({"city": "chicago", "serviceIds": ["SRV004"]})


def test_different_filters_get_different_keys():
    assert filter_key({"city": "Chicago"}) != filter_key({"state": "Chicago"})
    assert filter_key({"services": ["SRV001"]}) != filter_key({"services": ["SRV002"]})


def test_reordering_a_hit_leaves_the_entry_alone():
    cache = ClinicCache()
    key = filter_key({"state": "California"})
    cache.put(key, [{"id": "CL202200001"}, {"id": "CL202200003"}])

    hit = cache.get(key)
    hit.sort(key=lambda c: c["id"], reverse=True)
    hit.append({"id": "CL209999999"})

    assert [c["id"] for c in cache.get(key)] == ["CL202200001", "CL202200003"]


def test_as_filters_keeps_original_case():
    f = as_filters({"city": "  Évry ", "searchTerm": "Santé", "services": ["SRV002", " SRV001", "SRV002"]})

    assert f.city == "Évry"
    assert f.search_term == "Santé"
    assert f.service_ids == ["SRV002", "SRV001"]
    assert filter_key(f) == filter_key({"city": "évry", "searchTerm": "santé", "services": ["SRV001", "SRV002"]})
