from qwstabs.core.tab_cache import TabCache


class Child:
    pass


def test_bind_registers_both_directions():
    cache = TabCache()
    child = Child()
    cache.bind("Search x", child)

    assert cache.child_for("Search x") is child
    assert cache.title_for(child) == "Search x"
    assert cache.has_title("Search x")
    assert "Search x" in cache
    assert len(cache) == 1


def test_rebinding_title_drops_stale_child():
    cache = TabCache()
    old, new = Child(), Child()
    cache.bind("Error: a", old)
    cache.bind("Error: a", new)

    assert cache.child_for("Error: a") is new
    assert cache.title_for(old) is None
    assert len(cache) == 1


def test_rebinding_child_drops_stale_title():
    cache = TabCache()
    child = Child()
    cache.bind("Search a", child)
    cache.bind("Search b", child)

    assert not cache.has_title("Search a")
    assert cache.title_for(child) == "Search b"
    assert cache.titles() == ["Search b"]


def test_unbind_child_removes_both_directions():
    cache = TabCache()
    child = Child()
    cache.bind("Error: y", child)

    assert cache.unbind_child(child) == "Error: y"
    assert cache.child_for("Error: y") is None
    assert cache.title_for(child) is None
    assert len(cache) == 0


def test_unbind_unknown_child_is_noop():
    cache = TabCache()
    known = Child()
    cache.bind("Search k", known)

    assert cache.unbind_child(Child()) is None
    assert cache.child_for("Search k") is known


def test_clear():
    cache = TabCache()
    cache.bind("Search 1", Child())
    cache.bind("Search 2", Child())
    cache.clear()

    assert len(cache) == 0
    assert list(cache) == []


def test_discard_titles_drops_both_directions():
    cache = TabCache()
    gone_a, gone_b, kept = Child(), Child(), Child()
    cache.bind("Search a", gone_a)
    cache.bind("Error: b", gone_b)
    cache.bind("Search c", kept)

    dropped = cache.discard_titles(["Search a", "Error: b", "Search missing"])

    assert dropped == [gone_a, gone_b]
    assert cache.titles() == ["Search c"]
    assert cache.title_for(gone_a) is None
    assert cache.title_for(gone_b) is None
    assert cache.title_for(kept) == "Search c"
