from justcore.scope import Binding, Scope


def test_bind_and_lookup():
    scope = Scope()
    scope.bind(False, "foo", "bar")
    assert scope.bound("foo")
    assert scope.value("foo") == "bar"


def test_unbound_name():
    scope = Scope()
    assert not scope.bound("missing")
    assert scope.value("missing") is None


def test_child_sees_parent_values():
    root = Scope()
    root.bind(True, "a", "1")
    child = root.child()
    assert child.parent is root
    assert child.value("a") == "1"
    assert not child.bound("a")


def test_child_shadows_parent():
    root = Scope()
    root.bind(False, "a", "outer")
    child = root.child()
    child.bind(False, "a", "inner")
    assert child.value("a") == "inner"
    assert root.value("a") == "outer"


def test_lookup_through_several_levels():
    root = Scope()
    root.bind(False, "deep", "value")
    grandchild = root.child().child()
    assert grandchild.value("deep") == "value"


def test_parent_does_not_see_child():
    root = Scope()
    child = root.child()
    child.bind(False, "x", "y")
    assert root.value("x") is None


def test_names_and_bindings_sorted_and_local():
    root = Scope()
    root.bind(False, "parent_only", "p")
    scope = root.child()
    scope.bind(True, "zeta", "z")
    scope.bind(False, "alpha", "a")
    assert scope.names() == ["alpha", "zeta"]
    assert scope.bindings() == [Binding(False, "alpha", "a"), Binding(True, "zeta", "z")]


def test_rebinding_replaces():
    scope = Scope()
    scope.bind(False, "a", "first")
    scope.bind(True, "a", "second")
    assert scope.bindings() == [Binding(True, "a", "second")]


def test_new_scope_has_no_parent():
    assert Scope().parent is None
    assert Scope().names() == []