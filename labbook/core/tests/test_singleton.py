""""""
from labbook.core.singleton import UniqueName


class NS1(UniqueName):
    pass


class NS2(UniqueName):
    pass


def test_singleton() -> None:
    val = NS1("val")
    other_val = NS1("val")
    assert val is other_val
    assert NS1(" VAL ") is val


def test_equality() -> None:
    val = NS1("val")
    assert val == "val"
    assert str(val) == "val"


def test_namespaces() -> None:
    ns1_val = NS1("val")
    ns2_val = NS2("val")
    assert ns1_val is not ns2_val
    # equality works because of string compat
    assert ns1_val == ns2_val


def test_get_does_not_create() -> None:
    assert NS2.get("never-created") is None
    assert NS2.get("never-created", "default") == "default"
    assert "never-created" not in NS2.__instances__

    created = NS2("created")
    assert NS2.get("Created") is created
