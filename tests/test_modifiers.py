import pytest

from declfmt.cir.modifiers import (
    ABSTRACT,
    FINAL,
    INTERFACE,
    PRIVATE,
    PUBLIC,
    STATIC,
    ModifierSet,
    to_string,
)


def test_canonical_order():
    mods = ModifierSet.of("final", "static", "public")
    assert mods.render() == "public static final"
    assert str(mods) == "public static final"


def test_flags_round_trip():
    mask = PUBLIC | ABSTRACT | INTERFACE
    mods = ModifierSet.from_flags(mask)
    assert mods.render() == "public abstract interface"
    assert mods.flags == mask


def test_to_string():
    assert to_string(PRIVATE | STATIC | FINAL) == "private static final"
    assert to_string(0) == ""


def test_coerce():
    assert ModifierSet.coerce(None) == ModifierSet()
    assert ModifierSet.coerce(PUBLIC).render() == "public"
    assert ModifierSet.coerce("static public").render() == "public static"
    assert ModifierSet.coerce(["private"]).render() == "private"
    mods = ModifierSet.of("final")
    assert ModifierSet.coerce(mods) is mods


def test_unknown_keyword_rejected():
    with pytest.raises(ValueError):
        ModifierSet.of("public", "sealed")


def test_membership_and_edits():
    mods = ModifierSet.of("public", "abstract")
    assert "abstract" in mods
    assert "abstract" not in mods.without("abstract")
    assert mods.with_keyword("static").render() == "public abstract static"
    assert not ModifierSet()
