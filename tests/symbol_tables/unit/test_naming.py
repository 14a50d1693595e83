"""Naming helper tests."""

from __future__ import annotations

from gdproto.symbol_tables import (
    file_namespace_segment,
    flatten_identifier,
    normalize_reference,
    short_name,
    to_camel_case,
)


def test_to_camel_case_capitalises_each_segment() -> None:
    assert to_camel_case("my_message") == "MyMessage"
    assert to_camel_case("Outer_Inner") == "OuterInner"
    assert to_camel_case("already") == "Already"
    assert to_camel_case("a__b") == "AB"


def test_flatten_identifier_strips_package_only_as_prefix() -> None:
    assert flatten_identifier("pkg.Outer.Inner", "pkg") == "Outer_Inner"
    assert flatten_identifier("Outer.Inner", "") == "Outer_Inner"
    assert flatten_identifier("pkgx.Outer", "pkg") == "Pkgx_Outer"


def test_flattening_distinguishes_nested_from_sibling_names() -> None:
    assert flatten_identifier("p.A.B", "p") != flatten_identifier("p.B", "p")


def test_nesting_levels_keep_their_separator() -> None:
    assert flatten_identifier("p.Outer.inner_msg", "p") == "Outer_InnerMsg"
    assert flatten_identifier("p.Outer.Inner", "p") != flatten_identifier("p.OuterInner", "p")
    assert flatten_identifier("p.Outer.Inner", "p") != flatten_identifier("p.Outer_Inner", "p")


def test_reference_and_short_names() -> None:
    assert normalize_reference(".google.protobuf.Timestamp") == "google.protobuf.Timestamp"
    assert normalize_reference("Local") == "Local"
    assert short_name("google.protobuf.Timestamp") == "Timestamp"
    assert short_name("Plain") == "Plain"


def test_file_namespace_segment_uses_base_name() -> None:
    assert file_namespace_segment("test/proto/nested/deeply/nested.proto") == "nested"
    assert file_namespace_segment("dependency.proto") == "dependency"
