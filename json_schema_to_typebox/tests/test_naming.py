"""
Tests for identifier derivation.
"""

from __future__ import annotations

import pytest

from json_schema_to_typebox.errors import NamingError
from json_schema_to_typebox.pipeline.analyzer import AuxiliaryKind, NameResolver
from json_schema_to_typebox.utils import capitalize, is_identifier, quote_property_name, to_enum_member_name, to_identifier, to_literal


class TestCapitalize:
    def test_first_letter_only(self):
        assert capitalize("status") == "Status"
        assert capitalize("optionalStatus") == "OptionalStatus"
        assert capitalize("a") == "A"

    def test_already_capitalized(self):
        assert capitalize("Person") == "Person"

    def test_non_letter_start(self):
        assert capitalize("_x") == "_x"

    def test_empty_raises(self):
        with pytest.raises(NamingError):
            capitalize("")


class TestNameResolver:
    def setup_method(self):
        self.names = NameResolver()

    def test_title_is_used(self):
        assert self.names.top_level_name({"title": "Person", "type": "object"}) == "Person"

    def test_default_name(self):
        assert self.names.top_level_name({"type": "object"}) == "T"
        assert self.names.top_level_name({"title": "", "type": "object"}) == "T"
        assert self.names.top_level_name({"title": 3}) == "T"
        assert self.names.top_level_name(True) == "T"

    def test_type_alias_name(self):
        assert self.names.type_alias_name("person") == "Person"
        assert self.names.type_alias_name("T") == "T"

    def test_type_alias_name_empty(self):
        with pytest.raises(NamingError):
            self.names.type_alias_name("")

    def test_auxiliary_names(self):
        assert self.names.auxiliary_name("status", AuxiliaryKind.ENUM) == "StatusEnum"
        assert self.names.auxiliary_name("status", AuxiliaryKind.UNION) == "StatusUnion"

    def test_auxiliary_name_empty(self):
        with pytest.raises(NamingError):
            self.names.auxiliary_name("", AuxiliaryKind.ENUM)

    def test_title_becomes_identifier(self):
        assert self.names.top_level_name({"title": "My Schema"}) == "My_Schema"
        assert self.names.top_level_name({"title": "2nd"}) == "_2nd"
        assert self.names.type_alias_name(self.names.top_level_name({"title": "2nd"})) == "_2nd"

    def test_auxiliary_name_from_quoted_property(self):
        assert self.names.auxiliary_name("first-name", AuxiliaryKind.ENUM) == "First_nameEnum"
        assert self.names.auxiliary_name("first-name", AuxiliaryKind.UNION) == "First_nameUnion"
        assert self.names.auxiliary_name("1st", AuxiliaryKind.ENUM) == "_1stEnum"


class TestToIdentifier:
    @pytest.mark.parametrize(
        "name, identifier",
        [
            ("Person", "Person"),
            ("$id", "$id"),
            ("My Schema", "My_Schema"),
            ("first-name", "first_name"),
            ("a.b/c", "a_b_c"),
            ("2d", "_2d"),
        ],
    )
    def test_to_identifier(self, name, identifier):
        assert to_identifier(name) == identifier
        assert is_identifier(identifier)

    def test_empty_raises(self):
        with pytest.raises(NamingError):
            to_identifier("")


class TestPropertyNames:
    @pytest.mark.parametrize("name", ["name", "_private", "$id", "camelCase", "a1"])
    def test_identifiers_stay_bare(self, name):
        assert is_identifier(name)
        assert quote_property_name(name) == name

    @pytest.mark.parametrize(
        "name, quoted",
        [
            ("first-name", '"first-name"'),
            ("1st", '"1st"'),
            ("with space", '"with space"'),
            ("", '""'),
            ('say "hi"', '"say \\"hi\\""'),
        ],
    )
    def test_other_names_are_quoted(self, name, quoted):
        assert quote_property_name(name) == quoted


class TestLiterals:
    def test_to_literal(self):
        assert to_literal("a") == '"a"'
        assert to_literal(1) == "1"
        assert to_literal(1.5) == "1.5"
        assert to_literal(True) == "true"
        assert to_literal(None) == "null"

    @pytest.mark.parametrize(
        "value, member",
        [
            ("accepted", "ACCEPTED"),
            ("in-progress", "IN_PROGRESS"),
            ("3d", "_3D"),
            ("", "_"),
            (1, "_1"),
            (1.5, "_1_5"),
            (-2, "__2"),
        ],
    )
    def test_enum_member_names(self, value, member):
        assert to_enum_member_name(value) == member
