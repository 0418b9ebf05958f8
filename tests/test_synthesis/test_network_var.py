"""Tests for NetworkVar / NetworkVarElement parsing and documentation."""

from __future__ import annotations

import pytest

from gluadoc.config import PluginConfig
from gluadoc.constants import CallShape
from gluadoc.synthesis import network_var
from gluadoc.synthesis.schemas import NetworkField

SETUP_TEXT = (
    "function ENT:SetupDataTables()\n"
    '\tself:NetworkVar("Int", 0, "Ammo")\n'
    '\tself:NetworkVarElement("Vector", 0, "x", "PosX")\n'
    '\tself:NetworkVar("Bool", "Armed")\n'
    "end\n"
)


class TestParseNetworkVar:
    def test_indexed(self) -> None:
        field = network_var.parse_network_var(['"Float"', "0", '"Speed"'])
        assert field is not None
        assert (field.shape, field.type_tag, field.name) == (
            CallShape.INDEXED,
            "Float",
            "Speed",
        )

    def test_named(self) -> None:
        field = network_var.parse_network_var(['"Float"', '"Speed"'])
        assert field is not None
        assert (field.shape, field.name) == (CallShape.NAMED, "Speed")

    def test_named_with_extended_table(self) -> None:
        field = network_var.parse_network_var(
            ['"Float"', '"Speed"', '{ KeyName = "speed" }']
        )
        assert field is not None
        assert (field.shape, field.name) == (CallShape.NAMED, "Speed")

    def test_unquoted_type_kept_raw(self) -> None:
        field = network_var.parse_network_var(["kind", "0", '"Speed"'])
        assert field is not None
        assert field.type_tag == "kind"

    @pytest.mark.parametrize(
        "parts",
        [['"Float"'], ['"Float"', "0", "name_var"], ['"Float"', "slot"]],
    )
    def test_unnamed(self, parts: list[str]) -> None:
        assert network_var.parse_network_var(parts) is None


class TestParseNetworkVarElement:
    def test_full_form(self) -> None:
        field = network_var.parse_network_var_element(
            ['"Vector"', "0", '"x"', '"PosX"']
        )
        assert field is not None
        assert (field.shape, field.name) == (CallShape.ELEMENT, "PosX")

    def test_string_slot_and_element_names_by_element(self) -> None:
        field = network_var.parse_network_var_element(
            ['"Vector"', '"Pos"', '"x"', '"PosX"']
        )
        assert field is not None
        assert field.name == "x"

    def test_short_form(self) -> None:
        field = network_var.parse_network_var_element(['"Angle"', "1", '"Yaw"'])
        assert field is not None
        assert field.name == "Yaw"

    def test_too_few_arguments(self) -> None:
        assert network_var.parse_network_var_element(['"Angle"', "1"]) is None


class TestResolveValueType:
    def test_element_always_number(self, config: PluginConfig) -> None:
        field = NetworkField(
            shape=CallShape.ELEMENT, type_tag="Angle", name="p", position=1
        )
        assert network_var.resolve_value_type(field, config) == "number"

    def test_unknown_tag_is_untyped(self, config: PluginConfig) -> None:
        field = NetworkField(
            shape=CallShape.INDEXED, type_tag="Double", name="d", position=1
        )
        assert network_var.resolve_value_type(field, config) == "any"


def test_find_network_fields_in_source_order(config: PluginConfig) -> None:
    fields = network_var.find_network_fields(SETUP_TEXT, config)
    assert [f.name for f in fields] == ["Ammo", "PosX", "Armed"]
    assert [f.shape for f in fields] == [
        CallShape.INDEXED,
        CallShape.ELEMENT,
        CallShape.NAMED,
    ]


def test_collect_field_doc_lines(config: PluginConfig) -> None:
    lines = network_var.collect_field_doc_lines(SETUP_TEXT, "ENT", "my_ent", config)
    assert lines == [
        "---@field SetAmmo fun(self: my_ent, value: integer)",
        "---@field GetAmmo fun(self: my_ent): integer",
        "---@field SetPosX fun(self: my_ent, value: number)",
        "---@field GetPosX fun(self: my_ent): number",
        "---@field SetArmed fun(self: my_ent, value: boolean)",
        "---@field GetArmed fun(self: my_ent): boolean",
    ]


class TestSynthesize:
    def test_default_owner_and_line_start(self, config: PluginConfig) -> None:
        edits = network_var.synthesize(SETUP_TEXT, None, None, config)
        assert len(edits) == 3
        first_line = SETUP_TEXT.index("\tself:NetworkVar")
        assert (edits[0].start, edits[0].finish) == (first_line + 1, first_line)
        assert edits[0].text == (
            "---@field SetAmmo fun(self: Entity, value: integer)\n"
            "---@field GetAmmo fun(self: Entity): integer\n"
        )

    def test_documented_fields_skipped(self, config: PluginConfig) -> None:
        text = (
            "---@field SetAmmo fun(self: Entity, value: integer)\n"
            "---@field GetAmmo fun(self: Entity): integer\n" + SETUP_TEXT
        )
        edits = network_var.synthesize(text, None, None, config)
        assert len(edits) == 2
        assert all("Ammo" not in e.text for e in edits)
