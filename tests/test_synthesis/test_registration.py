"""Tests for panel registration class annotations."""

from __future__ import annotations

from pathlib import Path

from gluadoc.config import PluginConfig
from gluadoc.constants import CallShape
from gluadoc.synthesis import registration
from gluadoc.synthesis.diff import apply_edits, assemble


class TestParseRegistration:
    def test_vgui_register(self) -> None:
        reg = registration.parse_registration(
            CallShape.REGISTER, '"MyPanel", PANEL, "DPanel"', 3
        )
        assert reg is not None
        assert (reg.name, reg.table, reg.base, reg.position) == (
            "MyPanel",
            "PANEL",
            "DPanel",
            3,
        )

    def test_define_control(self) -> None:
        reg = registration.parse_registration(
            CallShape.DEFINE_CONTROL, '"DMy", "A control", PANEL, "DPanel"'
        )
        assert reg is not None
        assert (reg.name, reg.table, reg.base) == ("DMy", "PANEL", "DPanel")

    def test_without_base(self) -> None:
        reg = registration.parse_registration(CallShape.REGISTER, '"A", PANEL')
        assert reg is not None
        assert reg.base is None

    def test_table_must_be_identifier(self) -> None:
        assert (
            registration.parse_registration(CallShape.REGISTER, '"A", {}, "P"')
            is None
        )

    def test_too_few_arguments(self) -> None:
        assert (
            registration.parse_registration(CallShape.DEFINE_CONTROL, '"A", "d"')
            is None
        )


class TestSynthesize:
    def test_panel_file_gets_class_and_accessors(
        self, fixture_dir: Path, config: PluginConfig
    ) -> None:
        text = (fixture_dir / "lua" / "vgui" / "my_panel.lua").read_text(
            encoding="utf-8"
        )
        edits = registration.synthesize(text, config)
        assert len(edits) == 1
        edit = edits[0]
        assert (edit.start, edit.finish) == (1, 0)
        assert edit.text == (
            "---@class MyPanel : DPanel\n"
            "---@field m_bActive boolean\n"
            "---@field SetActive fun(self: MyPanel, value: boolean)\n"
            "---@field GetActive fun(self: MyPanel): boolean\n"
        )

    def test_blank_lines_above_assignment_replaced(
        self, config: PluginConfig
    ) -> None:
        text = 'print(1)\n\n\nlocal PANEL = {}\nvgui.Register("A", PANEL)\n'
        edits = registration.synthesize(text, config)
        assert [(e.start, e.finish) for e in edits] == [(10, 11)]
        assert apply_edits(text, edits) == (
            "print(1)\n"
            "---@class A : Panel\n"
            "local PANEL = {}\n"
            'vgui.Register("A", PANEL)\n'
        )

    def test_leading_blank_lines_of_file_kept(self, config: PluginConfig) -> None:
        text = '\n\nlocal PANEL = {}\nvgui.Register("A", PANEL)\n'
        edits = registration.synthesize(text, config)
        assert [(e.start, e.finish) for e in edits] == [(3, 2)]
        assert apply_edits(text, edits) == (
            "\n"
            "\n"
            "---@class A : Panel\n"
            "local PANEL = {}\n"
            'vgui.Register("A", PANEL)\n'
        )

    def test_reused_table_name_documents_each_panel(
        self, config: PluginConfig
    ) -> None:
        text = (
            "local PANEL = {}\n"
            'AccessorFunc(PANEL, "m_a", "A", FORCE_STRING)\n'
            'vgui.Register("PanelA", PANEL)\n'
            "\n"
            "PANEL = {}\n"
            'AccessorFunc(PANEL, "m_b", "B", FORCE_NUMBER)\n'
            'derma.DefineControl("PanelB", "second", PANEL, "DFrame")\n'
        )
        edits = assemble(registration.synthesize(text, config))
        assert edits is not None
        assert apply_edits(text, edits) == (
            "---@class PanelA : Panel\n"
            "---@field m_a string\n"
            "---@field SetA fun(self: PanelA, value: string)\n"
            "---@field GetA fun(self: PanelA): string\n"
            "local PANEL = {}\n"
            'AccessorFunc(PANEL, "m_a", "A", FORCE_STRING)\n'
            'vgui.Register("PanelA", PANEL)\n'
            "---@class PanelB : DFrame\n"
            "---@field m_b number\n"
            "---@field SetB fun(self: PanelB, value: number)\n"
            "---@field GetB fun(self: PanelB): number\n"
            "PANEL = {}\n"
            'AccessorFunc(PANEL, "m_b", "B", FORCE_NUMBER)\n'
            'derma.DefineControl("PanelB", "second", PANEL, "DFrame")\n'
        )

    def test_already_documented(self, config: PluginConfig) -> None:
        text = (
            "---@class MyPanel : DPanel\n"
            "local PANEL = {}\n"
            'vgui.Register("MyPanel", PANEL, "DPanel")\n'
        )
        assert registration.synthesize(text, config) == []

    def test_orphaned_registration_skipped(self, config: PluginConfig) -> None:
        text = 'vgui.Register("A", PANEL)\nlocal PANEL = {}\n'
        assert registration.synthesize(text, config) == []

    def test_same_name_registered_once(self, config: PluginConfig) -> None:
        text = (
            "local PANEL = {}\n"
            'vgui.Register("A", PANEL)\n'
            'vgui.Register("A", PANEL)\n'
        )
        assert len(registration.synthesize(text, config)) == 1

    def test_self_accessors_fall_back(self, config: PluginConfig) -> None:
        text = (
            "local P = {}\n"
            "function P:Init()\n"
            '\tAccessorFunc(self, "m_n", "N", FORCE_NUMBER)\n'
            "end\n"
            'vgui.Register("A", P)\n'
        )
        edits = registration.synthesize(text, config)
        assert "---@field SetN fun(self: A, value: number)" in edits[0].text


def test_has_registrations(config: PluginConfig) -> None:
    assert registration.has_registrations('vgui.Register("A", PANEL)', config)
    assert not registration.has_registrations("local PANEL = {}", config)
