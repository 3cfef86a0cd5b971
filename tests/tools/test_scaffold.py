"""Tests for the BepInEx plugin skeleton generator."""

from __future__ import annotations

import pytest

from asmscope.protocols.errors import MissingArgumentError
from asmscope.tools.arguments import ToolArguments
from asmscope.tools.scaffold import generate_bepinex_plugin, render_plugin


class TestRenderPlugin:
    def test_plugin_class(self) -> None:
        source = render_plugin("MyMod", "com.example.mymod", [])
        assert "namespace MyMod\n{" in source
        assert '[BepInPlugin("com.example.mymod", "MyMod", "1.0.0")]' in source
        assert "public class MyModPlugin : BaseUnityPlugin" in source
        assert 'harmony = new Harmony("com.example.mymod");' in source
        assert "harmony?.UnpatchSelf();" in source
        assert source.rstrip().endswith("}")
        assert "HarmonyPatch" not in source

    def test_hook_patch_class(self) -> None:
        source = render_plugin("MyMod", "guid", [{"type_name": "Game.PlayerState", "method_name": "Tick"}])
        assert '[HarmonyPatch(typeof(Game.PlayerState), "Tick")]' in source
        assert "class Game_PlayerState_Tick_Patch" in source
        assert "// Add your code before Tick executes" in source
        assert "// Add your code after Tick executes" in source

    def test_malformed_hooks_are_skipped(self) -> None:
        hooks = [
            {"type_name": "Game.A"},
            "not a hook",
            {"type_name": 1, "method_name": "M"},
            {"type_name": "Game.B", "method_name": "Run"},
        ]
        source = render_plugin("MyMod", "guid", hooks)
        assert source.count("[HarmonyPatch(") == 1
        assert "Game_B_Run_Patch" in source

    def test_braces_balance(self) -> None:
        source = render_plugin("M", "g", [{"type_name": "T", "method_name": "X"}])
        assert source.count("{") == source.count("}")


class TestGenerateTool:
    def test_requires_target_assembly(self) -> None:
        with pytest.raises(MissingArgumentError, match="target_assembly"):
            generate_bepinex_plugin(ToolArguments({"plugin_name": "M", "plugin_guid": "g"}))

    def test_returns_source_text(self) -> None:
        result = generate_bepinex_plugin(
            ToolArguments({"plugin_name": "M", "plugin_guid": "g", "target_assembly": "Game.Core"})
        )
        assert not result.is_error
        assert "public class MPlugin" in result.text
