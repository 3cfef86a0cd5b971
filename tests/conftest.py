"""Shared fixtures: a small two-assembly metadata world."""

from __future__ import annotations

import pytest

from asmscope.core.metadata import (
    AccessorDef,
    AssemblyDef,
    FieldDef,
    MethodDef,
    ModuleDef,
    ParameterDef,
    PropertyDef,
    SnapshotMetadataProvider,
    TypeDef,
)
from asmscope.core.resources import MarkdownResources
from asmscope.tools.registry import ToolRegistry


def _game_types() -> list[TypeDef]:
    return [
        TypeDef(
            namespace="Game",
            name="PlayerState",
            base_type="System.Object",
            interfaces=["System.IDisposable"],
            properties=[
                PropertyDef(
                    name="Stats",
                    type="Game.PlayerStats",
                    getter=AccessorDef(name="get_Stats"),
                    setter=AccessorDef(name="set_Stats", is_public=False),
                ),
            ],
            fields=[
                FieldDef(name="inventory", type="Game.Inventory"),
                FieldDef(name="self", type="Game.PlayerState"),
            ],
            methods=[
                MethodDef(
                    name="Tick",
                    signature="void Tick()",
                    source="public void Tick()\n{\n\tthis.Stats.Update();\n}\n",
                ),
                MethodDef(
                    name="Reset",
                    signature="void Reset(int)",
                    parameters=[ParameterDef(name="level", type="System.Int32")],
                ),
            ],
        ),
        TypeDef(
            namespace="Game",
            name="PlayerStats",
            properties=[
                PropertyDef(name="Bonus", type="Game.Rewards.RpBonus", getter=AccessorDef(name="get_Bonus")),
            ],
            fields=[
                FieldDef(name="health", type="System.Int32", is_public=True),
                FieldDef(name="xpBonus", type="System.Single", is_public=True),
                FieldDef(name="rpBonusMultiplier", type="System.Single", is_read_only=True),
                FieldDef(name="MaxHealth", type="System.Int32", is_static=True, is_literal=True),
            ],
        ),
        TypeDef(
            namespace="Game",
            name="Inventory",
            fields=[
                FieldDef(name="owner", type="Game.PlayerState"),
                FieldDef(name="items", type="System.Object"),
            ],
        ),
        TypeDef(
            namespace="Game.Rewards",
            name="RpBonus",
            fields=[FieldDef(name="amount", type="System.Int32")],
        ),
        TypeDef(
            namespace="Game.Rewards",
            name="RpBonusTable",
            fields=[FieldDef(name="entries", type="System.Object")],
        ),
    ]


@pytest.fixture
def assemblies() -> list[AssemblyDef]:
    return [
        AssemblyDef(
            name="Game.Core",
            version="1.2.0.0",
            modules=[ModuleDef(name="Game.Core.dll", types=_game_types())],
        ),
        AssemblyDef(
            name="Engine",
            version="2.0.0.0",
            modules=[
                ModuleDef(
                    name="Engine.dll",
                    types=[TypeDef(namespace="Engine", name="Vector3", is_class=False, is_value_type=True)],
                ),
            ],
        ),
    ]


@pytest.fixture
def provider(assemblies: list[AssemblyDef]) -> SnapshotMetadataProvider:
    return SnapshotMetadataProvider(assemblies)


@pytest.fixture
def registry(provider: SnapshotMetadataProvider) -> ToolRegistry:
    return ToolRegistry(provider)


@pytest.fixture
def resources() -> MarkdownResources:
    docs = MarkdownResources()
    docs.add("docs://harmony-patching", "# Harmony patching\n\nPrefix and postfix hooks.\n")
    return docs
