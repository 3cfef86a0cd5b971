"""Reflected program metadata — assemblies, modules, types and members.

These models are the read-only view the server queries.  A metadata
provider hands them out; nothing in the server mutates them.

Example snapshot YAML::

    assemblies:
      - name: Game.Core
        version: 1.2.0.0
        modules:
          - name: Game.Core.dll
            types:
              - namespace: Game
                name: PlayerState
                properties:
                  - { name: Stats, type: Game.PlayerStats }
                fields:
                  - { name: inventory, type: Game.Inventory }
                methods:
                  - name: Tick
                    return_type: System.Void
                    source: |
                      public void Tick() { ... }
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ParameterDef(BaseModel):
    name: str
    type: str


class MethodDef(BaseModel):
    """A method declared on a type.  ``source`` backs decompilation."""

    name: str
    signature: str = ""
    return_type: str = "System.Void"
    parameters: list[ParameterDef] = []
    is_public: bool = True
    is_static: bool = False
    is_virtual: bool = False
    is_abstract: bool = False
    source: str | None = None


class FieldDef(BaseModel):
    name: str
    type: str
    is_public: bool = False
    is_static: bool = False
    is_literal: bool = False
    is_read_only: bool = False
    attributes: str = ""


class AccessorDef(BaseModel):
    name: str
    is_public: bool = True
    is_static: bool = False


class PropertyDef(BaseModel):
    name: str
    type: str
    getter: AccessorDef | None = None
    setter: AccessorDef | None = None
    attributes: str = ""
    custom_attributes: list[str] = []

    @property
    def can_read(self) -> bool:
        return self.getter is not None

    @property
    def can_write(self) -> bool:
        return self.setter is not None


class TypeDef(BaseModel):
    """A type definition.  Identity is :attr:`full_name`.

    Members keep their source-declaration order; the path finder relies
    on it for deterministic results.
    """

    namespace: str = ""
    name: str
    full_name: str = ""
    is_public: bool = True
    is_class: bool = True
    is_interface: bool = False
    is_enum: bool = False
    is_value_type: bool = False
    is_abstract: bool = False
    is_sealed: bool = False
    base_type: str | None = None
    interfaces: list[str] = []
    fields: list[FieldDef] = []
    properties: list[PropertyDef] = []
    methods: list[MethodDef] = []

    @model_validator(mode="after")
    def _default_full_name(self) -> TypeDef:
        if not self.full_name:
            self.full_name = f"{self.namespace}.{self.name}" if self.namespace else self.name
        return self


class ModuleDef(BaseModel):
    name: str
    kind: str = "Dll"
    architecture: str = "AnyCPU"
    runtime_version: str = "v4.0.30319"
    types: list[TypeDef] = []


class AssemblyDef(BaseModel):
    name: str
    version: str | None = None
    culture: str | None = None
    public_key_token: str | None = None
    full_name: str = ""
    modules: list[ModuleDef] = Field(default_factory=list)

    @model_validator(mode="after")
    def _default_full_name(self) -> AssemblyDef:
        if not self.full_name:
            self.full_name = (
                f"{self.name}, Version={self.version or '0.0.0.0'}, "
                f"Culture={self.culture or 'neutral'}, "
                f"PublicKeyToken={self.public_key_token or 'null'}"
            )
        return self

    @property
    def types(self) -> list[TypeDef]:
        """All types of all modules, in module then declaration order."""
        return [t for module in self.modules for t in module.types]
