"""Tests for gas_dts.model."""

import dataclasses

import pytest

from gas_dts.model import (
    DeclarationKind,
    EnumDeclaration,
    EnumMember,
    InterfaceDeclaration,
    MethodDeclaration,
    NamespaceNode,
    ParameterDeclaration,
    ServiceDescriptor,
)
from gas_dts.typeref import Named, VOID


class TestDeclarationKind:
    def test_enum_tag(self):
        assert EnumDeclaration("Color").kind == DeclarationKind.Enum

    def test_interface_tag(self):
        assert InterfaceDeclaration("Sheet").kind == DeclarationKind.Interface

    def test_kind_not_constructor_arg(self):
        with pytest.raises(TypeError):
            EnumDeclaration("Color", kind=DeclarationKind.Interface)


class TestServiceDescriptor:
    def test_immutable(self):
        svc = ServiceDescriptor("Calendar Service", "desc", "/calendar")
        with pytest.raises(dataclasses.FrozenInstanceError):
            svc.name = "Other"


class TestDefaults:
    def test_enum_member_value(self):
        assert EnumMember("Red").value is None

    def test_interface_members_empty(self):
        decl = InterfaceDeclaration("Sheet")
        assert decl.properties == []
        assert decl.methods == []

    def test_method_returns_void(self):
        assert MethodDeclaration("reset").return_type == VOID

    def test_parameter_flags(self):
        p = ParameterDeclaration("x", Named("Foo"))
        assert p.optional is False
        assert p.rest is False
        assert p.default is None

    def test_namespace_not_ambient(self):
        assert NamespaceNode("Calendar").ambient is False

    def test_lists_not_shared(self):
        a = EnumDeclaration("A")
        b = EnumDeclaration("B")
        a.members.append(EnumMember("X"))
        assert b.members == []
