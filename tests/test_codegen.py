"""Tests for codegen: Literal key type generation."""

from __future__ import annotations

import pytest

from colocale.codegen import base_keys, generate_key_types, namespace_type_name


class TestNamespaceTypeName:
    @pytest.mark.parametrize(
        ("namespace", "expected"),
        [
            ("common", "CommonKey"),
            ("user-settings", "UserSettingsKey"),
            ("user_settings", "UserSettingsKey"),
            ("adminPanel", "AdminPanelKey"),
            ("2fa", "N2faKey"),
            ("---", "UnnamedKey"),
        ],
    )
    def test_names(self, namespace: str, expected: str) -> None:
        assert namespace_type_name(namespace) == expected


class TestBaseKeys:
    def test_plural_siblings_collapse(self) -> None:
        entries = {"submit": "S", "itemCount_one": "1", "itemCount_other": "x"}
        assert base_keys(entries) == ["itemCount", "submit"]

    def test_nested_values_skipped(self) -> None:
        assert base_keys({"a": "A", "nested": {"x": "y"}}) == ["a"]

    def test_literal_and_family_share_base(self) -> None:
        assert base_keys({"n": "literal", "n_other": "x"}) == ["n"]


class TestGenerateKeyTypes:
    def test_aliases(self, en_ja_catalog: dict) -> None:
        source = generate_key_types(en_ja_catalog["en"])
        assert 'type Namespace = Literal["common", "user"]' in source
        assert 'type CommonKey = Literal["cancel", "itemCount", "submit"]' in source
        assert 'type UserKey = Literal["greeting", "profile.email", "profile.name"]' in source
        assert "from typing import Literal\n" in source

    def test_generated_module_executes(self, en_ja_catalog: dict) -> None:
        namespace: dict[str, object] = {}
        exec(compile(generate_key_types(en_ja_catalog["en"]), "message_keys.py", "exec"), namespace)
        assert namespace["KEYS_BY_NAMESPACE"] == {
            "common": frozenset({"cancel", "itemCount", "submit"}),
            "user": frozenset({"greeting", "profile.email", "profile.name"}),
        }

    def test_empty_namespace_uses_never(self) -> None:
        source = generate_key_types({"empty": {}})
        assert "from typing import Literal, Never" in source
        assert "type EmptyKey = Never" in source
        assert '"empty": frozenset(),' in source
        exec(compile(source, "message_keys.py", "exec"), {})

    def test_empty_catalog(self) -> None:
        source = generate_key_types({})
        assert "type Namespace = Never" in source
        exec(compile(source, "message_keys.py", "exec"), {})

    def test_non_ascii_keys_kept(self) -> None:
        source = generate_key_types({"ns": {"título": "x"}})
        assert '"título"' in source


class TestAliasNameCollisions:
    def test_colliding_namespaces_get_distinct_aliases(self) -> None:
        source = generate_key_types({
            "user-settings": {"theme": "Theme"},
            "user_settings": {"language": "Language"},
        })
        assert 'type UserSettingsKey = Literal["theme"]' in source
        assert 'type UserSettingsKey2 = Literal["language"]' in source

    def test_colliding_aliases_keep_their_own_keys(self) -> None:
        namespace: dict[str, object] = {}
        source = generate_key_types({
            "user-settings": {"theme": "Theme"},
            "user_settings": {"language": "Language"},
        })
        exec(compile(source, "message_keys.py", "exec"), namespace)
        assert namespace["UserSettingsKey"].__value__.__args__ == ("theme",)
        assert namespace["UserSettingsKey2"].__value__.__args__ == ("language",)

    def test_unnamed_namespaces_numbered(self) -> None:
        source = generate_key_types({"日本": {"a": "A"}, "中文": {"b": "B"}, "한국": {"c": "C"}})
        aliases = [line.split(" = ")[0] for line in source.splitlines() if line.startswith("type ")]
        assert aliases == ["type Namespace", "type UnnamedKey", "type UnnamedKey2", "type UnnamedKey3"]
