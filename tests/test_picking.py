"""Tests for catalog.picking: plural key extraction and requirement resolution."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from colocale.catalog.picking import (
    MessageResolver,
    ResolvedMessages,
    ResolverConfig,
    extract_plural_keys,
    make_message_key,
    pick_messages,
    split_message_key,
)
from colocale.catalog.requirements import Requirement
from tests.strategies import catalogs, key_names, namespace_names, requirements_for


class TestExtractPluralKeys:
    def test_finds_existing_siblings_in_canonical_order(self) -> None:
        entries = {"n_other": "x", "n_one": "1", "n_few": "f"}
        assert extract_plural_keys(entries, "n") == ["n_one", "n_few", "n_other"]

    def test_ignores_literal_and_unrelated_keys(self) -> None:
        entries = {"n": "literal", "m_one": "1", "n_extra": "e"}
        assert extract_plural_keys(entries, "n") == []

    def test_non_string_values_do_not_exist(self) -> None:
        entries = {"n_one": {"nested": "x"}, "n_other": "x"}
        assert extract_plural_keys(entries, "n") == ["n_other"]

    def test_dotted_base_key(self) -> None:
        entries = {"cart.items_one": "1", "cart.items_other": "x"}
        assert extract_plural_keys(entries, "cart.items") == ["cart.items_one", "cart.items_other"]


class TestPickMessages:
    def test_plural_family_expanded(self) -> None:
        catalog = {
            "en": {"common": {"itemCount_one": "1 item", "itemCount_other": "{{count}} items"}}
        }
        result = pick_messages(catalog, [Requirement("common", ["itemCount"])], "en")
        assert result.locale == "en"
        assert result.to_dict() == {
            "common.itemCount_one": "1 item",
            "common.itemCount_other": "{{count}} items",
        }

    def test_only_required_keys(self, en_ja_catalog: dict) -> None:
        result = pick_messages(en_ja_catalog, [Requirement("common", ["submit"])], "ja")
        assert result.to_dict() == {"common.submit": "送信"}

    def test_single_requirement_accepted(self, en_ja_catalog: dict) -> None:
        result = pick_messages(en_ja_catalog, Requirement("common", ["cancel"]), "en")
        assert result.to_dict() == {"common.cancel": "Cancel"}

    def test_dotted_keys(self, en_ja_catalog: dict) -> None:
        req = Requirement("user", ["profile.name", "profile.email"])
        result = pick_messages(en_ja_catalog, req, "en")
        assert result.to_dict() == {"user.profile.name": "Name", "user.profile.email": "Email"}

    def test_literal_and_plural_both_emitted(self) -> None:
        catalog = {"en": {"ns": {"n": "literal", "n_other": "plural"}}}
        result = pick_messages(catalog, Requirement("ns", ["n"]), "en")
        assert result.to_dict() == {"ns.n": "literal", "ns.n_other": "plural"}

    def test_missing_locale_yields_empty_set(self, en_ja_catalog: dict) -> None:
        result = pick_messages(en_ja_catalog, Requirement("common", ["submit"]), "fr")
        assert result.locale == "fr"
        assert len(result) == 0

    def test_missing_namespace_and_key_skipped(self, en_ja_catalog: dict) -> None:
        reqs = [Requirement("nope", ["submit"]), Requirement("common", ["nope", "submit"])]
        result = pick_messages(en_ja_catalog, reqs, "en")
        assert result.to_dict() == {"common.submit": "Submit"}

    def test_nested_values_not_copied(self) -> None:
        catalog = {"en": {"user": {"profile": {"name": "Name"}}}}
        assert len(pick_messages(catalog, Requirement("user", ["profile"]), "en")) == 0

    def test_duplicate_requirements_tolerated(self, en_ja_catalog: dict) -> None:
        req = Requirement("common", ["submit", "submit"])
        result = pick_messages(en_ja_catalog, [req, req], "en")
        assert result.to_dict() == {"common.submit": "Submit"}

    def test_result_does_not_alias_catalog(self) -> None:
        catalog = {"en": {"ns": {"a": "A"}}}
        result = pick_messages(catalog, Requirement("ns", ["a"]), "en")
        catalog["en"]["ns"]["a"] = "changed"
        assert result["ns.a"] == "A"

    @given(data=st.data(), catalog=catalogs())
    def test_resolved_entries_exist_verbatim(self, data: st.DataObject, catalog: dict) -> None:
        """PROPERTY: every resolved entry exists verbatim in C[L]; nothing is synthesized."""
        locale = data.draw(st.sampled_from([*catalog, "xx"]))
        requirements = data.draw(requirements_for(catalog, locale))
        result = pick_messages(catalog, requirements, locale)
        event(f"resolved_size={'empty' if not result else 'non-empty'}")

        for message_key, value in result.items():
            namespace, key = split_message_key(message_key)
            assert catalog[locale][namespace][key] == value

    @given(data=st.data(), catalog=catalogs(min_locales=1, max_locales=1))
    def test_all_declared_existing_keys_resolved(self, data: st.DataObject, catalog: dict) -> None:
        """PROPERTY: every declared key present as a string in C[L] is in the result."""
        locale = next(iter(catalog))
        requirements = data.draw(requirements_for(catalog, locale))
        result = pick_messages(catalog, requirements, locale)

        for req in requirements:
            entries = catalog[locale].get(req.namespace, {})
            for key in req.keys:
                if isinstance(entries.get(key), str):
                    assert make_message_key(req.namespace, key) in result
                for plural_key in extract_plural_keys(entries, key):
                    assert make_message_key(req.namespace, plural_key) in result


class TestResolverConfig:
    def test_debug_logs_missing_keys_as_warning(
        self, en_ja_catalog: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        resolver = MessageResolver(ResolverConfig(debug=True))
        with caplog.at_level(logging.DEBUG, logger="colocale.catalog.picking"):
            resolver.pick(en_ja_catalog, Requirement("common", ["ghost"]), "en")
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "ghost" in warnings[0].getMessage()

    def test_default_logs_missing_keys_as_debug(
        self, en_ja_catalog: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="colocale.catalog.picking"):
            pick_messages(en_ja_catalog, Requirement("common", ["ghost"]), "en")
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
        assert any("ghost" in r.getMessage() for r in caplog.records)

    def test_config_exposed(self) -> None:
        config = ResolverConfig(debug=True)
        assert MessageResolver(config).config is config
        assert MessageResolver().config == ResolverConfig()


class TestResolvedMessages:
    def test_read_only(self) -> None:
        resolved = ResolvedMessages("en", {"a.b": "x"})
        with pytest.raises(TypeError):
            resolved.messages["a.b"] = "y"  # type: ignore[index]

    def test_copies_input(self) -> None:
        source = {"a.b": "x"}
        resolved = ResolvedMessages("en", source)
        source["a.b"] = "changed"
        assert resolved["a.b"] == "x"

    def test_mapping_protocol(self) -> None:
        resolved = ResolvedMessages("en", {"a.b": "x", "a.c": "y"})
        assert len(resolved) == 2
        assert "a.b" in resolved
        assert resolved.get("a.z") is None
        assert sorted(resolved) == ["a.b", "a.c"]

    def test_lookup(self) -> None:
        resolved = ResolvedMessages("en", {"user.profile.name": "Name"})
        assert resolved.lookup("user", "profile.name") == "Name"
        assert resolved.lookup("user", "missing") is None

    def test_equality_includes_locale(self) -> None:
        assert ResolvedMessages("en", {"a.b": "x"}) == ResolvedMessages("en", {"a.b": "x"})
        assert ResolvedMessages("en", {"a.b": "x"}) != ResolvedMessages("ja", {"a.b": "x"})
        assert hash(ResolvedMessages("en", {"a.b": "x"})) == hash(ResolvedMessages("en", {"a.b": "x"}))

    def test_empty_default(self) -> None:
        assert len(ResolvedMessages("en")) == 0


class TestMessageKeys:
    def test_split_at_first_separator(self) -> None:
        assert split_message_key("user.profile.name") == ("user", "profile.name")

    def test_dotted_namespace_is_ambiguous(self) -> None:
        """A namespace containing a dot does not round-trip (documented boundary)."""
        key = make_message_key("a.b", "c")
        assert split_message_key(key) == ("a", "b.c")

    @pytest.mark.parametrize("bad", ["nodot", ".key", "ns.", ""])
    def test_malformed_rejected(self, bad: str) -> None:
        with pytest.raises(ValueError, match="namespaced"):
            split_message_key(bad)

    @given(namespace=namespace_names, key=key_names)
    def test_round_trip(self, namespace: str, key: str) -> None:
        """PROPERTY: dot-free namespaces round-trip through make/split."""
        assert split_message_key(make_message_key(namespace, key)) == (namespace, key)


class TestConcurrentResolution:
    def test_concurrent_picks_are_consistent(self, en_ja_catalog: dict) -> None:
        """Many threads resolving the same catalog get identical results."""
        reqs = [Requirement("common", ["submit", "itemCount"]), Requirement("user", ["greeting"])]
        expected = pick_messages(en_ja_catalog, reqs, "en")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: pick_messages(en_ja_catalog, reqs, "en"), range(64)))

        assert all(result == expected for result in results)
