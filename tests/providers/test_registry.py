"""Tests for catalog_core/providers/registry.py"""

import pytest

from catalog_core.providers.registry import ProviderRegistry, get_provider_registry


class TestNormalizeAspName:
    def test_case_insensitive(self, registry):
        assert registry.normalize_asp_name("FANZA") == "fanza"
        assert registry.normalize_asp_name("fanza") == "fanza"
        assert registry.normalize_asp_name(" Dmm ") == "fanza"

    def test_alias(self, registry):
        assert registry.normalize_asp_name("一本道") == "1pondo"

    def test_parent_with_url_resolves_sub_provider(self, registry):
        assert registry.normalize_asp_name("DTI", "https://www.heyzo.com/moviepages/1234/") == "heyzo"

    def test_parent_without_matching_url(self, registry):
        assert registry.normalize_asp_name("DTI", "https://example.com/") == "dti"
        assert registry.normalize_asp_name("DTI") == "dti"

    def test_url_ignored_for_non_parent(self, registry):
        assert registry.normalize_asp_name("MGS", "https://www.heyzo.com/") == "mgs"

    def test_unknown_name_is_lowercased(self, registry):
        assert registry.normalize_asp_name("NewShop") == "newshop"

    @pytest.mark.parametrize("value", [None, "", 5])
    def test_empty_input(self, registry, value):
        assert registry.normalize_asp_name(value) == ""


class TestLabels:
    def test_map_legacy_provider(self, registry):
        assert registry.map_legacy_provider("APEX") == "duga"

    def test_get_provider_label(self, registry):
        assert registry.get_provider_label("mgs") == "MGS動画"
        assert registry.get_provider_label("DMM") == "FANZA"

    def test_unknown_label_shown_as_is(self, registry):
        assert registry.get_provider_label("NewShop") == "NewShop"

    def test_is_known(self, registry):
        assert registry.is_known("heyzo")
        assert not registry.is_known("NewShop")
        assert not registry.is_known(None)


class TestToProviderIds:
    def test_maps_and_dedupes_in_order(self, registry):
        assert registry.to_provider_ids(["MGS", "FANZA", "dmm", "一本道"]) == ["mgs", "fanza", "1pondo"]

    def test_unknown_and_non_string_dropped(self, registry):
        assert registry.to_provider_ids(["Unknown", None, 3, "DUGA"]) == ["duga"]

    def test_none(self, registry):
        assert registry.to_provider_ids(None) == []


class TestRedirectUrl:
    def test_default_locale_has_no_query(self, registry):
        assert registry.redirect_url("FANZA", 101, "ja") == "https://www.f.adult-v.com/products/101"

    def test_other_locale_adds_hl(self, registry):
        assert registry.redirect_url("fanza", 101, "en") == "https://www.f.adult-v.com/products/101?hl=en"

    def test_other_providers_have_no_redirect(self, registry):
        assert registry.redirect_url("MGS", 101, "ja") is None
        assert registry.redirect_url("", 101, "ja") is None


class TestDefaults:
    def test_default_asp_name(self, registry):
        assert registry.default_asp_name == "DUGA"

    def test_provider_count(self, registry, sample_providers):
        assert registry.provider_count == len(sample_providers)

    def test_empty_registry(self):
        empty = ProviderRegistry(providers=[], settings={})
        assert empty.normalize_asp_name("FANZA") == "fanza"
        assert empty.get_provider_label("FANZA") == "FANZA"
        assert empty.redirect_url("FANZA", 1, "en") is None
        assert empty.default_asp_name == ""


class TestSharedRegistry:
    def test_loaded_from_config(self):
        registry = get_provider_registry()
        assert registry is get_provider_registry()
        assert registry.normalize_asp_name("DTI", "https://www.caribbeancompr.com/moviepages/1/") == "caribbeancompr"
        assert registry.normalize_asp_name("カリビアンコム") == "caribbeancom"
        assert registry.get_provider_label("SOKMIL") == "ソクミル"
