"""
Unit tests for the bounded result cache
"""

import threading

import pytest

from bichig.app.editor import EditBuffer, apply_at_cursor
from bichig.app.exceptions import ConfigurationError
from bichig.app.translit import (
    MAX_CACHE_SIZE,
    ResultCache,
    TransliterationOptions,
    convert_text,
    get_cache,
    reset_cache,
    transliterate,
)
from bichig.app.utils.config import get_loaded_config, load_config


class TestResultCache:

    def test_fifo_eviction(self):
        cache = ResultCache(3)
        for key in "abcd":
            cache.put(key, key.upper())

        assert len(cache) == 3
        assert "a" not in cache
        assert cache.get("d") == "D"

    def test_reads_do_not_refresh_entries(self):
        cache = ResultCache(3)
        for key in "abc":
            cache.put(key, key)
        cache.get("a")
        cache.put("d", "d")

        assert "a" not in cache
        assert "b" in cache

    def test_reinserting_key_keeps_size(self):
        cache = ResultCache(2)
        cache.put("a", "1")
        cache.put("a", "1")

        assert len(cache) == 1

    def test_miss_returns_none(self):
        assert ResultCache(2).get("missing") is None

    def test_clear(self):
        cache = ResultCache(2)
        cache.put("a", "1")
        cache.clear()

        assert len(cache) == 0

    def test_capacity_floor(self):
        assert ResultCache(0).max_size == 1

    def test_concurrent_puts_stay_bounded(self):
        cache = ResultCache(50)

        def worker(offset):
            for i in range(500):
                cache.put((offset, i), "x")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 50


class TestProcessCache:

    def test_default_capacity(self):
        assert get_cache().max_size == MAX_CACHE_SIZE == 1000

    def test_singleton_until_reset(self):
        cache = get_cache()
        assert get_cache() is cache
        reset_cache()
        assert get_cache() is not cache

    def test_result_is_cached_under_input_and_options(self):
        options = TransliterationOptions()
        result = transliterate("bayar", options)

        assert get_cache().get(("bayar", options)) == result

    def test_hit_and_miss_return_same_value(self):
        miss = transliterate("Sain baina")
        hit = transliterate("Sain baina")
        reset_cache()
        fresh = transliterate("Sain baina")

        assert miss == hit == fresh == "Сайн байна"

    def test_bounded_by_configured_size(self, write_config):
        load_config(write_config("[engine]\ncache_size = 5\n"))

        for i in range(20):
            transliterate(f"word{i}")

        assert len(get_cache()) == 5

    def test_eviction_does_not_change_results(self, write_config):
        load_config(write_config("[engine]\ncache_size = 2\n"))

        first = transliterate("khar")
        for word in ("a", "b", "c"):
            transliterate(word)

        assert transliterate("khar") == first == "хар"

    def test_default_bound_holds_after_many_distinct_calls(self):
        for i in range(MAX_CACHE_SIZE + 200):
            transliterate(f"b{i}")

        assert len(get_cache()) == MAX_CACHE_SIZE

    def test_oversized_setting_is_rejected(self, write_config):
        with pytest.raises(ConfigurationError):
            load_config(write_config("[engine]\ncache_size = 5000\n"))


class TestSettingsIsolation:
    """The engine never loads settings on its own"""

    def test_bad_environment_value_is_ignored(self, monkeypatch):
        monkeypatch.setenv("BICHIG_ENGINE__CACHE_SIZE", "lots")

        assert transliterate("bayar") == "баяр"
        assert get_cache().max_size == MAX_CACHE_SIZE

    def test_malformed_config_file_is_ignored(self, write_config, monkeypatch):
        path = write_config("[engine\n")
        monkeypatch.setenv("BICHIG_CONFIG", str(path))

        assert apply_at_cursor("bayar", 5) == EditBuffer("баяр", 4)
        assert convert_text("Bayar") == "Баяр"
        assert get_loaded_config() is None
