"""
Unit tests for the scheme listing and conversion table rendering
"""

from bichig.app.display import BoxDrawingHelper, chunk_mappings, render_table
from bichig.app.translit import Mapping, list_mappings, transliterate
from bichig.app.translit.tables import MULTIGRAPH_KEYS, MULTIGRAPHS, SINGLE_MAP


class TestListMappings:

    def test_contains_every_rule_but_passthroughs(self):
        latin = {m.latin for m in list_mappings()}

        assert latin == (set(MULTIGRAPHS) | set(SINGLE_MAP)) - {" ", ".", ","}
        assert len(list_mappings()) == 41

    def test_sorted_by_length_then_alphabetically(self):
        keys = [m.latin for m in list_mappings()]
        lengths = [len(k) for k in keys]

        assert lengths == sorted(lengths, reverse=True)
        assert [k for k in keys if len(k) == 2] == sorted(k for k in keys if len(k) == 2)
        assert keys[0] == "shch"
        assert keys[1] == "sch"

    def test_accented_letter_sorts_beside_base_letter(self):
        singles = [m.latin for m in list_mappings() if len(m.latin) == 1]

        assert singles[singles.index("e") + 1] == "ë"
        assert singles[singles.index("ë") + 1] == "f"

    def test_entries(self):
        mappings = list_mappings()

        assert Mapping("w", "ү") in mappings
        assert Mapping("sh", "ш") in mappings
        assert Mapping("x", "кс") in mappings

    def test_listing_agrees_with_transducer(self):
        for mapping in list_mappings():
            if mapping.latin != "i":
                assert transliterate(mapping.latin) == mapping.cyrillic

    def test_scan_order_matches_listing(self):
        multigraphs = [m.latin for m in list_mappings() if len(m.latin) > 1]

        assert list(MULTIGRAPH_KEYS) == multigraphs


class TestChunkMappings:

    def test_three_columns(self):
        chunks = chunk_mappings(list_mappings(), 3)

        assert [len(c) for c in chunks] == [14, 14, 13]
        assert [m for c in chunks for m in c] == list(list_mappings())

    def test_short_input_leaves_empty_groups(self):
        mappings = list_mappings()[:2]

        assert [len(c) for c in chunk_mappings(mappings, 3)] == [1, 1, 0]


class TestRenderTable:

    def test_box_layout(self):
        lines = render_table().splitlines()

        assert len(lines) == 18
        assert lines[0].startswith("┌")
        assert lines[0].count("┌") == 3
        assert "Кирилл" in lines[1]
        assert "shch" in lines[3] and "щ" in lines[3]

    def test_columns_are_aligned(self):
        lines = render_table(columns=2).splitlines()
        body = lines[:-1]

        assert len({len(line) for line in body[:3]}) == 1

    def test_ascii_encoding_forces_ascii_borders(self):
        text = render_table(encoding="ascii")

        assert "┌" not in text
        assert text.startswith("+")

    def test_unknown_style_falls_back_to_single(self):
        assert BoxDrawingHelper.chars("wavy") == BoxDrawingHelper.STYLES["single"]

    def test_empty_mappings(self):
        lines = render_table(mappings=[]).splitlines()

        assert len(lines) == 4
