from valg.parties import colors, names
from valg.parties import PARTY_COLORS, PARTY_NAMES, build_legend, legend_entry


def test_legend_covers_all_codes_in_table_order():
    legend = build_legend()
    codes = [entry["code"] for entry in legend]
    assert codes[:len(PARTY_COLORS)] == list(PARTY_COLORS)
    assert set(codes) == set(PARTY_COLORS) | set(PARTY_NAMES)
    assert len(codes) == len(set(codes))


def test_legend_entry_fields():
    entry = legend_entry("R")
    assert entry == {
        "code": "R",
        "name": "Rødt",
        "color": "0.3657 0.1414 27.45",
        "css_color": "oklch(0.3657 0.1414 27.45)",
        "has_color": True,
    }


def test_legend_entry_for_unknown_code():
    entry = legend_entry("XYZ")
    assert entry["name"] is None
    assert entry["color"] == "oklch(0.8452 0 0)"
    assert entry["css_color"] == "oklch(0.8452 0 0)"
    assert entry["has_color"] is False


def test_name_only_code_is_listed_last(monkeypatch):
    """Codes without a color follow the color table with the fallback color."""
    monkeypatch.setitem(names._NAMES, "Zz", "Name Only")
    legend = build_legend()
    last = legend[-1]
    assert last["code"] == "Zz"
    assert last["name"] == "Name Only"
    assert last["has_color"] is False
    assert last["color"] == "oklch(0.8452 0 0)"
    assert [entry["code"] for entry in legend[:-1]] == list(PARTY_COLORS)


def test_color_only_code_keeps_table_order(monkeypatch):
    monkeypatch.setitem(colors._COLORS, "Yy", "0.5 0.1 100")
    legend = build_legend()
    codes = [entry["code"] for entry in legend]
    assert codes == list(PARTY_COLORS)
    assert codes[-1] == "Yy"
    entry = legend[-1]
    assert entry["name"] is None
    assert entry["color"] == "0.5 0.1 100"
    assert entry["has_color"] is True
