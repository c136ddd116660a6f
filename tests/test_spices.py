import logging
from pantry_chef.spices import DEFAULT_SPICES, SpiceCatalog


def test_defaults_when_no_file(tmp_path):
    spices = SpiceCatalog(base_dir=tmp_path).list()
    assert len(spices) == 43
    assert spices[0].name == "Salt"


def test_default_categories_in_order(tmp_path):
    categories = list(SpiceCatalog(base_dir=tmp_path).by_category())
    assert categories == ["Basics", "Herbs", "Warm Spices", "Blends", "Oils", "Sauces", "Vinegars"]


def test_add_spice_persists(tmp_path):
    SpiceCatalog(base_dir=tmp_path).add("Za'atar", "Blends")
    spices = SpiceCatalog(base_dir=tmp_path).list()
    added = next(s for s in spices if s.name == "Za'atar")
    assert added.category == "Blends"
    assert added.is_common is False


def test_add_is_case_insensitive_idempotent(tmp_path):
    catalog = SpiceCatalog(base_dir=tmp_path)
    catalog.add("salt")
    assert len(catalog.list()) == len(DEFAULT_SPICES)


def test_remove_spice(tmp_path):
    catalog = SpiceCatalog(base_dir=tmp_path)
    catalog.remove("Cayenne")
    names = [s.name for s in catalog.list()]
    assert "Cayenne" not in names
    assert "Paprika" in names


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    (tmp_path / "spices.json").write_text("not json{")
    with caplog.at_level(logging.WARNING, logger="pantry_chef.spices"):
        spices = SpiceCatalog(base_dir=tmp_path).list()
    assert len(spices) == len(DEFAULT_SPICES)
    assert any("spices.json" in msg for msg in caplog.messages)


def test_empty_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "spices.json").write_text("[]")
    assert len(SpiceCatalog(base_dir=tmp_path).list()) == len(DEFAULT_SPICES)
