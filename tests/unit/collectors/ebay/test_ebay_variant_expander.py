import pytest

from ebay_importer.collectors.ebay.ebay_data_models import EbayProductBody
from ebay_importer.collectors.ebay.ebay_variant_expander import build_options, expand_variants

pytestmark = pytest.mark.unit


def parse_options(raw_options):
    """Decode a raw options list the same way the response validator does."""
    return EbayProductBody.model_validate({"options": raw_options}).options


def test_expand_variants_cartesian_product_excludes_out_of_stock():
    raw = [
        {"Color": {"values": ["Black", "Pink", "Out of Stock"], "selectedValue": ""}},
        {"Size": {"values": ["S", "M"], "selectedValue": ""}},
    ]

    options, variants = expand_variants(parse_options(raw))

    assert [o.name for o in options] == ["Color", "Size"]
    assert options[0].values == ["Black", "Pink"]
    assert len(variants) == 4
    assert all(v.options["Color"] != "Out of Stock" for v in variants)
    assert [v.options for v in variants] == [
        {"Color": "Black", "Size": "S"},
        {"Color": "Black", "Size": "M"},
        {"Color": "Pink", "Size": "S"},
        {"Color": "Pink", "Size": "M"},
    ]
    assert all(v.item_id == "" and v.available for v in variants)
    assert all(v.price is None for v in variants)


def test_expand_variants_empty_options():
    assert expand_variants([]) == ([], [])


def test_expand_variants_drops_options_with_only_out_of_stock_values():
    raw = [
        {"Color": {"values": ["Red - out of stock", "OUT OF STOCK"]}},
        {"Size": {"values": ["  L  ", "XL"]}},
    ]

    options, variants = expand_variants(parse_options(raw))

    assert [o.name for o in options] == ["Size"]
    assert options[0].values == ["L", "XL"]
    assert [v.options for v in variants] == [{"Size": "L"}, {"Size": "XL"}]


def test_expand_variants_all_options_filtered_is_single_sku():
    raw = [{"Color": {"values": ["Out of stock"]}}, {"Size": {"values": []}}]

    assert expand_variants(parse_options(raw)) == ([], [])


def test_build_options_removes_empty_and_duplicate_values():
    raw = [{"Style": {"values": ["Classic", "", "  ", "Classic ", "Modern", 7, None]}}]

    options = build_options(parse_options(raw))

    assert len(options) == 1
    assert options[0].values == ["Classic", "Modern"]


def test_build_options_keeps_first_occurrence_of_repeated_name():
    raw = [
        {"Color": {"values": ["Black"]}},
        {"Color": {"values": ["White", "Grey"]}},
    ]

    options, variants = expand_variants(parse_options(raw))

    assert len(options) == 1
    assert options[0].values == ["Black"]
    assert len(variants) == 1


def test_malformed_option_entries_are_ignored():
    raw = [
        None,
        "Color",
        {"Color": None},
        {"Size": {"selectedValue": "M"}},
        {"Material": {"values": ["Cotton", "Linen"]}},
    ]

    options, variants = expand_variants(parse_options(raw))

    assert [o.name for o in options] == ["Material"]
    assert len(variants) == 2


def test_variant_option_keys_match_option_names():
    raw = [
        {"Color": {"values": ["Black", "Pink", "Blue"]}},
        {"Size": {"values": ["S", "M", "Out of stock"]}},
        {"Pack": {"values": ["1", "2"]}},
    ]

    options, variants = expand_variants(parse_options(raw))
    names = {o.name for o in options}

    assert len(variants) == 3 * 2 * 2
    for variant in variants:
        assert set(variant.options) == names
        for name, value in variant.options.items():
            option = next(o for o in options if o.name == name)
            assert value in option.values


def test_expand_variants_is_deterministic():
    raw = [
        {"Color": {"values": ["Black", "Pink"]}},
        {"Size": {"values": ["S", "M", "L"]}},
    ]

    first = expand_variants(parse_options(raw))
    second = expand_variants(parse_options(raw))

    assert first == second
