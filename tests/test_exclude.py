import json

import pytest

from matchjson.exclude import Exclude


@pytest.fixture
def data():
    return {"c": [1, 2], "b": "hidden", "a": 1, "d": {"x": None}}


def visible(data, hidden):
    return {k: v for k, v in data.items() if k not in hidden}


def test_iteration_skips_excluded_keys_in_sorted_order(data):
    view = Exclude(data, ["b"])
    assert list(view) == sorted(visible(data, {"b"}))


def test_items_pairs(data):
    view = Exclude(data, ["b", "d"])
    assert dict(view.items()) == visible(data, {"b", "d"})


def test_len_counts_only_visible_keys(data):
    view = Exclude(data, ["a", "b"])
    assert len(view) == len(data) - 2
    assert len(view) == len(list(view))


def test_contains(data):
    view = Exclude(data, ["b"])
    assert "a" in view
    assert "b" not in view
    assert "missing" not in view


def test_get_hides_excluded(data):
    view = Exclude(data, ["b"])
    assert view.get("a") == data["a"]
    assert view.get("b") is None
    assert view.get("b", "fallback") == "fallback"
    assert view.get("missing", 0) == 0


def test_getitem_excluded_raises(data):
    view = Exclude(data, ["b"])
    assert view["c"] is data["c"]
    with pytest.raises(KeyError):
        view["b"]


def test_get_key_value(data):
    view = Exclude(data, ["b"])
    assert view.get_key_value("a") == ("a", data["a"])
    assert view.get_key_value("b") is None
    assert view.get_key_value("missing") is None


def test_is_empty(data):
    assert Exclude(data, data.keys()).is_empty()
    assert not Exclude(data, ["a"]).is_empty()


def test_missing_excluded_key_is_an_error(data):
    with pytest.raises(ValueError):
        Exclude(data, ["nope"])


def test_to_json_round_trip(data):
    view = Exclude(data, ["b"])
    assert json.loads(view.to_json()) == visible(data, {"b"})
    pretty = view.to_json(pretty=True)
    assert "\n" in pretty
    assert json.loads(pretty) == visible(data, {"b"})


def test_str_is_compact_json():
    view = Exclude({"a": 1, "b": "2", "d": 4}, ["a", "b"])
    assert str(view) == '{"d":4}'


def test_equals_plain_mapping(data):
    assert Exclude(data, ["b"]) == visible(data, {"b"})


def test_view_follows_underlying_object(data):
    view = Exclude(data, ["b"])
    data["e"] = 5
    assert view["e"] == data["e"]
    assert len(view) == len(data) - 1


def test_repr_names_the_view(data):
    text = repr(Exclude(data, ["b"]))
    assert text.startswith("Exclude(")
    assert "excluded=['b']" in text