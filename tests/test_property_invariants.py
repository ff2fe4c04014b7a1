import pytest

from chartmarks.compiler import compile_marks_to_dicts
from chartmarks.core.model import Model
from chartmarks.core.models.spec import parse_spec

CATEGORY = {"field": "category", "type": "ordinal"}
SUM_PRICE = {"field": "price", "type": "quantitative", "aggregate": "sum"}
SERIES = {"field": "series", "type": "nominal"}
PRICE = {"field": "price", "type": "quantitative"}
BINNED = {"field": "age", "type": "quantitative", "bin": True}

ENCODINGS = [
    {},
    {"x": CATEGORY, "y": SUM_PRICE},
    {"x": SUM_PRICE, "y": CATEGORY, "color": SERIES},
    {"x": CATEGORY, "y": SUM_PRICE, "color": SERIES},
    {"x": BINNED, "y": {"aggregate": "count", "type": "quantitative"}},
    {"x": PRICE, "y": PRICE, "size": PRICE, "shape": SERIES, "text": PRICE},
    {"y": CATEGORY, "text": SERIES, "color": SERIES, "row": SERIES},
]

MARKS = ["bar", "tick", "point", "line", "area", "text", "circle", "square"]

# the mutually exclusive value sources a binding may use
SOURCES = [
    {"scale", "field"},
    {"scale", "value"},
    {"value"},
    {"field"},
    {"template"},
]


def walk(marks):
    for mark in marks:
        yield mark
        yield from walk(mark.get("marks", []))


def source_keys(binding):
    return set(binding) - {"offset"}


@pytest.mark.parametrize("mark", MARKS)
@pytest.mark.parametrize("encoding", ENCODINGS)
def test_each_property_has_one_value_source(mark, encoding):
    model = Model(parse_spec({"mark": mark, "encoding": encoding}))
    for node in walk(compile_marks_to_dicts(model)):
        for key, binding in node["properties"]["update"].items():
            assert source_keys(binding) in SOURCES, (mark, key, binding)
            if isinstance(binding.get("field"), dict):
                assert set(binding["field"]) == {"group"}


@pytest.mark.parametrize("mark", ["bar", "area"])
@pytest.mark.parametrize("channel,other", [("x", "y"), ("y", "x")])
def test_stacked_channel_uses_start_end(mark, channel, other):
    encoding = {channel: SUM_PRICE, other: CATEGORY, "color": SERIES}
    orient = "horizontal" if channel == "x" else "vertical"
    model = Model(
        parse_spec(
            {
                "mark": mark,
                "encoding": encoding,
                "config": {"marks": {"orient": orient}},
            }
        )
    )
    nodes = list(walk(compile_marks_to_dicts(model)))
    update = nodes[-1]["properties"]["update"]
    assert update[channel] == {"scale": channel, "field": "sum_price_start"}
    assert update[channel + "2"] == {"scale": channel, "field": "sum_price_end"}
    for key, binding in update.items():
        if binding.get("scale") == channel:
            assert binding["field"].endswith(("_start", "_end"))


@pytest.mark.parametrize("mark", ["point", "text", "circle", "square"])
@pytest.mark.parametrize("band_width", [21, 40, 15])
def test_unbound_position_is_half_band(mark, band_width):
    scale = {"scale": {"bandWidth": band_width}}
    model = Model(parse_spec({"mark": mark, "encoding": {"x": scale, "y": scale}}))
    update = compile_marks_to_dicts(model)[-1]["properties"]["update"]
    assert update["x"] == {"value": band_width / 2}
    assert update["y"] == {"value": band_width / 2}


@pytest.mark.parametrize("band_width", [21, 30])
def test_unbound_tick_extent_follows_band(band_width):
    scale = {"scale": {"bandWidth": band_width}}
    model = Model(parse_spec({"mark": "tick", "encoding": {"x": scale, "y": scale}}))
    update = compile_marks_to_dicts(model)[0]["properties"]["update"]
    assert update["width"] == {"value": band_width / 1.5}
    assert update["height"] == {"value": band_width / 1.5}
