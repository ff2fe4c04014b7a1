from chartmarks.compiler.encoders import BarEncoder

CATEGORY = {"field": "category", "type": "ordinal"}
SUM_PRICE = {"field": "price", "type": "quantitative", "aggregate": "sum"}
SERIES = {"field": "series", "type": "nominal"}

GROUP_HEIGHT = {"field": {"group": "height"}}


def test_ordinal_x_measure_y(make_model, properties_of):
    model = make_model("bar", x=CATEGORY, y=SUM_PRICE)
    assert properties_of(BarEncoder(), model) == {
        "xc": {"scale": "x", "field": "category"},
        "width": {"value": 21, "offset": -1},
        "y": {"scale": "y", "field": "sum_price"},
        "y2": GROUP_HEIGHT,
        "fill": {"value": "#4682b4"},
    }


def test_measure_x_ordinal_y_is_horizontal(make_model, properties_of):
    model = make_model("bar", x=SUM_PRICE, y=CATEGORY)
    props = properties_of(BarEncoder(), model)
    assert props["x"] == {"scale": "x", "field": "sum_price"}
    assert props["x2"] == {"value": 0}
    assert "width" not in props
    assert props["yc"] == {"scale": "y", "field": "category"}
    assert props["height"] == {"value": 21, "offset": -1}
    assert "y" not in props and "y2" not in props


def test_no_y_draws_from_group_bottom(make_model, properties_of):
    model = make_model("bar", x=CATEGORY)
    props = properties_of(BarEncoder(), model)
    assert props["y2"] == {"field": {"group": "height"}, "offset": -1}
    assert props["height"] == {"value": 21, "offset": -1}
    assert "y" not in props


def test_no_x(make_model, properties_of):
    model = make_model("bar", y=SUM_PRICE)
    props = properties_of(BarEncoder(), model)
    assert props["x"] == {"value": 0, "offset": 1}
    assert props["width"] == {"value": 21, "offset": -1}


def test_size_channel_drives_width_and_height(make_model, properties_of):
    size = {"field": "weight", "type": "quantitative"}
    model = make_model("bar", x=CATEGORY, size=size)
    props = properties_of(BarEncoder(), model)
    assert props["width"] == {"scale": "size", "field": "weight"}
    assert props["height"] == {"scale": "size", "field": "weight"}


def test_binned_x(make_model, properties_of):
    model = make_model(
        "bar",
        x={"field": "age", "type": "quantitative", "bin": True},
        y={"aggregate": "count", "type": "quantitative"},
    )
    props = properties_of(BarEncoder(), model)
    assert props["x"] == {"scale": "x", "field": "bin_age_start", "offset": 1}
    assert props["x2"] == {"scale": "x", "field": "bin_age_end"}
    assert "width" not in props
    assert props["y"] == {"scale": "y", "field": "count"}
    assert props["y2"] == GROUP_HEIGHT


def test_binned_y(make_model, properties_of):
    model = make_model(
        "bar",
        y={"field": "age", "type": "quantitative", "bin": True},
        x={"aggregate": "count", "type": "quantitative"},
    )
    props = properties_of(BarEncoder(), model)
    assert props["y"] == {"scale": "y", "field": "bin_age_start"}
    assert props["y2"] == {"scale": "y", "field": "bin_age_end", "offset": 1}
    assert props["x"] == {"scale": "x", "field": "count"}
    assert props["x2"] == {"value": 0}


def test_continuous_x_gets_thin_bars(make_model, properties_of):
    model = make_model(
        "bar",
        x={"field": "date", "type": "temporal"},
        y=SUM_PRICE,
    )
    props = properties_of(BarEncoder(), model)
    assert props["x"] == {"scale": "x", "field": "date"}
    assert "x2" not in props
    assert props["width"] == {"value": 2}


def test_stacked_on_y(make_model, properties_of):
    model = make_model("bar", x=CATEGORY, y=SUM_PRICE, color=SERIES)
    props = properties_of(BarEncoder(), model)
    assert props["y"] == {"scale": "y", "field": "sum_price_start"}
    assert props["y2"] == {"scale": "y", "field": "sum_price_end"}
    assert props["xc"] == {"scale": "x", "field": "category"}
    assert props["fill"] == {"scale": "color", "field": "series"}


def test_stacked_on_x(make_model, properties_of):
    model = make_model("bar", x=SUM_PRICE, y=CATEGORY, color=SERIES)
    props = properties_of(BarEncoder(), model)
    assert props["x"] == {"scale": "x", "field": "sum_price_start"}
    assert props["x2"] == {"scale": "x", "field": "sum_price_end"}
    assert "width" not in props


def test_unfilled_bars_use_stroke(make_model, properties_of):
    model = make_model(
        "bar",
        x=CATEGORY,
        y=SUM_PRICE,
        config={"marks": {"filled": False, "strokeWidth": 3, "opacity": 0.5}},
    )
    props = properties_of(BarEncoder(), model)
    assert "fill" not in props
    assert props["stroke"] == {"value": "#4682b4"}
    assert props["strokeWidth"] == {"value": 3}
    assert props["opacity"] == {"value": 0.5}


def test_bar_has_no_labels(make_model):
    model = make_model("bar", x=CATEGORY, y=SUM_PRICE, label={"field": "price"})
    assert BarEncoder().labels(model) is None
