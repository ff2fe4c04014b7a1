from chartmarks.compiler.encoders import FilledPointEncoder, PointEncoder

PRICE = {"field": "price", "type": "quantitative"}
WEIGHT = {"field": "weight", "type": "quantitative"}


def test_point_defaults(make_model, properties_of):
    model = make_model("point")
    assert properties_of(PointEncoder(), model) == {
        "x": {"value": 10.5},
        "y": {"value": 10.5},
        "size": {"value": 30},
        "shape": {"value": "circle"},
        "stroke": {"value": "#4682b4"},
        "strokeWidth": {"value": 2},
    }


def test_point_bound_channels(make_model, properties_of):
    model = make_model(
        "point",
        x={"field": "age", "type": "quantitative", "bin": True},
        y=PRICE,
        size=WEIGHT,
        shape={"field": "kind", "type": "nominal"},
        color={"field": "kind", "type": "nominal"},
    )
    props = properties_of(PointEncoder(), model)
    assert props["x"] == {"scale": "x", "field": "bin_age_mid"}
    assert props["y"] == {"scale": "y", "field": "price"}
    assert props["size"] == {"scale": "size", "field": "weight"}
    assert props["shape"] == {"scale": "shape", "field": "kind"}
    assert props["stroke"] == {"scale": "color", "field": "kind"}


def test_point_filled_config(make_model, properties_of):
    model = make_model("point", config={"marks": {"filled": True}})
    props = properties_of(PointEncoder(), model)
    assert props["fill"] == {"value": "#4682b4"}
    assert "stroke" not in props and "strokeWidth" not in props


def test_unbound_position_centers_in_band(make_model, properties_of):
    model = make_model("point", x={"scale": {"bandWidth": 40}}, y=PRICE)
    props = properties_of(PointEncoder(), model)
    assert props["x"] == {"value": 20}


def test_circle_ignores_shape_channel(make_model, properties_of):
    model = make_model(
        "circle", x=PRICE, shape={"field": "kind", "type": "nominal"}
    )
    props = properties_of(FilledPointEncoder("circle"), model)
    assert props["shape"] == {"value": "circle"}
    assert props["fill"] == {"value": "#4682b4"}
    assert "stroke" not in props


def test_square_fill_from_color(make_model, properties_of):
    model = make_model(
        "square",
        color={"field": "kind", "type": "nominal"},
        config={"marks": {"filled": False, "opacity": 0.3}},
    )
    props = properties_of(FilledPointEncoder("square"), model)
    assert props["shape"] == {"value": "square"}
    assert props["fill"] == {"scale": "color", "field": "kind"}
    assert props["opacity"] == {"value": 0.3}
    assert "stroke" not in props


def test_zero_opacity_is_not_emitted(make_model, properties_of):
    model = make_model("point", x=PRICE, config={"marks": {"opacity": 0}})
    assert "opacity" not in properties_of(PointEncoder(), model)
