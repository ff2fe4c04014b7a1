from pytest import fixture

from chartmarks.compiler import compile_marks_to_dicts
from chartmarks.core.model import Model
from chartmarks.core.models.spec import parse_spec


@fixture
def make_model():
    def _make(mark, name=None, config=None, scales=None, **encoding):
        data = {"mark": mark, "encoding": encoding}
        if name:
            data["name"] = name
        if config:
            data["config"] = config
        return Model(parse_spec(data), scales=scales)

    return _make


@fixture
def compile_dicts(make_model):
    def _compile(mark, **kwargs):
        return compile_marks_to_dicts(make_model(mark, **kwargs))

    return _compile


@fixture
def properties_of():
    def _properties(encoder, model):
        return {key: value.to_dict() for key, value in encoder.properties(model).items()}

    return _properties
