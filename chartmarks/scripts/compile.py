"""Compile command for the chartmarks CLI."""

import json
from pathlib import Path as PathlibPath

from click import Path, argument, echo, option, pass_context

from chartmarks.compiler import compile_marks_to_dicts
from chartmarks.config import apply_config_defaults, load_config_file
from chartmarks.core.model import Model
from chartmarks.core.models.spec import parse_spec
from chartmarks.scripts.common import handle_execution_exception


@argument("input", type=Path(exists=True, dir_okay=False))
@option(
    "--config",
    "config_path",
    type=Path(exists=True, dir_okay=False),
    default=None,
    help="TOML file of chart config defaults",
)
@option("--indent", type=int, default=2, help="JSON indentation")
@pass_context
def compile(ctx, input, config_path, indent: int):
    """Compile a JSON chart spec into renderer marks."""
    try:
        with open(input, "r") as f:
            spec_data = json.load(f)
        if config_path:
            spec_data = apply_config_defaults(
                spec_data, load_config_file(PathlibPath(config_path))
            )
        model = Model(parse_spec(spec_data))
        echo(json.dumps(compile_marks_to_dicts(model), indent=indent))
    except Exception as e:
        handle_execution_exception(e, debug=ctx.obj["DEBUG"])
