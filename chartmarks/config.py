from pathlib import Path
from typing import Any

from pydantic import ValidationError
from tomllib import TOMLDecodeError, loads

from chartmarks.core.exceptions import ConfigurationException
from chartmarks.core.models.spec import ChartConfig
from chartmarks.utility import deep_merge


def load_config_file(path: Path) -> dict[str, Any]:
    """Read chart config defaults from a TOML file.

    Top level keys (``sort_line_by``, ``number_format``) and the ``[marks]``
    and ``[stack]`` tables map directly onto the chart config. Keys may be
    written snake_case or camelCase; the result uses the camelCase spelling
    a spec's own config uses, holding only the keys the file sets.
    """
    try:
        with open(path, "r") as f:
            toml_content = f.read()
        config_data = loads(toml_content)
    except (OSError, TOMLDecodeError) as e:
        raise ConfigurationException(f"Unable to read config file {path}: {e}") from e
    try:
        config = ChartConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationException(f"Invalid config file {path}:\n{e}") from e
    return config.model_dump(by_alias=True, exclude_unset=True, mode="json")


def apply_config_defaults(
    spec_data: dict[str, Any], defaults: dict[str, Any]
) -> dict[str, Any]:
    """Layer a spec's own config over file defaults; the spec wins."""
    merged = dict(spec_data)
    merged["config"] = deep_merge(defaults, spec_data.get("config") or {})
    return merged
