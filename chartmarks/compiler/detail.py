from chartmarks.core.model import DETAIL_CHANNELS, Model


def detail_fields(model: Model) -> list[str]:
    """Fields of color/detail/shape channels that split path marks into
    one series per value. Aggregated channels do not split."""
    return [
        model.field(channel)
        for channel in DETAIL_CHANNELS
        if model.has(channel) and not model.field_def(channel).aggregate
    ]
