from chartmarks.core.models.marks import (
    FacetTransform,
    FieldBinding,
    From,
    GroupBinding,
    GroupReference,
    ImputeTransform,
    MarkNode,
    Properties,
    PropertyBinding,
    PropertyMap,
    ScaleFieldBinding,
    ScaleValueBinding,
    SortTransform,
    StackOutput,
    StackTransform,
    TemplateBinding,
    Transform,
    ValueBinding,
)
from chartmarks.core.models.spec import (
    ChartConfig,
    Encoding,
    FieldDef,
    MarksConfig,
    ScaleDef,
    Spec,
    StackConfig,
    parse_spec,
)

__all__ = [
    "ChartConfig",
    "Encoding",
    "FacetTransform",
    "FieldBinding",
    "FieldDef",
    "From",
    "GroupBinding",
    "GroupReference",
    "ImputeTransform",
    "MarkNode",
    "MarksConfig",
    "Properties",
    "PropertyBinding",
    "PropertyMap",
    "ScaleDef",
    "ScaleFieldBinding",
    "ScaleValueBinding",
    "SortTransform",
    "Spec",
    "StackConfig",
    "StackOutput",
    "StackTransform",
    "TemplateBinding",
    "Transform",
    "ValueBinding",
    "parse_spec",
]
