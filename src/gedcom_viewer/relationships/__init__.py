from .labels import Kinship, classify_distance, render_label
from .resolver import (
    classify_relationship,
    get_path_peak,
    get_relationship_label,
    nearest_common_ancestor,
)

__all__ = [
    "Kinship",
    "classify_distance",
    "classify_relationship",
    "get_path_peak",
    "get_relationship_label",
    "nearest_common_ancestor",
    "render_label",
]
