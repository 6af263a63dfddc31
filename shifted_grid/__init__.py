"""Spiral addressing and pointer-reactive style fields for a row-shifted hexagonal grid."""

from .coords import (
    GRID_ORIGIN,
    NOT_COLINEAR,
    NOT_INTERSECTING,
    ORIGIN,
    AxialCoordinate,
    GridDirection,
    GridQuadrant,
    NotColinear,
    NotIntersecting,
    Point2D,
    RingCorner,
    Scale2D,
    Size2D,
    SlopeInterceptLine,
)
from .effects import (
    IDENTITY,
    EdgeFadeEffect,
    EffectStack,
    ItemStyleEffect,
    MagnificationEffect,
    Transform,
    create_edge_fade_effect,
    create_magnification_effect,
)
from .errors import (
    InternalConsistencyError,
    InvalidArgumentError,
    InvalidIndexError,
    ShiftedGridError,
)
from .indexer import GridIndexer, coord_to_index, index_to_coord
from .lines import cartesian_distance, get_line_intersection
from .projection import (
    ShiftedGridConfig,
    cart_to_grid,
    grid_coord_to_screen_point,
    grid_to_cart,
    screen_point_to_grid_coord,
    shifted_grid_config,
)
from .quadrants import GridRay, classify_quadrant, ray_contains
from .traversal import (
    are_coords_colinear,
    distance_between,
    hex_distance,
    traverse,
    unreliable_distance_between,
)
from .windowing import BoundingRect, VisibleCoordinates, visible_coordinates, visible_indices

__version__ = "0.1.0"

__all__ = [
    "GRID_ORIGIN",
    "IDENTITY",
    "NOT_COLINEAR",
    "NOT_INTERSECTING",
    "ORIGIN",
    "AxialCoordinate",
    "BoundingRect",
    "EdgeFadeEffect",
    "EffectStack",
    "GridDirection",
    "GridIndexer",
    "GridQuadrant",
    "GridRay",
    "InternalConsistencyError",
    "InvalidArgumentError",
    "InvalidIndexError",
    "ItemStyleEffect",
    "MagnificationEffect",
    "NotColinear",
    "NotIntersecting",
    "Point2D",
    "RingCorner",
    "Scale2D",
    "ShiftedGridConfig",
    "ShiftedGridError",
    "Size2D",
    "SlopeInterceptLine",
    "Transform",
    "VisibleCoordinates",
    "are_coords_colinear",
    "cart_to_grid",
    "cartesian_distance",
    "classify_quadrant",
    "coord_to_index",
    "create_edge_fade_effect",
    "create_magnification_effect",
    "distance_between",
    "get_line_intersection",
    "grid_coord_to_screen_point",
    "grid_to_cart",
    "hex_distance",
    "index_to_coord",
    "ray_contains",
    "screen_point_to_grid_coord",
    "shifted_grid_config",
    "traverse",
    "unreliable_distance_between",
    "visible_coordinates",
    "visible_indices",
]
