"""Ready-made vertex, element and attribute layouts for a unit cube and plane."""

from __future__ import annotations

from dataclasses import dataclass

_Point = tuple[float, float, float]


@dataclass(frozen=True)
class MeshFilter:
    """One vertex attribute inside an interleaved float buffer.

    ``count_point`` floats starting at ``offset`` within each vertex of
    ``step`` floats make up attribute ``index``.
    """

    index: int
    count_point: int
    step: int
    offset: int


# Each face: four corners (counter-clockwise from the lower left) and a normal.
_CUBE_FACES: tuple[tuple[tuple[_Point, _Point, _Point, _Point], _Point], ...] = (
    # forward (z+)
    (((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5)),
     (0.0, 0.0, 1.0)),
    # right (x+)
    (((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5)),
     (1.0, 0.0, 0.0)),
    # back (z-)
    (((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5)),
     (0.0, 0.0, -1.0)),
    # left (x-)
    (((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5)),
     (-1.0, 0.0, 0.0)),
    # up (y+)
    (((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5)),
     (0.0, 1.0, 0.0)),
    # down (y-)
    (((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (-0.5, -0.5, -0.5)),
     (0.0, -1.0, 0.0)),
)

_PLANE_FACE: tuple[tuple[_Point, _Point, _Point, _Point], _Point] = (
    ((-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.5, 0.5, 0.0), (-0.5, 0.5, 0.0)),
    (0.0, 0.0, -1.0),
)

_CUBE_ELEMENTS: tuple[int, ...] = (
    0, 1, 2, 3, 0, 2,
    4, 5, 6, 7, 4, 6,
    8, 9, 10, 11, 10, 8,
    12, 13, 14, 15, 12, 14,
    16, 17, 18, 19, 18, 16,
    20, 21, 22, 23, 22, 20,
)

_PLANE_ELEMENTS: tuple[int, ...] = (0, 1, 2, 3, 0, 2)


def _uv_corners(size_uv: float) -> tuple[tuple[float, float], ...]:
    return ((0.0, 0.0), (size_uv, 0.0), (size_uv, size_uv), (0.0, size_uv))


def _faces_uv(faces, size_uv: float) -> list[float]:
    vertices: list[float] = []
    for corners, normal in faces:
        for position, uv in zip(corners, _uv_corners(size_uv)):
            vertices.extend((*position, *normal, *uv))
    return vertices


def _faces_color(faces, r: float, g: float, b: float) -> list[float]:
    vertices: list[float] = []
    for corners, normal in faces:
        for position in corners:
            vertices.extend((*position, *normal, r, g, b))
    return vertices


def _filters_uv() -> list[MeshFilter]:
    return [MeshFilter(0, 3, 8, 0), MeshFilter(1, 3, 8, 3), MeshFilter(2, 2, 8, 6)]


def _filters_color() -> list[MeshFilter]:
    return [MeshFilter(0, 3, 9, 0), MeshFilter(1, 3, 9, 3), MeshFilter(2, 3, 9, 6)]


def cube_vertex_uv(size_uv: float = 1.0) -> list[float]:
    """Cube vertices laid out as position(3), normal(3), uv(2)."""
    return _faces_uv(_CUBE_FACES, size_uv)


def cube_vertex_color(r: float, g: float, b: float) -> list[float]:
    """Cube vertices laid out as position(3), normal(3), color(3)."""
    return _faces_color(_CUBE_FACES, r, g, b)


def cube_elements() -> list[int]:
    """Triangle indices for the cube's 24 vertices."""
    return list(_CUBE_ELEMENTS)


def cube_filters_uv() -> list[MeshFilter]:
    return _filters_uv()


def cube_filters_color() -> list[MeshFilter]:
    return _filters_color()


def plane_vertex_uv(size_uv: float = 1.0) -> list[float]:
    """Plane vertices laid out as position(3), normal(3), uv(2)."""
    return _faces_uv((_PLANE_FACE,), size_uv)


def plane_vertex_color(r: float, g: float, b: float) -> list[float]:
    """Plane vertices laid out as position(3), normal(3), color(3)."""
    return _faces_color((_PLANE_FACE,), r, g, b)


def plane_elements() -> list[int]:
    """Triangle indices for the plane's 4 vertices."""
    return list(_PLANE_ELEMENTS)


def plane_filters_uv() -> list[MeshFilter]:
    return _filters_uv()


def plane_filters_color() -> list[MeshFilter]:
    return _filters_color()