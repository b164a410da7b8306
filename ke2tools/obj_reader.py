"""Reader for Wavefront .obj meshes producing packed vertex data."""

from __future__ import annotations

import logging
import math
import os
import time
from typing import Union

from ke2tools.vector import Vector

_log = logging.getLogger(__name__)

#: Floats per output vertex: position, smoothed normal, face normal, texture coords.
VERTEX_STRIDE = 11

_TRIANGLE_ORDERS = {
    3: (0, 1, 2),
    4: (0, 1, 2, 2, 3, 0),
}


def _parse(path: Union[str, os.PathLike]) -> tuple[list[Vector], list[list[int]]]:
    vertices: list[Vector] = []
    faces: list[list[int]] = []
    with open(path, encoding="utf-8") as file:
        for line_no, line in enumerate(file, 1):
            line = line.rstrip("\r\n")
            name, _, rest = line.partition(" ")
            tokens = rest.split()
            if name == "v":
                if len(tokens) < 3:
                    raise ValueError(f"line {line_no}: vertex needs three coordinates")
                vertices.append(Vector(*(float(t) for t in tokens[:3])))
            elif name == "f":
                faces.append([int(t.split("/", 1)[0]) - 1 for t in tokens])
    return vertices, faces


def read_obj(path: Union[str, os.PathLike]) -> list[float]:
    """Read an .obj file and return triangulated, packed vertex data.

    Each output vertex is eleven floats: position, smoothed normal, face
    normal and two texture coordinates (always zero). Faces must have three
    or four vertices; quads are split into two triangles. The smoothed normal
    of a vertex is the normalised midpoint of the per-component range of the
    face normals around it.
    """
    _log.info("Starting processing .obj file %r", os.fspath(path))
    started = time.monotonic()

    vertices, faces = _parse(path)

    mins: dict[int, list[float]] = {}
    maxs: dict[int, list[float]] = {}
    triangles: list[tuple[int, Vector]] = []

    for face in faces:
        order = _TRIANGLE_ORDERS.get(len(face))
        if order is None:
            raise ValueError(f"face has {len(face)} vertices; only 3 or 4 are supported")
        for index in face:
            if not 0 <= index < len(vertices):
                raise ValueError(f"face refers to missing vertex {index + 1}")
        v0, v1, v2 = (vertices[face[i]] for i in order[:3])
        unit_normal = (v1 - v0).cross(v2 - v0).normalize()

        for i in order:
            vi = face[i]
            triangles.append((vi, unit_normal))
            if vi not in maxs:
                maxs[vi] = list(unit_normal)
                mins[vi] = list(unit_normal)
            else:
                lo, hi = mins[vi], maxs[vi]
                for k, value in enumerate(unit_normal):
                    if value > hi[k]:
                        hi[k] = value
                    elif value < lo[k]:
                        lo[k] = value

    smoothed: dict[int, Vector] = {}
    for vi in maxs:
        mid = Vector([(a + b) / 2 for a, b in zip(mins[vi], maxs[vi])])
        smoothed[vi] = mid / mid.length() if mid.length() else Vector(math.nan, math.nan, math.nan)

    data: list[float] = []
    for vi, face_normal in triangles:
        data.extend(vertices[vi])
        data.extend(smoothed[vi])
        data.extend(face_normal)
        data.extend((0.0, 0.0))

    _log.info("Finished processing .obj in %s seconds", time.monotonic() - started)
    return data