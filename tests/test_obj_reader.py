import math

import pytest

from ke2tools.obj_reader import VERTEX_STRIDE, read_obj

TRIANGLE = """# a triangle
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""

QUAD = """v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

TENT = """v 0 0 0
v 1 0 0
v 0 1 1
v 0 -1 1
f 1/1/1 2/1/1 3/1/1
f 2/1/1 1/1/1 4/1/1
"""


def _write(tmp_path, text, name="mesh.obj"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _vertices(data):
    return [data[i:i + VERTEX_STRIDE] for i in range(0, len(data), VERTEX_STRIDE)]


def test_triangle_layout(tmp_path):
    data = read_obj(_write(tmp_path, TRIANGLE))
    verts = _vertices(data)
    assert len(verts) == 3
    assert [v[:3] for v in verts] == [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
    assert all(v[9:] == [0.0, 0.0] for v in verts)


def test_flat_face_smoothed_equals_face_normal(tmp_path):
    for v in _vertices(read_obj(_write(tmp_path, TRIANGLE))):
        assert v[3:6] == pytest.approx(v[6:9])
        assert v[6:9] == pytest.approx([0.0, 0.0, 1.0])


def test_quad_is_split_into_two_triangles(tmp_path):
    verts = _vertices(read_obj(_write(tmp_path, QUAD)))
    assert len(verts) == 6
    positions = [tuple(v[:3]) for v in verts]
    assert positions[2] == positions[3]
    assert positions[5] == positions[0]


def test_normals_have_unit_length(tmp_path):
    for v in _vertices(read_obj(_write(tmp_path, TENT))):
        assert math.hypot(*v[3:6]) == pytest.approx(1.0)
        assert math.hypot(*v[6:9]) == pytest.approx(1.0)


def test_shared_vertices_get_same_smoothed_normal(tmp_path):
    verts = _vertices(read_obj(_write(tmp_path, TENT)))
    by_position = {}
    for v in verts:
        by_position.setdefault(tuple(v[:3]), []).append(tuple(v[3:6]))
    for normals in by_position.values():
        assert all(n == normals[0] for n in normals)


def test_faces_without_slashes(tmp_path):
    text = TRIANGLE.replace("f 1/1/1 2/1/1 3/1/1", "f 1 2 3")
    assert read_obj(_write(tmp_path, text)) == read_obj(_write(tmp_path, TRIANGLE, "b.obj"))


def test_too_many_face_vertices(tmp_path):
    text = QUAD + "v 2 2 0\nf 1/1/1 2/1/1 3/1/1 4/1/1 5/1/1\n"
    with pytest.raises(ValueError):
        read_obj(_write(tmp_path, text))


def test_missing_vertex_index(tmp_path):
    with pytest.raises(ValueError):
        read_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nf 1/1/1 2/1/1 9/1/1\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_obj(tmp_path / "absent.obj")