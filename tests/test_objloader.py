import logging

import pytest

from meshview import objloader

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


def test_single_face_is_wound_in_reverse():
    mesh = objloader.parse(TRIANGLE)
    assert mesh.vertices.tolist() == [0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0]


def test_quad_face_becomes_two_triangles():
    content = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"
    mesh = objloader.parse(content)
    pts = mesh.vertices.reshape(-1, 3).tolist()
    assert pts == [
        [1.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0], [1.0, 1.0, 0.0], [0.0, 0.0, 0.0],
    ]


def test_comments_blank_lines_and_other_records_are_ignored():
    content = "# header\n\nvn 0 0 1\nvt 0 0\n" + TRIANGLE + "s off\n"
    assert objloader.parse(content).vertices.tolist() == objloader.parse(TRIANGLE).vertices.tolist()


def test_slash_separated_face_entries_use_position_index():
    content = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1/4/7 2/5/8 3//9\n"
    assert objloader.parse(content).vertices.tolist() == objloader.parse(TRIANGLE).vertices.tolist()


def test_out_of_range_index_yields_origin_and_logs(caplog):
    content = "v 1 2 3\nv 4 5 6\nf 1 2 9\n"
    with caplog.at_level(logging.ERROR, logger="meshview.objloader"):
        mesh = objloader.parse(content)
    pts = mesh.vertices.reshape(-1, 3).tolist()
    assert pts[0] == [0.0, 0.0, 0.0]
    assert pts[1:] == [[4.0, 5.0, 6.0], [1.0, 2.0, 3.0]]
    assert "Invalid vertex index" in caplog.text


def test_faces_with_fewer_than_three_indices_produce_nothing():
    mesh = objloader.parse("v 0 0 0\nv 1 1 1\nf 1 2\n")
    assert mesh.vertex_count == 0


def test_non_numeric_index_raises():
    with pytest.raises(ValueError):
        objloader.parse("v 0 0 0\nf a b c\n")


def test_load_reads_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE)
    assert objloader.load(path).vertices.tolist() == objloader.parse(TRIANGLE).vertices.tolist()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        objloader.load(tmp_path / "missing.obj")