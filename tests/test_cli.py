import io
import json

import ezdxf
import pytest

from polyshift.__main__ import main


def flat(pts):
    return [c for p in pts for c in p]


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.json"
    path.write_text(json.dumps([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]))
    return path


def test_offset_json(square_file, capsys):
    assert main([str(square_file), "-d", "2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert flat(out) == pytest.approx([2, 2, 8, 2, 8, 8, 2, 8, 2, 2])


def test_per_segment_distances(square_file, capsys):
    argv = [str(square_file), "-d", "4", "-d", "2", "-d", "2", "-d", "2"]
    assert main(argv) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0] == pytest.approx([2, 4])


def test_stdin_loop(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[[0, 0], [10, 0], [10, 10], [0, 10]]"))
    assert main(["-", "--distance", "2", "--loop"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert flat(out) == pytest.approx([2, 2, 8, 2, 8, 8, 2, 8])


def test_dxf_output(square_file, tmp_path, capsys):
    dxf_path = tmp_path / "out.dxf"
    assert main([str(square_file), "-d", "1", "--dxf", str(dxf_path)]) == 0
    assert "Exported to:" in capsys.readouterr().out
    doc = ezdxf.readfile(dxf_path)
    assert len(list(doc.modelspace().query("LWPOLYLINE"))) == 2


def test_errors(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json"), "-d", "1"]) == 1
    assert "File not found" in capsys.readouterr().err

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert main([str(bad), "-d", "1"]) == 1

    line = tmp_path / "colinear.json"
    line.write_text(json.dumps([[0, 0], [5, 0], [10, 0], [0, 0]]))
    assert main([str(line), "-d", "1"]) == 1
    assert "colinear" in capsys.readouterr().err
