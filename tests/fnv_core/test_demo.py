"""
tests/fnv_core/test_demo.py
Tests del punto de entrada de demostración.
"""
import pytest
from fnv_core.demo import main, render, SAMPLES


def test_render_layout():
    text = render(b"I am a gopher!")
    lines = text.splitlines()
    assert lines[0] == 'data[14 bytes] = "I am a gopher!"'
    assert lines[1] == ""
    assert lines[2] == "FNV1a_32   = 7b0b53e9"
    assert lines[3] == "FNV1a_64   = 9fb4685c5284a9a9"
    assert lines[4] == "FNV1a_128  = 2b178bc6a6071ec752fa46a01e21fb29"
    assert lines[7].startswith("FNV1a_1024 = 85f2d26936ded8f6")
    assert len(lines) == 8


def test_main_prints_both_samples(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert 'data[20 bytes] = "hello world!goodbye!"' in out
    assert 'data[14 bytes] = "I am a gopher!"' in out
    assert "FNV1a_256  = a3846d0515e77985b8e15916d15c1ffd2ead3cf20a78e15a4ab0c023728fc0f8" in out
    assert out.count("FNV1a_") == 6 * len(SAMPLES)


def test_module_entry_point_exits_zero(monkeypatch, capsys):
    import runpy
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("fnv_core", run_name="__main__")
    assert exc.value.code == 0
    assert "FNV1a_1024" in capsys.readouterr().out
