import pytest

from fileacq.config import FileAcqConfig, load_config, parse_config


def test_defaults_when_empty(tmp_path):
    p = tmp_path / "fileacq.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == FileAcqConfig()


def test_partial_config(tmp_path):
    p = tmp_path / "fileacq.yaml"
    p.write_text("demo:\n  first_path: a.txt\nio:\n  chunk_size: 16\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.demo.first_path == "a.txt"
    assert cfg.demo.second_path == "hello2.txt"
    assert cfg.io.chunk_size == 16
    assert cfg.io.create_mode == 0o666


@pytest.mark.parametrize(
    "data",
    [
        {"io": {"chunk_size": 0}},
        {"io": {"create_mode": 99999}},
        {"demo": {"first_path": ""}},
        {"unknown": 1},
    ],
)
def test_invalid_schema(data):
    with pytest.raises(ValueError, match="Invalid fileacq.yaml schema"):
        parse_config(data)


def test_invalid_yaml(tmp_path):
    p = tmp_path / "fileacq.yaml"
    p.write_text("demo: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_non_mapping(tmp_path):
    p = tmp_path / "fileacq.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(p)
