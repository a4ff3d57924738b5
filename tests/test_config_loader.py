import pytest

from graphlens.core.config_loader import DEFAULT_CONFIG, ConfigLoader
from graphlens.core.options import RenderOptions


def test_missing_file_yields_no_config(tmp_path, caplog):
    loader = ConfigLoader(tmp_path / "absent.yaml")
    assert loader.config is None
    assert "不存在" in caplog.text


def test_malformed_yaml_yields_no_config(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("rendering: [unclosed", encoding="utf-8")
    assert ConfigLoader(path).config is None


def test_non_mapping_yaml_yields_no_config(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    assert ConfigLoader(path).config is None


def test_user_values_are_merged_over_defaults(tmp_path):
    path = tmp_path / "workspace.yaml"
    path.write_text("rendering:\n  command: neato\nviewer:\n  width: 640\n", encoding="utf-8")

    config = ConfigLoader(path).config

    assert config["rendering"]["command"] == "neato"
    assert config["rendering"]["image_format"] == "png"
    assert config["viewer"] == {"title": "graphlens", "width": 640, "height": 768}
    assert config["jobs"] == []
    assert DEFAULT_CONFIG["rendering"]["command"] == "dot"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader(path).config == DEFAULT_CONFIG


def test_render_options_split_render_and_descriptor_keys():
    marker = object()
    options, remaining = RenderOptions.from_options(
        {"command": "fdp", "filename": "out.png", "dpi": None, "vertical": False, "node_descriptor": marker}
    )
    assert options == RenderOptions(command="fdp", filename="out.png")
    assert remaining == {"vertical": False, "node_descriptor": marker}
    assert remaining["node_descriptor"] is marker


def test_render_options_defaults():
    options, remaining = RenderOptions.from_options({})
    assert remaining == {}
    assert options.engine_kwargs() == {"command": "dot", "dpi": None, "timeout": None}
    assert options.output_format is None
    assert options.filename is None


def test_render_options_output_format_must_match_operation():
    options, _ = RenderOptions.from_options({"output_format": "SVG"})
    options.check_output_format("svg")
    with pytest.raises(ValueError, match="output_format"):
        options.check_output_format("png")
