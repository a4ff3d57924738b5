import pytest
from conftest import requires_graphviz, requires_posix
from PIL import Image

import graphlens
from graphlens.core import facade
from graphlens.errors import MissingDestinationError, RenderError
from graphlens.renderers import image_store

NODES = ["A", "B"]
ADJACENCY = {"A": ["B"], "B": []}


def test_save_graph_without_filename_fails_before_rendering(monkeypatch):
    def unexpected(*args, **kwargs):
        raise AssertionError("the engine must not run without a destination")

    monkeypatch.setattr(facade, "render_raster", unexpected)
    with pytest.raises(MissingDestinationError):
        graphlens.save_graph(NODES, ADJACENCY.get)
    with pytest.raises(OSError):
        graphlens.save_tree(lambda n: False, lambda n: [], "root")


def test_descriptor_options_reach_the_builder_and_render_options_do_not(monkeypatch):
    seen = {}

    def fake_render(descriptor, **kwargs):
        seen["descriptor"] = descriptor
        seen["kwargs"] = kwargs
        return Image.new("RGB", (3, 3))

    monkeypatch.setattr(facade, "render_raster", fake_render)
    image = graphlens.graph_to_image(NODES, ADJACENCY.get, command="neato", dpi=72, vertical=False)

    assert image.size == (3, 3)
    assert "rankdir=LR" in seen["descriptor"]
    assert seen["kwargs"] == {"command": "neato", "dpi": 72, "timeout": None}


def test_output_format_is_checked_against_the_operation(monkeypatch):
    def unexpected(*args, **kwargs):
        raise AssertionError("the engine must not run for a mismatched output_format")

    monkeypatch.setattr(facade, "render_raster", unexpected)
    monkeypatch.setattr(facade, "render_vector", unexpected)
    with pytest.raises(ValueError, match="output_format"):
        graphlens.graph_to_image(NODES, ADJACENCY.get, output_format="svg")
    with pytest.raises(ValueError, match="output_format"):
        graphlens.dot_to_svg("digraph { a }", output_format="png")

    monkeypatch.setattr(facade, "render_raster", lambda descriptor, **kwargs: Image.new("RGB", (2, 2)))
    image = graphlens.graph_to_image(NODES, ADJACENCY.get, output_format="png")
    assert image.size == (2, 2)


def test_save_graph_writes_requested_format(monkeypatch, tmp_path):
    monkeypatch.setattr(facade, "render_raster", lambda descriptor, **kwargs: Image.new("RGB", (9, 4)))
    target = tmp_path / "graph.bmp"

    graphlens.save_graph(NODES, ADJACENCY.get, filename=str(target), image_format="bmp")

    with Image.open(target) as saved:
        assert saved.format == "BMP"
        assert saved.size == (9, 4)


def test_view_graph_uses_given_window(monkeypatch):
    monkeypatch.setattr(facade, "render_raster", lambda descriptor, **kwargs: Image.new("RGB", (2, 2)))
    shown = []

    class RecordingWindow:
        def show(self, image):
            shown.append(image)

    graphlens.view_graph(NODES, ADJACENCY.get, window=RecordingWindow())
    assert len(shown) == 1 and shown[0].size == (2, 2)


def test_render_errors_propagate_unchanged(monkeypatch):
    error = RenderError("Error: boom\n", "digraph {}", "Error: boom")

    def failing(descriptor, **kwargs):
        raise error

    monkeypatch.setattr(facade, "render_vector", failing)
    with pytest.raises(RenderError) as excinfo:
        graphlens.tree_to_svg(lambda n: False, lambda n: [], "root")
    assert excinfo.value is error


def test_generator_errors_propagate_unchanged():
    def broken_adjacency(node):
        raise KeyError(node)

    with pytest.raises(KeyError):
        graphlens.graph_to_svg(NODES, broken_adjacency)


@requires_posix
def test_save_tree_with_fake_engine(fake_engine, sample_png, tmp_path):
    name = fake_engine(stdout_file=sample_png)
    target = tmp_path / "tree.png"

    graphlens.save_tree(lambda n: n < 3, lambda n: [n + 1], 1, command=name, filename=str(target))

    assert image_store.decode(target.read_bytes()).size == (40, 30)
    assert "digraph" in (fake_engine.bin_dir / f"{name}.stdin").read_text()


@requires_graphviz
def test_two_node_graph_renders_with_default_engine():
    image = graphlens.graph_to_image(NODES, ADJACENCY.get)
    assert image.width > 0 and image.height > 0


@requires_graphviz
def test_graph_to_svg_with_default_engine():
    svg = graphlens.graph_to_svg(NODES, ADJACENCY.get)
    assert "<svg" in svg


@requires_graphviz
def test_save_graph_round_trip(tmp_path):
    target = tmp_path / "graph.png"
    graphlens.save_graph(NODES, ADJACENCY.get, filename=str(target))
    assert image_store.decode(target.read_bytes()).width > 0
