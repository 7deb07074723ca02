import pytest
import yaml

from warsector.core.scene import Scene


def test_default_scene_has_cube_and_pyramid() -> None:
    scene = Scene.default()
    assert [s.name for s in scene] == ["cube", "pyramid"]
    cube, pyramid = scene.shapes
    assert (len(cube.vertices), len(cube.edges)) == (8, 12)
    assert (len(pyramid.vertices), len(pyramid.edges)) == (5, 8)


def test_load_scene_from_yaml(tmp_path) -> None:
    path = tmp_path / "scene.yaml"
    path.write_text(
        "shapes:\n"
        "  - name: post\n"
        "    vertices: [[0, 0, 500], [0, 300, 500]]\n"
        "    edges: [[0, 1]]\n"
    )
    scene = Scene.load(path)
    assert len(scene) == 1
    assert scene.shapes[0].name == "post"
    assert len(scene.shapes[0].edges) == 1


def test_dump_produces_loadable_yaml() -> None:
    data = yaml.safe_load(Scene.default().dump())
    assert Scene.from_dict(data).to_dict() == Scene.default().to_dict()


def test_scene_with_bad_edge_fails_to_load(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("shapes:\n  - vertices: [[0, 0, 1]]\n    edges: [[0, [4]]]\n")
    with pytest.raises(ValueError, match="vertex 4"):
        Scene.load(path)


@pytest.mark.parametrize("text", ["- just a list\n", "shapes: 3\n", "shapes: [\n"])
def test_malformed_scene_documents_raise_value_error(tmp_path, text) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        Scene.load(path)


def test_missing_scene_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Scene.load(tmp_path / "absent.yaml")
