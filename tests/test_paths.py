from pathlib import Path

from starbattle.data import paths
from starbattle.data.json_loader import write_json, load_json


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_ships_with_package() -> None:
    definitions_path = paths.get_definitions_path()
    assert definitions_path.name == "definitions"
    assert (definitions_path / "archetypes.json").exists()


def test_write_json_creates_parents_and_leaves_no_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "characters.json"

    write_json(target, [{"id": "c1"}])

    assert load_json(target) == [{"id": "c1"}]
    assert [entry.name for entry in target.parent.iterdir()] == ["characters.json"]
