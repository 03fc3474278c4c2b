from __future__ import annotations

from pathlib import Path

from zwoview.workout.library import list_workout_files, load_workout_file


def test_list_and_load_workout_files(tmp_path: Path) -> None:
    (tmp_path / "a_tempo.zwo").write_text(
        "<workout_file><name>Tempo 30</name><workout>"
        '<SteadyState Duration="1800" Power="0.8"/>'
        "</workout></workout_file>",
        encoding="utf-8",
    )
    (tmp_path / "b_broken.zwo").write_text("<workout_file/>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    items = list_workout_files(base_dir=tmp_path)

    assert [item.key for item in items] == ["a_tempo", "b_broken"]
    assert items[0].name == "Tempo 30"
    assert items[0].duration_sec == 1800
    assert items[1].name == "b_broken"
    assert items[1].duration_sec is None

    workout = load_workout_file(items[0])
    assert workout.segments[0].ftp == 0.8


def test_list_workout_files_missing_dir(tmp_path: Path) -> None:
    assert list_workout_files(base_dir=tmp_path / "missing") == []


def test_list_workout_files_reads_declared_encoding(tmp_path: Path) -> None:
    (tmp_path / "cafe.zwo").write_bytes(
        b'<?xml version="1.0" encoding="ISO-8859-1"?>'
        b"<workout_file><name>Caf\xe9</name><workout/></workout_file>"
    )
    (tmp_path / "garbled.zwo").write_bytes(b"<workout_file><name>\xe9</name></workout_file>")

    items = list_workout_files(base_dir=tmp_path)

    assert [(item.name, item.duration_sec) for item in items] == [
        ("Café", 0),
        ("garbled", None),
    ]
