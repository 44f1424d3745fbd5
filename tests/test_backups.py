"""
Tests for backup writing and rotation.
"""

import os
from datetime import datetime

import pytest
from transcheck.backups import backup_and_prune, backup_base_name, prune_backups, write_backup


def _stamp(second):
    return datetime(2025, 3, 1, 12, 0, second)


@pytest.fixture
def survey(tmp_path):
    path = tmp_path / "surveys" / "child.json"
    path.parent.mkdir()
    path.write_text('{"title": "x"}', encoding="utf-8")
    return path


def test_base_name_flattens_nested_paths(tmp_path):
    nested = tmp_path / "surveys" / "parent" / "family.json"
    assert backup_base_name(str(nested), base_dir=str(tmp_path / "surveys")) == "parent__family.json"


def test_base_name_defaults_to_file_name(survey):
    assert backup_base_name(str(survey)) == "child.json"


def test_write_backup_name_and_content(survey, tmp_path):
    backups = tmp_path / "backups"
    dest = write_backup(str(survey), str(backups), now=_stamp(5))
    assert os.path.basename(dest) == "child.json.backup.2025-03-01_12-00-05"
    with open(dest, encoding="utf-8") as f:
        assert f.read() == '{"title": "x"}'


def test_prune_keeps_newest(survey, tmp_path):
    backups = tmp_path / "backups"
    for second in range(5):
        write_backup(str(survey), str(backups), now=_stamp(second))

    deleted = prune_backups(str(survey), str(backups), keep=3)

    assert sorted(os.path.basename(p) for p in deleted) == [
        "child.json.backup.2025-03-01_12-00-00",
        "child.json.backup.2025-03-01_12-00-01",
    ]
    assert sorted(os.listdir(backups)) == [
        "child.json.backup.2025-03-01_12-00-02",
        "child.json.backup.2025-03-01_12-00-03",
        "child.json.backup.2025-03-01_12-00-04",
    ]


def test_prune_leaves_other_files_alone(survey, tmp_path):
    backups = tmp_path / "backups"
    backups.mkdir()
    (backups / "parent.json.backup.2020-01-01_00-00-00").write_text("{}", encoding="utf-8")
    write_backup(str(survey), str(backups), now=_stamp(1))
    write_backup(str(survey), str(backups), now=_stamp(2))

    prune_backups(str(survey), str(backups), keep=1)

    assert sorted(os.listdir(backups)) == [
        "child.json.backup.2025-03-01_12-00-02",
        "parent.json.backup.2020-01-01_00-00-00",
    ]


def test_prune_missing_directory(survey, tmp_path):
    assert prune_backups(str(survey), str(tmp_path / "none")) == []


def test_prune_rejects_negative_keep(survey, tmp_path):
    with pytest.raises(ValueError):
        prune_backups(str(survey), str(tmp_path), keep=-1)


def test_backup_and_prune(survey, tmp_path):
    backups = tmp_path / "backups"
    for second in range(3):
        write_backup(str(survey), str(backups), now=_stamp(second))

    dest, pruned = backup_and_prune(str(survey), str(backups), keep=2, now=_stamp(30))

    assert os.path.basename(dest) == "child.json.backup.2025-03-01_12-00-30"
    assert len(pruned) == 2
    assert len(os.listdir(backups)) == 2
