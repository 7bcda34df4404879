import os
from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import depth_under, extract_payload
from filegen.config import GeneratorConfig
from filegen.services.generator import format_report, generate
from filegen.services.monitor import monitor


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "dist"


def test_generate_creates_count_files(out_dir):
    config = GeneratorConfig(out_dir=out_dir, count=15, min_len=5, max_len=60, max_depth=3)
    created = generate(config)

    assert len(created) == 15
    on_disk = [p for p in out_dir.rglob("*") if p.is_file()]
    assert sorted(on_disk) == sorted(created)
    for path in created:
        assert 1 <= depth_under(path, out_dir) <= 3
        payload = extract_payload(path)
        if path.suffix == ".css":
            assert len(payload) <= 30
        else:
            assert 5 <= len(payload) <= 60


def test_generate_fixed_length_depth_one(out_dir):
    config = GeneratorConfig(out_dir=out_dir, count=5, min_len=10, max_len=10, max_depth=1)
    created = generate(config)

    assert len(created) == 5
    for path in created:
        assert depth_under(path, out_dir) == 1
        assert len(extract_payload(path)) == 10


def test_generate_zero_creates_base(out_dir):
    config = GeneratorConfig(out_dir=out_dir, count=0, min_len=1, max_len=2, max_depth=2)
    assert generate(config) == []
    assert out_dir.is_dir()
    assert list(out_dir.iterdir()) == []
    assert monitor.get_stats()["status"] == "Done"


def test_generate_updates_monitor(out_dir):
    config = GeneratorConfig(out_dir=out_dir, count=4, min_len=1, max_len=3, max_depth=2)
    generate(config)

    stats = monitor.get_stats()
    assert stats["status"] == "Done"
    assert stats["run_active"] is False
    assert stats["files_requested"] == 4
    assert stats["files_created"] == 4
    assert sum(stats["extensions"].values()) == 4
    assert stats["directories_created"] >= 1
    assert monitor.summary().startswith("Done: 4/4 files, ")


def test_first_error_aborts_run(out_dir):
    config = GeneratorConfig(out_dir=out_dir, count=10, min_len=1, max_len=3, max_depth=1)
    calls = []

    def flaky(directory, min_len, max_len):
        calls.append(directory)
        if len(calls) == 3:
            raise PermissionError("denied")
        return directory / f"file_{len(calls)}.txt"

    with patch("filegen.services.generator.make_random_file", side_effect=flaky):
        with pytest.raises(PermissionError):
            generate(config)

    assert len(calls) == 3
    assert monitor.get_stats()["status"] == "Failed"
    assert monitor.summary().startswith("Failed: 0/10 files")


def test_base_creation_error_propagates(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file")
    config = GeneratorConfig(out_dir=blocker, count=1, min_len=1, max_len=1, max_depth=1)
    with pytest.raises(OSError):
        generate(config)


def test_format_report_relative_paths(tmp_path):
    out = tmp_path / "dist"
    created = [out / "aaaaaa" / "file_1.txt", out / "bbbbbb" / "cccccc" / "file_2.js"]
    lines = format_report(created, out, cwd=tmp_path)

    assert lines[0] == f"Created 2 files under {out}"
    assert lines[1] == " - " + os.path.join("dist", "aaaaaa", "file_1.txt")
    assert lines[2] == " - " + os.path.join("dist", "bbbbbb", "cccccc", "file_2.js")


def test_format_report_defaults_to_cwd(tmp_path):
    # conftest chdirs into tmp_path
    lines = format_report([tmp_path / "x" / "f.txt"], tmp_path)
    assert lines == [f"Created 1 files under {tmp_path}", " - " + os.path.join("x", "f.txt")]


def test_format_report_empty(tmp_path):
    assert format_report([], Path("/somewhere")) == ["Created 0 files under /somewhere"]


def test_summary_lists_extensions_and_bytes():
    monitor.begin_run(3)
    monitor.directory_created()
    monitor.file_written(".txt", 5)
    monitor.file_written(".css", 40)
    monitor.file_written(".txt", 7)
    monitor.finish_run()

    assert monitor.summary() == (
        "Done: 3/3 files, 1 new directories, 52 bytes (.css=1, .txt=2)"
    )


def test_summary_before_any_file():
    assert monitor.summary() == "Idle: 0/0 files, 0 new directories, 0 bytes (none)"
