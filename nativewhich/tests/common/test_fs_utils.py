import os
from pathlib import Path
from typing import List, Optional

import pytest
from pytest_mock import MockerFixture

from nativewhich.common.fs_utils import resolve, split_search_path

MOCK_COMMON_PATH = "nativewhich.common.fs_utils."


def make_file(path: Path, mode: int) -> Path:
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ("", []),
        ("/bin", ["/bin"]),
        ("/binA:/binB", ["/binA", "/binB"]),
        ("/binB:/binA", ["/binB", "/binA"]),
        ("/bin::/usr/bin", ["/bin", "", "/usr/bin"]),
        (":", ["", ""]),
    ],
)
def test_split_search_path(value: Optional[str], expected: List[str]) -> None:
    assert split_search_path(value, ":") == expected


def test_split_search_path_custom_separator() -> None:
    assert split_search_path(r"C:\bin;D:\tools", ";") == [r"C:\bin", r"D:\tools"]


@pytest.mark.parametrize("mode", [0o755, 0o700, 0o710, 0o701, 0o100, 0o010, 0o001])
def test_resolve_executable(tmp_path: Path, mode: int) -> None:
    make_file(tmp_path / "tool", mode)
    assert resolve("tool", str(tmp_path)) == os.path.join(str(tmp_path), "tool")


@pytest.mark.parametrize("mode", [0o644, 0o600, 0o666, 0o000])
def test_resolve_not_executable(tmp_path: Path, mode: int) -> None:
    make_file(tmp_path / "tool", mode)
    assert resolve("tool", str(tmp_path)) is None


def test_resolve_missing(tmp_path: Path) -> None:
    assert resolve("ghost", str(tmp_path)) is None


def test_resolve_missing_directory(tmp_path: Path) -> None:
    assert resolve("tool", str(tmp_path / "nope")) is None


def test_resolve_directory(tmp_path: Path) -> None:
    (tmp_path / "tool").mkdir(mode=0o755)
    assert resolve("tool", str(tmp_path)) is None


def test_resolve_exec_bits_cleared(tmp_path: Path) -> None:
    tool = make_file(tmp_path / "tool", 0o755)
    assert resolve("tool", str(tmp_path)) is not None

    os.chmod(tool, 0o644)
    assert resolve("tool", str(tmp_path)) is None


def test_resolve_symlink_to_executable(tmp_path: Path) -> None:
    target = make_file(tmp_path / "real-tool", 0o755)
    (tmp_path / "tool").symlink_to(target)
    # path is returned as joined, not canonicalized
    assert resolve("tool", str(tmp_path)) == os.path.join(str(tmp_path), "tool")


def test_resolve_symlink_to_directory(tmp_path: Path) -> None:
    target = tmp_path / "real-dir"
    target.mkdir()
    (tmp_path / "tool").symlink_to(target)
    assert resolve("tool", str(tmp_path)) is None


def test_resolve_dangling_symlink(tmp_path: Path) -> None:
    (tmp_path / "tool").symlink_to(tmp_path / "nowhere")
    assert resolve("tool", str(tmp_path)) is None


def test_resolve_name_with_nul_byte(tmp_path: Path) -> None:
    assert resolve("to\x00ol", str(tmp_path)) is None


def test_resolve_keeps_trailing_separator_semantics(tmp_path: Path) -> None:
    make_file(tmp_path / "tool", 0o755)
    directory = str(tmp_path) + os.sep
    assert resolve("tool", directory) == os.path.join(str(tmp_path), "tool")


@pytest.mark.parametrize("error", [PermissionError, OSError, FileNotFoundError])
def test_resolve_stat_error_is_a_miss(error: type, mocker: MockerFixture) -> None:
    stat_mock = mocker.patch(MOCK_COMMON_PATH + "os.stat", side_effect=error)
    assert resolve("tool", "/binA") is None
    stat_mock.assert_called_once_with(os.path.join("/binA", "tool"))


def test_resolve_absolute_name_stays_in_directory(tmp_path: Path) -> None:
    tool = make_file(tmp_path / "tool", 0o755)
    other = tmp_path / "other"
    other.mkdir()

    assert resolve(str(tool), str(other)) is None


def test_resolve_absolute_name_joined_to_directory(tmp_path: Path) -> None:
    (tmp_path / "x").mkdir()
    make_file(tmp_path / "x" / "tool", 0o755)

    assert resolve(os.sep + os.path.join("x", "tool"), str(tmp_path)) == os.path.join(
        str(tmp_path), "x", "tool"
    )


def test_resolve_name_with_separator(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    make_file(tmp_path / "sub" / "tool", 0o755)

    assert resolve(os.path.join("sub", "tool"), str(tmp_path)) == os.path.join(
        str(tmp_path), "sub", "tool"
    )
    assert resolve(os.path.join("nope", "tool"), str(tmp_path)) is None


def test_resolve_empty_directory_is_relative(mocker: MockerFixture) -> None:
    stat_mock = mocker.patch(MOCK_COMMON_PATH + "os.stat", side_effect=FileNotFoundError)
    assert resolve(os.sep + "tool", "") is None
    stat_mock.assert_called_once_with("tool")
