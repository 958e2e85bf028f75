from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from companding.alaw import alaw_decode, alaw_encode
from companding.cli import main
from companding.transcode import alaw_to_ulaw
from companding.ulaw import ulaw_encode


@pytest.fixture()
def pcm_file(tmp_path: Path) -> tuple[Path, np.ndarray]:
    pcm = (np.sin(np.linspace(0, 20 * np.pi, 1601)) * 20000).astype(np.int16)
    path = tmp_path / "input.pcm"
    path.write_bytes(pcm.tobytes())
    return path, pcm


def test_encode_command(pcm_file: tuple[Path, np.ndarray], tmp_path: Path) -> None:
    src, pcm = pcm_file
    dst = tmp_path / "out.alaw"

    assert main(["encode", "--law", "alaw", str(src), str(dst)]) == 0
    assert dst.read_bytes() == alaw_encode(pcm)


def test_encode_uses_default_law(
    pcm_file: tuple[Path, np.ndarray], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DEFAULT_LAW", "ulaw")
    src, pcm = pcm_file
    dst = tmp_path / "out.ulaw"

    assert main(["encode", str(src), str(dst)]) == 0
    assert dst.read_bytes() == ulaw_encode(pcm)


def test_decode_command_streams_in_chunks(
    pcm_file: tuple[Path, np.ndarray], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CHUNK_BYTES", "64")
    _, pcm = pcm_file
    codes = alaw_encode(pcm)
    src = tmp_path / "in.alaw"
    src.write_bytes(codes)
    dst = tmp_path / "out.pcm"

    assert main(["decode", "--law", "alaw", str(src), str(dst)]) == 0
    decoded = np.frombuffer(dst.read_bytes(), dtype=np.int16)
    assert np.array_equal(decoded, alaw_decode(codes))


def test_encode_drops_trailing_partial_sample(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHUNK_BYTES", "4")
    src = tmp_path / "odd.pcm"
    src.write_bytes(np.array([0, -1, 1000], dtype=np.int16).tobytes() + b"\x01")
    dst = tmp_path / "odd.alaw"

    assert main(["encode", "--law", "alaw", str(src), str(dst)]) == 0
    assert dst.read_bytes() == bytes([0xD5, 0x55, alaw_encode(np.array([1000], dtype=np.int16))[0]])


def test_convert_command(tmp_path: Path) -> None:
    src = tmp_path / "in.alaw"
    src.write_bytes(bytes(range(256)))
    dst = tmp_path / "out.ulaw"

    assert main(["convert", "--from", "alaw", "--to", "ulaw", str(src), str(dst)]) == 0
    assert dst.read_bytes() == alaw_to_ulaw(bytes(range(256)))


def test_convert_same_law_copies(tmp_path: Path) -> None:
    src = tmp_path / "in.ulaw"
    src.write_bytes(b"\xff\x7f\x00")
    dst = tmp_path / "out.ulaw"

    assert main(["convert", "--from", "ulaw", "--to", "ulaw", str(src), str(dst)]) == 0
    assert dst.read_bytes() == b"\xff\x7f\x00"


def test_missing_input_fails(tmp_path: Path) -> None:
    assert main(["decode", "--law", "ulaw", str(tmp_path / "missing"), str(tmp_path / "out")]) == 1


def test_unknown_law_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["encode", "--law", "g722", str(tmp_path / "a"), str(tmp_path / "b")])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("command", [["encode", "--law", "alaw"], ["decode", "--law", "ulaw"]])
def test_transcoding_a_file_onto_itself_fails_and_keeps_input(
    command: list[str], pcm_file: tuple[Path, np.ndarray]
) -> None:
    src, pcm = pcm_file

    assert main([*command, str(src), str(src)]) == 1
    assert src.read_bytes() == pcm.tobytes()


def test_same_file_check_follows_alternate_paths(pcm_file: tuple[Path, np.ndarray]) -> None:
    src, pcm = pcm_file
    (src.parent / "sub").mkdir()
    alias = src.parent / "sub" / ".." / src.name

    assert main(["encode", "--law", "ulaw", str(src), str(alias)]) == 1
    assert src.read_bytes() == pcm.tobytes()
