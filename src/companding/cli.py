"""Command-line transcoder for raw sample files.

PCM files are headerless native-endian 16-bit samples; companded files are one
byte per sample. Files are streamed through the buffer transforms in
``chunk_bytes`` pieces.
"""

from __future__ import annotations

import argparse
import logging
import shutil
from pathlib import Path

from companding.errors import CodecError
from companding.laws import LAW_NAMES, BufferTransform, conversion_for, get_codec
from companding.samples import PCM16_WIDTH
from config.settings import get_settings

LOGGER = logging.getLogger(__name__)


def transcode_file(
    src_path: Path,
    dst_path: Path,
    transform: BufferTransform,
    *,
    in_width: int,
    out_width: int,
    chunk_bytes: int,
) -> int:
    """Stream ``src_path`` through ``transform`` into ``dst_path``.

    Returns:
        Number of samples written.

    Raises:
        shutil.SameFileError: if both paths name the same file.
    """

    if dst_path.exists() and src_path.exists() and src_path.samefile(dst_path):
        raise shutil.SameFileError(f"{src_path} and {dst_path} are the same file")

    out = bytearray((chunk_bytes // in_width) * out_width)
    samples = 0
    with src_path.open("rb") as fin, dst_path.open("wb") as fout:
        while chunk := fin.read(chunk_bytes):
            if len(chunk) % in_width:
                LOGGER.warning("Ignoring trailing partial sample in %s", src_path)
            written = transform(out, chunk)
            fout.write(memoryview(out)[:written])
            samples += written // out_width
    return samples


def _run(args: argparse.Namespace, chunk_bytes: int) -> int:
    if args.command == "encode":
        transform = get_codec(args.law).encode_into
        in_width, out_width = PCM16_WIDTH, 1
    elif args.command == "decode":
        transform = get_codec(args.law).decode_into
        in_width, out_width = 1, PCM16_WIDTH
    else:
        conversion = conversion_for(args.source, args.target)
        if conversion is None:
            shutil.copyfile(args.src, args.dst)
            LOGGER.info("%s and %s use the same law, copied unchanged", args.src, args.dst)
            return 0
        transform = conversion
        in_width = out_width = 1

    samples = transcode_file(
        args.src,
        args.dst,
        transform,
        in_width=in_width,
        out_width=out_width,
        chunk_bytes=chunk_bytes,
    )
    LOGGER.info("%s: %s -> %s (%d samples)", args.command, args.src, args.dst, samples)
    return samples


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="G.711 A-law / mu-law transcoder for raw sample files")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encode", "PCM16 -> companded bytes"),
        ("decode", "companded bytes -> PCM16"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("--law", choices=LAW_NAMES, default=settings.default_law)
        cmd.add_argument("src", type=Path)
        cmd.add_argument("dst", type=Path)

    convert = commands.add_parser("convert", help="direct A-law <-> mu-law conversion")
    convert.add_argument("--from", dest="source", choices=LAW_NAMES, required=True)
    convert.add_argument("--to", dest="target", choices=LAW_NAMES, required=True)
    convert.add_argument("src", type=Path)
    convert.add_argument("dst", type=Path)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _parse_args(argv)

    try:
        _run(args, settings.chunk_bytes)
    except (OSError, CodecError):
        LOGGER.exception("%s failed for %s", args.command, args.src)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
