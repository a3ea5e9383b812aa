"""
mtklogo unpack logo.bin \
  --profile default \
  --output extracted/ \
  --slots 0,1

Every slot goes out as logo_NNN_<mode>.png, using the profile to recover
its dimensions. Slots left out of --slots (or all of them with --zip) are
written as the untouched logo_NNN_raw.z blob. When a PNG cannot be made
the slot falls back to .z, so nothing is ever lost.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import png_io, zlib_io
from .color import FileInfo
from .config import Config
from .console import cmd, console, data, data2, emph, err, warn
from .errors import MtkLogoError
from .logo import LogoImage
from .slots import map_slots, selected

log = logging.getLogger(__name__)


@dataclass
class SlotResult:
    id: int
    info: FileInfo
    path: Optional[Path] = None
    size: Optional[int] = None
    error: Optional[str] = None


def export_raw(output_file: Path, blob: bytes) -> None:
    output_file.write_bytes(blob)


def export_png(output_file: Path, blob: bytes, mode, resolve) -> None:
    inflated = zlib_io.inflate(blob)
    fmt = resolve(len(inflated))
    png_io.write_png(mode, output_file, inflated, fmt.w, fmt.h)


def extract_logo(id: int, blob: bytes, zip: bool, mode, outdir: Path, resolve) -> SlotResult:
    info = FileInfo.from_info(id, zip, mode)
    output_file = outdir / info.filename()
    if info.content_type.is_zip:
        export_raw(output_file, blob)
        return SlotResult(id, info, output_file)
    try:
        export_png(output_file, blob, mode, resolve)
        return SlotResult(id, info, output_file)
    except MtkLogoError as e:
        console.print(f"{warn('Could not export slot')} {data(id)} as {emph(mode)}: {err(e)}. "
                      "Falling back to raw .z")
        # invalidates the png name
        info = FileInfo.from_info(id, True, mode)
        output_file = outdir / info.filename()
        export_raw(output_file, blob)
        return SlotResult(id, info, output_file, error=str(e))


def check_logo(id: int, blob: bytes, zip: bool, mode, outdir: Path, resolve) -> SlotResult:
    """Same decisions as extract_logo, but only reports them."""
    info = FileInfo.from_info(id, zip, mode)
    output_file = outdir / info.filename()
    if info.content_type.is_zip:
        console.print(f"slot {data(id)} is {data2(len(blob))} bytes and will be exported "
                      f"as raw zip to {emph(output_file)}")
        return SlotResult(id, info, output_file)
    try:
        inflated = zlib_io.inflate(blob)
        fmt = resolve(len(inflated))
    except MtkLogoError as e:
        console.print(f"slot {data(id)} is {data2(len(blob))} bytes and cannot be exported "
                      f"as an image: {warn(e)}")
        return SlotResult(id, info, error=str(e))
    console.print(f"slot {data(id)} is {data2(len(blob))} bytes ({data2(len(inflated))} inflated) "
                  f"and will be exported as {data(fmt.w)}x{data(fmt.h)} image to {emph(output_file)}")
    return SlotResult(id, info, output_file, size=len(inflated))


def run_unpack(path, output, config: Optional[Config] = None, profile_name: str = "default",
               mode: Optional[str] = None, flip: bool = False, zip: bool = False, slots=None,
               check: bool = False, strict: bool = False, jobs: int = 1):
    config = config or Config.load()
    profile = config.profile(profile_name)
    if mode:
        profile = profile.with_color_model(mode)
    color_mode = profile.color_mode
    console.print(f"{cmd('unpack')} {emph(path)} with profile {data(profile.name)}, "
                  f"color mode {emph(color_mode)}, flip orientation: {data2(flip)}.")

    outdir = Path(output)
    if not check:
        outdir.mkdir(parents=True, exist_ok=True)

    resolve_format = profile.resolver(flip)

    def resolve(size: int):
        fmt = resolve_format(size)
        log.debug("%d bytes yields %dx%d for profile %s and mode %s",
                  size, fmt.w, fmt.h, profile.name, color_mode)
        return fmt

    image = LogoImage.from_file(path, strict_padding=strict)
    handler = check_logo if check else extract_logo

    def one(id, blob):
        slot_zip = zip or not selected(id, slots)
        return handler(id, blob, slot_zip, color_mode, outdir, resolve)

    results = map_slots(one, image.blobs, jobs)
    if not check:
        pngs = sum(1 for r in results if not r.info.content_type.is_zip)
        console.print(f"extracted {data(len(results))} slots ({data2(pngs)} png) to {emph(outdir)}")
    return results
