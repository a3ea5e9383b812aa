"""
mtklogo explore logo.bin --width 720 --output explore/

For when the colour mode is unknown: every selected slot is written once
per colour mode whose byte count fits the width, as
explore_logo_NNN_<mode>.png. Open them and see which one looks right.
Nothing here is fatal, a slot or a mode that fails is reported and skipped.
"""

from pathlib import Path
from typing import List

from . import png_io, zlib_io
from .color import ColorMode, ContentType, FileInfo
from .console import cmd, console, data, data2, data3, emph, emph2, err, warn
from .errors import MtkLogoError
from .logo import LogoImage
from .pixels import infer_height
from .slots import map_slots, selected


PREFIX = "explore_"


def explore_name(id: int, mode: ColorMode) -> str:
    return PREFIX + FileInfo(id, ContentType.png(mode)).filename()


def explore_logo(id: int, blob: bytes, width: int, outdir: Path) -> List[Path]:
    inflated = zlib_io.inflate(blob)
    size = len(inflated)
    written = []
    for mode in ColorMode.enumerate():
        bpp = mode.bytes_per_pixel
        height = infer_height(size, width, mode)
        if height is None:
            console.print(f"slot {data(id)} has {data2(size)} data bytes, it cannot be "
                          f"{data3(width)} wide in {emph(mode)} ({data(bpp)} bpp)")
            continue
        filename = explore_name(id, mode)
        console.print(f"slot {data(id)} is {data2(size)} bytes. It could be "
                      f"{data3(width)}x{data3(height)} {emph(mode)}, view it as {emph2(filename)}")
        try:
            png_io.write_png(mode, outdir / filename, inflated, width, height)
        except MtkLogoError as e:
            console.print(f"{warn('Could not extract slot')} {data(id)} as "
                          f"{data3(width)}x{data3(height)} {emph(mode)}: {err(e)}")
            continue
        written.append(outdir / filename)
    return written


def run_explore(path, output, width: int, slots=None, strict: bool = False, jobs: int = 1):
    console.print(f"{cmd('explore')} file {emph(path)}, width hint {data(width)}, "
                  f"saving to {emph(output)}")
    outdir = Path(output)
    outdir.mkdir(parents=True, exist_ok=True)
    image = LogoImage.from_file(path, strict_padding=strict)

    def one(id, blob):
        if not selected(id, slots):
            return []
        try:
            return explore_logo(id, blob, width, outdir)
        except MtkLogoError as e:
            console.print(f"{warn('Could not explore slot')} {data(id)}: {err(e)}")
            return []

    results = map_slots(one, image.blobs, jobs)
    return [p for paths in results for p in paths]
