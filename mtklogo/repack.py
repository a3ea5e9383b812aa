"""
mtklogo repack --output logo.bin extracted/logo_*

File names carry the slot id and the content type (see FileInfo), so the
order on the command line does not matter. Any unreadable file aborts the
whole thing: a half built offsets table is worse than no file at all.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from . import png_io, zlib_io
from .color import FileInfo
from .console import cmd, console, data, data2, emph, emph2
from .errors import NamingError
from .logo import LogoImage
from .pixels import rgba_to_device, strip_alpha as force_opaque

log = logging.getLogger(__name__)


@dataclass
class PackableFile:
    path: Path
    info: FileInfo


def reorder(files) -> List[PackableFile]:
    analyzed = []
    for file in files:
        path = Path(file)
        info = FileInfo.from_name(path.name)
        if info.content_type.is_zip:
            console.print(f"file {emph(path)} is slot {data(info.id)} in raw z format.")
        else:
            console.print(f"file {emph(path)} is slot {data(info.id)} in "
                          f"{emph2(info.content_type.mode)} format.")
        analyzed.append(PackableFile(path, info))
    analyzed.sort(key=lambda f: f.info.id)

    seen = {}
    for f in analyzed:
        if f.info.id in seen:
            raise NamingError(f"slot {f.info.id} is given twice: {seen[f.info.id]} and {f.path}")
        seen[f.info.id] = f.path
    ids = [f.info.id for f in analyzed]
    if ids != list(range(len(ids))):
        log.warning("slot ids %s are not contiguous from 0, slots will be renumbered", ids)
    return analyzed


def import_logo(logo: PackableFile, strip_alpha: bool = False) -> bytes:
    if logo.info.content_type.is_zip:
        return logo.path.read_bytes()
    rgba, w, h = png_io.png_to_rgba(logo.path)
    if strip_alpha:
        rgba = force_opaque(rgba)
    device = rgba_to_device(logo.info.content_type.mode, rgba, w, h)
    log.debug("slot %d: %dx%d, %d device bytes", logo.info.id, w, h, len(device))
    return zlib_io.deflate(device)


def build_image(files, strip_alpha: bool = False) -> LogoImage:
    packable = reorder(files)
    if not packable:
        raise NamingError("nothing to repack")
    blobs = [import_logo(f, strip_alpha) for f in packable]
    return LogoImage.from_blobs(blobs)


def run_repack(output, files, strip_alpha: bool = False) -> LogoImage:
    files = list(files)
    console.print(f"{cmd('repack')} {data(len(files))} files into {emph(output)} "
                  f"stripping alpha: {data2(strip_alpha)}.")
    image = build_image(files, strip_alpha)
    image.save(output)
    console.print(f"successfully repacked {data(len(image.blobs))} logos to {emph(output)}")
    return image
