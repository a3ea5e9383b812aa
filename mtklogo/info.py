"""mtklogo info logo.bin: dumps the header and the offsets table."""

from rich.table import Table

from .console import cmd, console, data, emph
from .header import HEADER_SIZE
from .logo import LogoImage


def run_info(path, strict: bool = False) -> LogoImage:
    image = LogoImage.from_file(path, strict_padding=strict)
    t = image.table
    console.print(f"{cmd('info')} {emph(path)}: {emph(t.header.mtk_type.value)} image, "
                  f"{data(t.logo_count)} slots, block size {data(t.block_size)}")
    table = Table("slot", "offset", "file offset", "size")
    for i in range(t.logo_count):
        start, end = t.blob_range(i)
        table.add_row(str(i), f"0x{start:X}", f"0x{HEADER_SIZE + start:X}", str(end - start))
    console.print(table)
    return image
