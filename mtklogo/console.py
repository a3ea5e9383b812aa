"""Coloured output (rich markup) and logging setup shared by the commands."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

FORMAT = "%(message)s"


def _paint(style: str, value) -> str:
    return f"[{style}]{escape(str(value))}[/]"


def cmd(value) -> str:
    return _paint("bold rgb(255,153,51)", value)


def warn(value) -> str:
    return _paint("bold rgb(255,204,0)", value)


def err(value) -> str:
    return _paint("rgb(204,0,0)", value)


def emph(value) -> str:
    return _paint("rgb(204,204,0)", value)


def emph2(value) -> str:
    return _paint("rgb(102,153,0)", value)


def data(value) -> str:
    return _paint("rgb(153,153,255)", value)


def data2(value) -> str:
    return _paint("rgb(204,51,255)", value)


def data3(value) -> str:
    return _paint("rgb(51,204,255)", value)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level="NOTSET",
        format=FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)
