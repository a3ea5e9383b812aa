"""
Display profiles (mtklogo.yaml).

A profile names the colour mode of a device and the image geometries its
logo partition is known to hold. The geometry of a slot is recovered from
its inflated size, the only thing logo.bin tells us.

Lookup order for the file: explicit path, $MTKLOGO_CONFIG,
~/.config/mtklogo.yaml, /etc/mtklogo.yaml, then the copy shipped with
the package.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from .color import ColorMode
from .errors import ConfigError, FormatNotFound

log = logging.getLogger(__name__)

CONFIG_NAME = "mtklogo.yaml"
ENV_VAR = "MTKLOGO_CONFIG"
GLOBAL_CONFIG = Path("/etc") / CONFIG_NAME
SHIPPED_CONFIG = Path(__file__).with_name(CONFIG_NAME)
DEFAULT_PROFILE = "default"


@dataclass(frozen=True)
class Format:
    w: int
    h: int
    t: Optional[str] = None

    def flip(self) -> "Format":
        title = f"flip({self.t})" if self.t is not None else None
        return Format(w=self.h, h=self.w, t=title)


@dataclass
class Profile:
    name: str
    color_model: str
    formats: List[Format] = field(default_factory=list)
    alias: List[str] = field(default_factory=list)

    @property
    def color_mode(self) -> ColorMode:
        return ColorMode.by_name(self.color_model)

    def with_color_model(self, color_model: str) -> "Profile":
        ColorMode.by_name(color_model)  # fail early on typos
        return replace(self, color_model=color_model)

    def matches(self, name: str) -> bool:
        return name == self.name or name in self.alias

    def guess_format(self, size: int, flip: bool = False) -> Format:
        bpp = self.color_mode.bytes_per_pixel
        for f in self.formats:
            if f.w * f.h * bpp == size:
                return f.flip() if flip else f
        raise FormatNotFound(
            f"size '{size}' does not correspond to any dimension in profile '{self.name}'")

    def resolver(self, flip: bool = False) -> Callable[[int], Format]:
        """Plain size -> Format function for the slot processing code."""
        def resolve(size: int) -> Format:
            return self.guess_format(size, flip)
        return resolve


def _parse_format(raw, where: str) -> Format:
    if not isinstance(raw, dict) or "w" not in raw or "h" not in raw:
        raise ConfigError(f"{where}: a format needs 'w' and 'h'")
    try:
        w, h = int(raw["w"]), int(raw["h"])
    except (TypeError, ValueError):
        raise ConfigError(f"{where}: 'w' and 'h' must be integers") from None
    if w <= 0 or h <= 0:
        raise ConfigError(f"{where}: invalid dimensions {w}x{h}")
    t = raw.get("t")
    return Format(w=w, h=h, t=None if t is None else str(t))


def _parse_profile(raw, where: str) -> Profile:
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: a profile must be a mapping")
    for key in ("name", "color_model", "formats"):
        if key not in raw:
            raise ConfigError(f"{where}: missing '{key}'")
    name = str(raw["name"])
    formats = raw["formats"] or []
    if not isinstance(formats, list):
        raise ConfigError(f"{where}: 'formats' must be a list")
    alias = raw.get("alias") or []
    if isinstance(alias, str):
        alias = [alias]
    return Profile(
        name=name,
        color_model=str(raw["color_model"]),
        formats=[_parse_format(f, f"{where}/{name}[{i}]") for i, f in enumerate(formats)],
        alias=[str(a) for a in alias],
    )


@dataclass
class Config:
    version: str
    profiles: List[Profile]
    path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data, path: Optional[Path] = None) -> "Config":
        where = str(path) if path else "config"
        if not isinstance(data, dict):
            raise ConfigError(f"{where}: top level must be a mapping")
        profiles = data.get("profiles")
        if not isinstance(profiles, list):
            raise ConfigError(f"{where}: 'profiles' must be a list")
        return cls(
            version=str(data.get("version", "")),
            profiles=[_parse_profile(p, where) for p in profiles],
            path=path,
        )

    @classmethod
    def from_file(cls, path) -> "Config":
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"could not read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"could not parse config {path}: {e}") from e
        return cls.from_dict(data, path)

    @classmethod
    def search_path(cls) -> List[Path]:
        paths = []
        env = os.environ.get(ENV_VAR)
        if env:
            paths.append(Path(env))
        paths.append(Path.home() / ".config" / CONFIG_NAME)
        paths.append(GLOBAL_CONFIG)
        paths.append(SHIPPED_CONFIG)
        return paths

    @classmethod
    def load(cls, path=None) -> "Config":
        if path is not None:
            return cls.from_file(path)
        for candidate in cls.search_path():
            if candidate.is_file():
                log.debug("using configuration %s", candidate)
                return cls.from_file(candidate)
        raise ConfigError(f"`{CONFIG_NAME}` configuration not found, please provide one.")

    def profile(self, name: str = DEFAULT_PROFILE) -> Profile:
        for p in self.profiles:
            if p.matches(name):
                return p
        known = ", ".join(p.name for p in self.profiles) or "none"
        raise ConfigError(f"profile '{name}' is not declared in configuration (known: {known})")
