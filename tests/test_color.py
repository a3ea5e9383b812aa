import pytest

from mtklogo.color import ColorMode, ContentType, Endian, FileInfo
from mtklogo.errors import NamingError, UnknownColorMode

NAMES = ["rgbabe", "rgbale", "bgrabe", "bgrale", "rgb565be", "rgb565le"]


def test_enumerate_order_and_names():
    assert [str(m) for m in ColorMode.enumerate()] == NAMES


def test_bytes_per_pixel():
    assert [m.bytes_per_pixel for m in ColorMode] == [4, 4, 4, 4, 2, 2]
    assert ColorMode.RGB565_LE.endian is Endian.LITTLE


@pytest.mark.parametrize("name", NAMES)
def test_by_name(name):
    assert ColorMode.by_name(name).canonical_name == name
    assert ColorMode.by_name(f" {name.upper()} ").canonical_name == name


def test_by_name_unknown():
    with pytest.raises(UnknownColorMode):
        ColorMode.by_name("argb")


def test_from_filename_suffix():
    assert ColorMode.from_filename_suffix("logo_001_rgb565le.png") is ColorMode.RGB565_LE
    assert ColorMode.from_filename_suffix("logo_001_bgrale.png") is ColorMode.BGRA_LE
    assert ColorMode.from_filename_suffix("logo_001_raw.z") is None


@pytest.mark.parametrize("mode", list(ColorMode))
@pytest.mark.parametrize("slot", [0, 7, 42, 1234])
def test_png_filename_round_trip(mode, slot):
    info = FileInfo(slot, ContentType.png(mode))
    assert FileInfo.from_name(info.filename()) == info


def test_z_filename_round_trip():
    info = FileInfo.from_info(3, True, ColorMode.RGBA_BE)
    assert info.filename() == "logo_003_raw.z"
    assert FileInfo.from_name(info.filename()) == info


def test_filename_format():
    assert FileInfo.from_info(5, False, ColorMode.BGRA_BE).filename() == "logo_005_bgrabe.png"


def test_from_name_ignores_directories():
    info = FileInfo.from_name("/tmp/some_dir/logo_012_rgbale.png")
    assert info.id == 12
    assert info.content_type.mode is ColorMode.RGBA_LE


@pytest.mark.parametrize("name", [
    "logo.png",
    "logo_abc_rgbabe.png",
    "logo_001_argb.png",
    "logo_001_raw.gz",
])
def test_from_name_errors(name):
    with pytest.raises(NamingError):
        FileInfo.from_name(name)
