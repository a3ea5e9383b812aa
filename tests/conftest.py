import io

import numpy as np
import pytest
from PIL import Image

from mtklogo import zlib_io


def random_rgba(w, h, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(h, w, 4), dtype=np.uint8).tobytes()


def png_bytes(rgba, w, h):
    out = io.BytesIO()
    Image.frombytes("RGBA", (w, h), rgba).save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def rgba_4x3():
    return random_rgba(4, 3, seed=1)


@pytest.fixture
def blobs():
    return [zlib_io.deflate(random_rgba(4, 2, seed=i)) for i in range(3)]


@pytest.fixture
def profile_yaml(tmp_path):
    path = tmp_path / "mtklogo.yaml"
    path.write_text(
        "version: '1'\n"
        "profiles:\n"
        "  - name: test\n"
        "    color_model: rgbabe\n"
        "    alias: [t]\n"
        "    formats:\n"
        "      - {w: 4, h: 2, t: small}\n"
        "      - {w: 3, h: 5}\n",
        encoding="utf-8",
    )
    return path
