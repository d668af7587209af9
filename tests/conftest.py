import importlib.util
import io
from pathlib import Path

import pytest
from PIL import Image

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(relative_path, module_name):
    # Script folders use hyphens, so they cannot be imported by name.
    spec = importlib.util.spec_from_file_location(module_name, SCRIPTS_DIR / relative_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def bold_script():
    return _load_script("inline-code-to-bold/inline_code_to_bold.py", "inline_code_to_bold")


@pytest.fixture
def jpeg_script():
    return _load_script("png-to-jpeg/png_to_jpeg.py", "png_to_jpeg")


def make_png_bytes(mode="RGB", size=(8, 8), color=(200, 30, 30)):
    if mode == "L":
        color = 128
    elif mode == "P":
        color = 1
    elif mode == "RGBA" and len(color) == 3:
        color = color + (128,)
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def make_png():
    return make_png_bytes


@pytest.fixture
def png_bytes():
    return make_png_bytes()


@pytest.fixture
def write_png():
    def _write(path, mode="RGB"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(make_png_bytes(mode))
        return path

    return _write
