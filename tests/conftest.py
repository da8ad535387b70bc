import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import gigsheets
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from gigsheets.layout import LayoutConstants  # noqa: E402


# Common test fixtures
@pytest.fixture
def mm_layout():
    """Layout where one image pixel is one millimetre."""
    return LayoutConstants(image_dpi=25.4)


@pytest.fixture
def make_image():
    """Factory writing a white image with an optional black content box."""
    def _create(path: Path, size=(100, 50), box=None, mode="RGB"):
        img = Image.new(mode, size, color="white")
        if box is not None:
            img.paste("black", box)
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path)
        return path
    return _create


@pytest.fixture
def project(tmp_path: Path, make_image):
    """
    A small gigsheets project:

        config.yaml
        images/ballad.png            (content box, needs cropping)
        images/rocker.png
        images/rocker-acoustic.png
        gigs/friday.yaml
    """
    make_image(tmp_path / "images" / "ballad.png", size=(120, 80), box=(10, 10, 110, 60))
    make_image(tmp_path / "images" / "rocker.png", size=(60, 40), box=(0, 0, 60, 40))
    make_image(tmp_path / "images" / "rocker-acoustic.png", size=(60, 40), box=(0, 0, 60, 40))

    (tmp_path / "config.yaml").write_text(
        "imageFolder: images\n"
        "gigsFolder: gigs\n"
        "outputFolder: output\n"
        "songs:\n"
        "  - nickname: ballad\n"
        "    image: ballad.png\n"
        "  - nickname: rocker\n"
        "    images:\n"
        "      default: rocker.png\n"
        "      acoustic: rocker-acoustic.png\n",
        encoding="utf-8",
    )

    gigs = tmp_path / "gigs"
    gigs.mkdir()
    (gigs / "friday.yaml").write_text(
        "name: Friday Night\n"
        "sets:\n"
        "  - name: Set 1\n"
        "    songs: [ballad, rocker#acoustic]\n"
        "  - name: Set 2\n"
        "    songs: [rocker, unknown]\n",
        encoding="utf-8",
    )
    return tmp_path
