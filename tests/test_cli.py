from PIL import Image as PILImage

from rfarbfeld import Image, Pixel, load, save
from rfarbfeld.app.cli import main


def _write_sample(tmp_path):
    path = tmp_path / "sample.ff"
    save(Image(2, 1, [Pixel(1, 2, 3, 4), Pixel(0xFFFF, 0, 0, 0xFFFF)]), str(path))
    return str(path)


def test_describe(tmp_path, capsys):
    path = _write_sample(tmp_path)
    assert main([path]) == 0
    assert capsys.readouterr().out.strip() == "2x1 (2 pixels)"


def test_pixel_lookup(tmp_path, capsys):
    path = _write_sample(tmp_path)
    assert main([path, "--pixel", "0", "0"]) == 0
    assert capsys.readouterr().out.strip() == "red=1 green=2 blue=3 alpha=4"


def test_pixel_outside_image(tmp_path, capsys):
    path = _write_sample(tmp_path)
    assert main([path, "--pixel", "2", "0"]) == 2
    assert "outside" in capsys.readouterr().err


def test_decode_error_exit_code(tmp_path, capsys):
    path = tmp_path / "broken.ff"
    path.write_bytes(b"farb")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("truncated_header:")


def test_missing_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ff")]) == 1
    assert capsys.readouterr().err.startswith("io_error:")


def test_to_png(tmp_path):
    path = _write_sample(tmp_path)
    out = tmp_path / "out.png"
    assert main([path, "--to-png", str(out)]) == 0
    with PILImage.open(out) as img:
        assert img.size == (2, 1)
        assert img.convert("RGBA").getpixel((1, 0)) == (255, 0, 0, 255)


def test_from_image(tmp_path):
    source = tmp_path / "in.png"
    PILImage.new("RGB", (1, 2), (255, 255, 255)).save(source)
    out = tmp_path / "out.ff"
    assert main([str(out), "--from-image", str(source)]) == 0
    image = load(str(out))
    assert image.size == (1, 2)
    assert image.get(1) == Pixel(0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)


def test_from_image_conflicts_with_png(tmp_path, capsys):
    assert main([str(tmp_path / "x.ff"), "--from-image", "a.png", "--to-png", "b.png"]) == 2
    assert "--from-image" in capsys.readouterr().err


def test_max_prealloc_flag(tmp_path, capsys):
    path = _write_sample(tmp_path)
    assert main([path, "--max-prealloc", "0", "--verbose"]) == 0
    assert "2x1" in capsys.readouterr().out
