import base64

import pytest
from PIL import Image

from loginacct.accounts import AccountForm, create_account
from loginacct.database import ensure_schema, open_database
from loginacct.images import (
    ImageError,
    StoredImage,
    encode_image,
    export_image,
    fit_size,
    load_image,
    store_image,
)


@pytest.fixture
def conn(tmp_path):
    connection = open_database(tmp_path / "accounts.db")
    ensure_schema(connection)
    password = "password"
    create_account(
        connection,
        AccountForm("Alice Doe", "alice", password, "Bob Doe", "Carol Doe"),
    )
    yield connection
    connection.close()


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "avatar.png"
    Image.new("RGB", (8, 4), (10, 20, 30)).save(path)
    return path


def test_fit_size_keeps_small_image():
    assert fit_size(50, 40, 100, 100) == (50, 40)


def test_fit_size_scales_wide_image():
    assert fit_size(200, 100, 100, 100) == (100, 50)


def test_fit_size_stays_within_box_and_touches_it():
    for w, h in [(300, 90), (90, 300), (1000, 1000), (101, 7)]:
        fw, fh = fit_size(w, h, 100, 80)
        assert fw <= 100 and fh <= 80
        assert fw == 100 or fh == 80


def test_encode_image_round_trip(png_path):
    name, data = encode_image(png_path)
    assert name == "avatar.png"
    image = StoredImage(name, data).decode()
    assert image.size == (8, 4)
    assert image.getpixel((0, 0)) == (10, 20, 30)


def test_encode_image_rejects_non_image(tmp_path):
    bogus = tmp_path / "note.png"
    bogus.write_text("not an image", encoding="utf-8")
    with pytest.raises(ImageError):
        encode_image(bogus)


def test_decode_rejects_unknown_extension(png_path):
    _, data = encode_image(png_path)
    with pytest.raises(ImageError):
        StoredImage("avatar.bmp", data).decode()


def test_decode_rejects_bad_data():
    with pytest.raises(ImageError):
        StoredImage("x.png", base64.b64encode(b"garbage")).decode()


def test_store_and_load_image(conn, png_path):
    assert store_image(conn, "alice", png_path) is True
    stored = load_image(conn, "alice")
    assert stored.name == "avatar.png"
    assert stored.decode().getpixel((7, 3)) == (10, 20, 30)


def test_store_image_unknown_user(conn, png_path):
    assert store_image(conn, "nobody", png_path) is False


def test_load_image_unknown_user(conn):
    with pytest.raises(ImageError):
        load_image(conn, "nobody")


def test_load_image_without_image_cannot_decode(conn):
    stored = load_image(conn, "alice")
    assert stored.name == ""
    with pytest.raises(ImageError):
        stored.decode()


def test_export_image_writes_jpeg(conn, png_path, tmp_path):
    store_image(conn, "alice", png_path)
    target = export_image(conn, "alice", tmp_path / "out.jpg")
    assert target == tmp_path / "out.jpg"
    with Image.open(target) as image:
        assert image.format == "JPEG"
        assert image.size == (8, 4)