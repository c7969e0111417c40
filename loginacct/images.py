"""Storing, loading and exporting account profile images."""

from __future__ import annotations

import base64
import binascii
import io
import sqlite3
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from loginacct.database import DatabaseError

EXPORT_NAME = "Image_From_Database.jpg"

_FORMATS = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG", "gif": "GIF"}


class ImageError(Exception):
    """Raised when an image cannot be loaded, stored or retrieved."""


@dataclass(frozen=True)
class StoredImage:
    """An image as kept in the database: its file name and base64 data."""

    name: str
    data: bytes

    def decode(self) -> Image.Image:
        """Decode the stored data using the format given by the name's suffix."""
        fmt = _FORMATS.get(Path(self.name).suffix.lstrip(".").lower())
        if fmt is None:
            raise ImageError("Image Does Not Exist")
        try:
            raw = base64.b64decode(self.data, validate=False)
            image = Image.open(io.BytesIO(raw), formats=[fmt])
            image.load()
        except (binascii.Error, OSError, UnidentifiedImageError) as exc:
            raise ImageError("Failed to load image") from exc
        return image


def fit_size(width: int, height: int, max_width: int, max_height: int) -> Tuple[int, int]:
    """Return the size to show an image at within a box.

    An image that fits is left as it is; a larger one is scaled down,
    keeping its aspect ratio.
    """
    if width <= max_width and height <= max_height:
        return width, height
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    scaled_width = max_height * width // height
    if scaled_width <= max_width:
        return scaled_width, max_height
    return max_width, max_width * height // width


def encode_image(path: Union[str, "PathLike[str]"]) -> Tuple[str, bytes]:
    """Load the image at *path* and return its file name and base64 data."""
    path = Path(path)
    fmt = _FORMATS.get(path.suffix.lstrip(".").lower())
    try:
        with Image.open(path) as image:
            image.load()
            buffer = io.BytesIO()
            save_as = fmt or image.format
            if save_as == "JPEG" and image.mode not in ("RGB", "L", "CMYK"):
                image = image.convert("RGB")
            image.save(buffer, format=save_as)
    except (OSError, UnidentifiedImageError, KeyError, ValueError) as exc:
        raise ImageError("Failed to load image") from exc
    return path.name, base64.b64encode(buffer.getvalue())


def store_image(
    conn: sqlite3.Connection, username: str, path: Union[str, "PathLike[str]"]
) -> bool:
    """Save the image at *path* as the profile image of *username*.

    Returns False when there is no such user.
    """
    name, data = encode_image(path)
    try:
        with conn:
            exists = conn.execute(
                "SELECT * FROM UserInfo WHERE username = :username",
                {"username": username},
            ).fetchone()
            if exists is None:
                return False
            conn.execute(
                "UPDATE UserInfo SET Image_Name = :name, Image_Data = :data "
                "WHERE username = :username",
                {"name": name, "data": data, "username": username},
            )
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
    return True


def load_image(conn: sqlite3.Connection, username: str) -> StoredImage:
    """Return the stored image of *username*."""
    try:
        row = conn.execute(
            "SELECT Image_Name, Image_Data FROM UserInfo WHERE username = :username",
            {"username": username},
        ).fetchone()
    except sqlite3.Error as exc:
        raise ImageError("Failed to retrieve image") from exc
    if row is None:
        raise ImageError("Failed to retrieve image")
    name, data = row[0], row[1]
    if isinstance(data, str):
        data = data.encode("ascii")
    return StoredImage(name or "", data or b"")


def export_image(
    conn: sqlite3.Connection,
    username: str,
    destination: Optional[Union[str, "PathLike[str]"]] = None,
) -> Path:
    """Write the stored image of *username* as a JPEG file and return its path."""
    target = Path(destination) if destination is not None else Path(EXPORT_NAME)
    image = load_image(conn, username).decode()
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    try:
        image.save(target, format="JPEG")
    except OSError as exc:
        raise ImageError(f"Cannot write {target}") from exc
    return target