"""Tests for QR image URL construction and payload recovery."""

import pytest

from qr_directions.domain.errors import ClipboardError
from qr_directions.domain.policies.deep_link import build_from_address, build_from_coordinates
from qr_directions.domain.policies.qr_payload import build_image_url, extract_payload


def test_build_image_url_default_size():
    url = build_image_url("https://www.google.com/maps/dir/?api=1&destination=1.5,2.5")
    assert url == (
        "https://api.qrserver.com/v1/create-qr-code/?size=200x200"
        "&data=https%3A%2F%2Fwww.google.com%2Fmaps%2Fdir%2F%3Fapi%3D1%26destination%3D1.5%2C2.5"
    )


def test_build_image_url_custom_size():
    assert "size=300x300&" in build_image_url("x", size=300)


@pytest.mark.parametrize(
    "link",
    [
        build_from_coordinates(48.8584, 2.2945),
        build_from_address("asdkfjalksdjf nonexistent place xyz"),
        build_from_address("Café + Bar, Straße 5 & Co"),
    ],
)
def test_extract_payload_recovers_link(link):
    assert extract_payload(build_image_url(link)) == link


def test_extract_payload_without_data_raises():
    with pytest.raises(ClipboardError):
        extract_payload("https://api.qrserver.com/v1/create-qr-code/?size=200x200")


def test_extract_payload_from_non_url_raises():
    with pytest.raises(ClipboardError):
        extract_payload("not a url")
