"""Tests for ExportQRUseCase with an in-memory renderer."""

import pytest

from qr_directions.application.use_cases.export_qr import ExportQRUseCase
from qr_directions.domain.errors import ClipboardError, ExportError

LINK = "https://www.google.com/maps/dir/?api=1&destination=48.8584,2.2945"


def test_copy_link_decodes_payload(qr_renderer):
    uc = ExportQRUseCase(qr_renderer=qr_renderer)
    assert uc.copy_link(qr_renderer.image_url(LINK)) == LINK


@pytest.mark.parametrize("reference", [None, ""])
def test_copy_link_without_reference(qr_renderer, reference):
    with pytest.raises(ClipboardError):
        ExportQRUseCase(qr_renderer=qr_renderer).copy_link(reference)


def test_copy_link_without_data_param(qr_renderer):
    with pytest.raises(ClipboardError):
        ExportQRUseCase(qr_renderer=qr_renderer).copy_link("https://qr.test/?size=200x200")


@pytest.mark.asyncio
async def test_download_uses_fixed_filename(qr_renderer):
    uc = ExportQRUseCase(qr_renderer=qr_renderer)
    download = await uc.download(qr_renderer.image_url(LINK))
    assert download.filename == "directions-qr-code.png"
    assert download.media_type == "image/png"
    assert download.content == qr_renderer.png


@pytest.mark.asyncio
async def test_download_without_reference(qr_renderer):
    with pytest.raises(ExportError):
        await ExportQRUseCase(qr_renderer=qr_renderer).download(None)


@pytest.mark.asyncio
async def test_download_fetch_failure_propagates(qr_renderer):
    qr_renderer.fail_fetch = True
    with pytest.raises(ExportError):
        await ExportQRUseCase(qr_renderer=qr_renderer).download(qr_renderer.image_url(LINK))
