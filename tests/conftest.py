"""
Pytest configuration and fixtures for the image enhancer tests.
"""
import io
from types import SimpleNamespace

import pytest
from PIL import Image

from image_enhancer.controller import EnhancerController
from image_enhancer.gemini_client import EnhancementClient


def make_image_bytes(fmt="PNG", color=(255, 255, 255)):
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buf, format=fmt)
    return buf.getvalue()


def make_response(*parts):
    """Mimic the shape of a generate_content response."""
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def image_part(data=b"\xff\xd8jpeg-bytes", mime_type="image/jpeg"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def text_part(text="here you go"):
    return SimpleNamespace(text=text, inline_data=None)


class FakeModels:
    """Stands in for `genai.Client().models` and records every call."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAsyncModels(FakeModels):
    async def generate_content(self, **kwargs):
        return FakeModels.generate_content(self, **kwargs)


class FakeGenaiClient:
    def __init__(self, response=None, error=None):
        self.models = FakeModels(response, error)
        self.aio = SimpleNamespace(models=FakeAsyncModels(response, error))


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_response():
    return make_response(text_part(), image_part())


@pytest.fixture
def fake_genai(jpeg_response):
    return FakeGenaiClient(response=jpeg_response)


@pytest.fixture
def enhancement_client(fake_genai):
    return EnhancementClient(fake_genai, "test-model")


@pytest.fixture
def controller(enhancement_client):
    return EnhancerController(client_factory=lambda: enhancement_client)
