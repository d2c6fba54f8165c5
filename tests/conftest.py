import pytest

from eve_image_server.services.image_server import ImageServer


@pytest.fixture
def server():
    return ImageServer()
