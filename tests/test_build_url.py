import pytest

from eve_image_server import BASE_URL, VALID_SIZES, Category, Tenant, Variation, build_url
from eve_image_server.services.image_server import is_valid_size, resolve_size


def test_build_url_exact_format():
    url = build_url("characters", 1338057886, "portrait", 128, "tranquility")

    assert url == "https://images.evetech.net/characters/1338057886/portrait?size=128&tenant=tranquility"


@pytest.mark.parametrize("size", VALID_SIZES)
def test_valid_sizes_are_kept(size):
    url = build_url("types", 587, "icon", size, "tranquility")

    assert f"size={size}&" in url


@pytest.mark.parametrize("size", [999, 100, 0, -1, 2048, True, 128.0, "128", None])
def test_invalid_sizes_fall_back_to_default(size):
    url = build_url("types", 587, "icon", size, "tranquility")

    assert "?size=128&" in url


def test_alliance_custom_size():
    assert "size=64" in build_url("alliances", 434243723, "logo", 64, "tranquility")


def test_tenant_substitution_changes_only_tenant():
    tq = build_url("characters", 1338057886, "portrait", 256, "tranquility")
    sisi = build_url("characters", 1338057886, "portrait", 256, "singularity")

    assert sisi.endswith("tenant=singularity")
    assert sisi == tq.replace("tenant=tranquility", "tenant=singularity")


def test_enum_members_render_as_values():
    url = build_url(Category.TYPES, 11568, Variation.BLUEPRINT_COPY, 64, Tenant.SINGULARITY)

    assert url == "https://images.evetech.net/types/11568/bpc?size=64&tenant=singularity"


def test_unknown_tenant_passes_through_form_encoded():
    url = build_url("types", 587, "icon", 32, "my realm&x=1")

    assert url.endswith("?size=32&tenant=my+realm%26x%3D1")


def test_category_and_variation_are_not_validated():
    url = build_url("ships", 0, "hologram", 64, "tranquility")

    assert url == f"{BASE_URL}/ships/0/hologram?size=64&tenant=tranquility"


def test_negative_id_rendered_verbatim():
    assert "/corporations/-5/logo?" in build_url("corporations", -5, "logo", 128, "tranquility")


def test_custom_base_url():
    url = build_url("types", 587, "render", 512, "tranquility", base_url="http://localhost:8080")

    assert url == "http://localhost:8080/types/587/render?size=512&tenant=tranquility"


def test_build_url_is_deterministic():
    args = ("alliances", 434243723, "logo", 999, "singularity")

    assert build_url(*args) == build_url(*args)


def test_size_helpers():
    assert is_valid_size(1024)
    assert not is_valid_size(1000)
    assert not is_valid_size(True)
    assert resolve_size(32) == 32
    assert resolve_size(33) == 128


def test_size_fallback_logged_at_debug(caplog):
    with caplog.at_level("DEBUG", logger="eve_image_server.services.image_server"):
        build_url("types", 587, "icon", 999, "tranquility")

    assert [r.levelname for r in caplog.records] == ["DEBUG"]


def test_base_url_trailing_slash_dropped():
    url = build_url("types", 587, "icon", 64, "tranquility", base_url="http://localhost:8080/")

    assert url == "http://localhost:8080/types/587/icon?size=64&tenant=tranquility"


def test_float_id_truncated():
    assert "/characters/1/portrait?" in build_url("characters", 1.9, "portrait", 128, "tranquility")
