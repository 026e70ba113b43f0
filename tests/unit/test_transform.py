"""
Tests for image transform URL building.
"""

import pytest

from stack0 import ConfigurationError
from stack0.cdn import ALLOWED_WIDTHS, TransformOptions, build_transform_url, nearest_width


class TestNearestWidth:
    @pytest.mark.parametrize(
        "width, expected",
        [(100, 256), (256, 256), (700, 750), (1100, 1080), (1500, 1200), (4000, 3840)],
    )
    def test_snapping(self, width, expected):
        assert nearest_width(width) == expected

    def test_tie_prefers_smaller(self):
        assert nearest_width(320) == 256

    @pytest.mark.parametrize("width", [1, 500, 999, 1950, 10000])
    def test_result_is_allowed(self, width):
        assert nearest_width(width) in ALLOWED_WIDTHS


class TestBuildTransformURL:
    def test_no_options_returns_plain_url(self):
        url = "https://cdn.example.com/images/a.jpg"
        assert build_transform_url(url) == url
        assert build_transform_url(url, TransformOptions()) == url

    def test_full_url_drops_existing_query(self):
        url = build_transform_url(
            "https://cdn.example.com/a.jpg?v=2#top", TransformOptions(width=1100)
        )
        assert url == "https://cdn.example.com/a.jpg?w=1080"

    def test_storage_key_uses_cdn_url(self):
        url = build_transform_url(
            "org/prj/a.jpg", TransformOptions(format="webp"), "https://cdn.example.com/"
        )
        assert url == "https://cdn.example.com/org/prj/a.jpg?f=webp"

    def test_storage_key_without_cdn_url(self):
        with pytest.raises(ConfigurationError):
            build_transform_url("org/prj/a.jpg", TransformOptions(width=640))

    def test_parameters_are_sorted_and_mapped(self):
        options = TransformOptions(
            width=800,
            height=600,
            fit="cover",
            quality=80,
            crop_x=10,
            grayscale=True,
            flip=True,
            flop=True,
        )
        url = build_transform_url("https://cdn.example.com/a.jpg", options)

        assert url == (
            "https://cdn.example.com/a.jpg"
            "?crop-x=10&fit=cover&flip=y&flop=x&grayscale=true&h=600&q=80&w=828"
        )

    def test_is_deterministic(self):
        options = TransformOptions(width=640, blur=5, rotate=90, saturation=-20)
        first = build_transform_url("https://cdn.example.com/a.jpg", options)
        second = build_transform_url("https://cdn.example.com/a.jpg", options)
        assert first == second

    def test_false_flags_are_omitted(self):
        url = build_transform_url(
            "https://cdn.example.com/a.jpg", TransformOptions(width=256, grayscale=False)
        )
        assert url == "https://cdn.example.com/a.jpg?w=256"


class TestCDNClientTransformURL:
    @pytest.mark.asyncio
    async def test_accepts_keyword_options(self, client):
        url = client.cdn.get_transform_url("org/a.png", width=1100, format="avif")
        assert url == "https://cdn.test/org/a.png?f=avif&w=1080"

    @pytest.mark.asyncio
    async def test_makes_no_request(self, client, transport):
        client.cdn.get_transform_url("https://cdn.example.com/a.jpg", width=256)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_rejects_options_and_keywords(self, client):
        with pytest.raises(TypeError):
            client.cdn.get_transform_url("org/a.png", TransformOptions(width=256), format="avif")

    @pytest.mark.asyncio
    async def test_accepts_options_model(self, client):
        url = client.cdn.get_transform_url("org/a.png", TransformOptions(width=700))
        assert url == "https://cdn.test/org/a.png?w=750"
