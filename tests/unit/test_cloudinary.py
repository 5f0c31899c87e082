#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for Cloudinary URL optimization."""

import pytest

from lex2html.utils.cloudinary import generate_srcset, is_cloudinary_url, optimize_cloudinary_url

BASE = "https://res.cloudinary.com/demo/image/upload"
FLAGS = "q_auto:good,f_auto,fl_progressive,fl_strip_profile"


@pytest.mark.unit
class TestOptimizeCloudinaryUrl:
    """Test delivery URL rewriting."""

    def test_non_cloudinary_url_unchanged(self) -> None:
        """Test that other hosts pass through."""
        assert optimize_cloudinary_url("https://example.com/a.png", width=800) == "https://example.com/a.png"

    def test_width_and_height(self) -> None:
        """Test sizing transformations ahead of the default flags."""
        result = optimize_cloudinary_url(f"{BASE}/v123/folder/cat.jpg", width=800, height=600)
        assert result == f"{BASE}/w_800,h_600,{FLAGS}/v123/folder/cat.jpg"

    def test_height_requires_width(self) -> None:
        """Test that a height alone is not applied."""
        result = optimize_cloudinary_url(f"{BASE}/cat.jpg", height=600)
        assert result == f"{BASE}/{FLAGS}/cat.jpg"

    def test_max_width_fallback(self) -> None:
        """Test that max_width is used when no width is known."""
        result = optimize_cloudinary_url(f"{BASE}/cat.jpg", max_width=1200)
        assert result.startswith(f"{BASE}/w_1200,")

    def test_existing_transformations_chained(self) -> None:
        """Test that transformations already in the URL are kept after ours."""
        result = optimize_cloudinary_url(f"{BASE}/c_fill,g_face/cat.jpg", width=400)
        assert result == f"{BASE}/w_400,{FLAGS},c_fill,g_face/cat.jpg"

    def test_url_without_upload_path(self) -> None:
        """Test that URLs without a delivery path are left alone."""
        url = "https://res.cloudinary.com/demo/"
        assert optimize_cloudinary_url(url, width=400) == url

    def test_fractional_width(self) -> None:
        """Test that whole floats are written without a decimal part."""
        assert "/w_640," in optimize_cloudinary_url(f"{BASE}/cat.jpg", width=640.0)


@pytest.mark.unit
class TestGenerateSrcset:
    """Test responsive srcset generation."""

    def test_is_cloudinary_url(self) -> None:
        """Test host detection."""
        assert is_cloudinary_url(f"{BASE}/cat.jpg")
        assert not is_cloudinary_url("https://example.com/cat.jpg")

    def test_all_widths(self) -> None:
        """Test the full candidate list."""
        srcset = generate_srcset(f"{BASE}/cat.jpg")
        widths = [candidate.rsplit(" ", 1)[1] for candidate in srcset.split(", ")]
        assert widths == ["400w", "800w", "1200w", "1600w", "2000w"]

    def test_limited_by_max_width(self) -> None:
        """Test that candidates wider than the image are dropped."""
        srcset = generate_srcset(f"{BASE}/cat.jpg", max_width=1000)
        assert srcset == f"{BASE}/w_400,{FLAGS}/cat.jpg 400w, {BASE}/w_800,{FLAGS}/cat.jpg 800w"

    def test_non_cloudinary_url(self) -> None:
        """Test that other hosts get no srcset."""
        assert generate_srcset("https://example.com/cat.jpg") == ""
