"""
Tests for the wedding profile (wedding_info) sanitizer.
"""
import pytest

from app.services.sanitizers.profile_sanitizer import PROFILE_FIELDS, sanitize_wedding_info


class TestSanitizeWeddingInfo:

    def test_normalizes_recognized_fields(self):
        result = sanitize_wedding_info({
            "wedding_date": "2025-09-20",
            "wedding_time": "5:30pm",
            "expected_guest_count": "150",
            "total_budget": "$25,000",
            "venue_cost": 8000.4,
            "partner1_name": "  Alex ",
            "venue_name": "The Barn",
        })

        assert result.sanitized == {
            "wedding_date": "2025-09-20",
            "wedding_time": "17:30",
            "expected_guest_count": 150,
            "total_budget": 25000,
            "venue_cost": 8000,
            "partner1_name": "Alex",
            "venue_name": "The Barn",
        }
        assert result.warnings == []

    def test_unknown_keys_dropped_silently(self):
        result = sanitize_wedding_info({
            "wedding_style": "rustic",
            "favorite_song": "Dancing Queen",
            "__proto__": {"admin": True},
        })

        assert result.sanitized == {"wedding_style": "rustic"}
        assert result.warnings == []

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_values_skipped_without_warning(self, value):
        result = sanitize_wedding_info({"wedding_date": value, "partner2_name": value})

        assert result.sanitized == {}
        assert result.warnings == []

    def test_invalid_value_omitted_with_warning(self):
        result = sanitize_wedding_info({
            "wedding_date": "2025-02-30",
            "expected_guest_count": "lots",
            "total_budget": "-5",
            "wedding_time": "sunset",
            "color_scheme_primary": "sage",
        })

        assert result.sanitized == {"color_scheme_primary": "sage"}
        assert result.warnings == [
            'Ignored wedding_date: expected YYYY-MM-DD, received "2025-02-30".',
            'Ignored expected_guest_count: expected whole number, received "lots".',
            'Ignored total_budget: expected positive currency, received "-5".',
            'Ignored wedding_time: unrecognized time "sunset".',
        ]

    def test_non_text_for_text_field_warns(self):
        result = sanitize_wedding_info({"partner1_name": 42})

        assert "partner1_name" not in result.sanitized
        assert result.warnings == ['Ignored partner1_name: expected non-empty text, received "42".']

    def test_rejected_key_never_present_as_null(self):
        result = sanitize_wedding_info({"wedding_date": "soon"})

        assert "wedding_date" not in result.sanitized

    @pytest.mark.parametrize("fragment", [None, [], "wedding", 3])
    def test_non_object_fragment(self, fragment):
        result = sanitize_wedding_info(fragment)

        assert result.sanitized == {}
        assert result.warnings == []

    def test_output_keys_subset_of_recognized(self):
        fragment = {key: "x" for key in PROFILE_FIELDS}
        fragment["extra"] = "y"

        result = sanitize_wedding_info(fragment)

        assert set(result.sanitized) <= PROFILE_FIELDS
