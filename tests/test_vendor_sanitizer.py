"""
Tests for the vendors sanitizer.
"""
import pytest

from app.schemas.wedding import VendorStatus, VendorType
from app.services.sanitizers.vendor_sanitizer import sanitize_vendors, vendor_key


class TestVendorKey:
    def test_lowercases_name(self):
        assert vendor_key(VendorType.PHOTOGRAPHER, "Lens & Co") == "photographer:lens & co"
        assert vendor_key("dj", "DJ Spin") == "dj:dj spin"


class TestSanitizeVendors:

    def test_full_vendor(self):
        result = sanitize_vendors([{
            "vendor_type": "photo",
            "vendor_name": " Lens & Co ",
            "vendor_contact_name": "Sam",
            "vendor_email": "sam@lens.co",
            "vendor_phone": "+1 555 123 4567",
            "total_cost": "$3,000",
            "deposit_amount": 500,
            "deposit_paid": "yes",
            "deposit_date": "2025-03-01",
            "balance_due": "2500",
            "final_payment_date": "2025-09-01",
            "final_payment_paid": "unpaid",
            "status": "Booked",
            "contract_signed": True,
            "contract_date": "2025-02-20",
            "service_date": "2025-09-20",
            "notes": "Second shooter included",
        }])

        assert result.warnings == []
        assert len(result.sanitized) == 1
        vendor = result.sanitized[0]
        assert vendor.vendor_type is VendorType.PHOTOGRAPHER
        assert vendor.vendor_name == "Lens & Co"
        assert vendor.total_cost == 3000
        assert vendor.deposit_amount == 500
        assert vendor.deposit_paid is True
        assert vendor.balance_due == 2500
        assert vendor.final_payment_paid is False
        assert vendor.status is VendorStatus.BOOKED
        assert vendor.contract_signed is True
        assert vendor.service_date == "2025-09-20"
        assert vendor.notes == "Second shooter included"

    def test_type_and_name_only_is_kept(self):
        result = sanitize_vendors([{"vendor_type": "florist", "vendor_name": "Petals"}])

        assert len(result.sanitized) == 1
        assert result.sanitized[0].total_cost is None
        assert result.warnings == []

    def test_duplicate_keeps_first(self):
        result = sanitize_vendors([
            {"vendor_type": "photographer", "vendor_name": "Lens & Co", "total_cost": 3000},
            {"vendor_type": "photography", "vendor_name": "LENS & CO", "total_cost": 9999},
        ])

        assert len(result.sanitized) == 1
        assert result.sanitized[0].total_cost == 3000
        assert result.warnings == ['Skipped vendor "LENS & CO" (photographer): duplicate entry.']

    def test_same_name_different_type_kept(self):
        result = sanitize_vendors([
            {"vendor_type": "venue", "vendor_name": "The Barn"},
            {"vendor_type": "caterer", "vendor_name": "The Barn"},
        ])

        assert len(result.sanitized) == 2

    def test_item_rejections_do_not_stop_processing(self):
        result = sanitize_vendors([
            "Lens & Co",
            {"vendor_type": "photo"},
            {"vendor_type": "astrologer", "vendor_name": "Stars"},
            {"vendor_type": "dj", "vendor_name": "Spin"},
        ])

        assert [v.vendor_name for v in result.sanitized] == ["Spin"]
        assert result.warnings == [
            "Skipped vendor at index 0: expected object.",
            "Skipped vendor at index 1: missing vendor_name.",
            'Skipped vendor "Stars": unsupported vendor_type "astrologer".',
        ]

    def test_deposit_clamped_to_total(self):
        result = sanitize_vendors([{
            "vendor_type": "caterer",
            "vendor_name": "Feast",
            "total_cost": 4000,
            "deposit_amount": "$5,000",
        }])

        assert result.sanitized[0].deposit_amount == 4000
        assert result.warnings == ['Adjusted deposit for vendor "Feast" to not exceed total_cost.']

    def test_deposit_without_total_not_clamped(self):
        result = sanitize_vendors([{
            "vendor_type": "caterer",
            "vendor_name": "Feast",
            "deposit_amount": 5000,
        }])

        assert result.sanitized[0].deposit_amount == 5000
        assert result.warnings == []

    def test_unsupported_status_dropped(self):
        result = sanitize_vendors([{
            "vendor_type": "baker",
            "vendor_name": "Sweet Tiers",
            "status": "thinking about it",
        }])

        assert result.sanitized[0].status is None
        assert result.warnings == [
            'Dropped unsupported status "thinking about it" for vendor "Sweet Tiers".'
        ]

    def test_invalid_optional_fields_dropped_individually(self):
        result = sanitize_vendors([{
            "vendor_type": "dj",
            "vendor_name": "Spin",
            "vendor_email": "not-an-email",
            "deposit_date": "next week",
            "deposit_paid": "kind of",
            "total_cost": 1200,
        }])

        vendor = result.sanitized[0]
        assert vendor.vendor_email is None
        assert vendor.deposit_date is None
        assert vendor.deposit_paid is None
        assert vendor.total_cost == 1200
        assert result.warnings == [
            'Dropped invalid vendor_email "not-an-email" for vendor "Spin".',
            'Dropped invalid deposit_paid "kind of" for vendor "Spin".',
            'Dropped invalid deposit_date "next week" for vendor "Spin".',
        ]

    @pytest.mark.parametrize("vendors", [None, {}, "photographer", 0])
    def test_non_list_input(self, vendors):
        result = sanitize_vendors(vendors)

        assert result.sanitized == []
        assert result.warnings == []

    def test_vendors_are_immutable(self):
        vendor = sanitize_vendors([{"vendor_type": "dj", "vendor_name": "Spin"}]).sanitized[0]

        with pytest.raises(Exception):
            vendor.vendor_name = "Other"
