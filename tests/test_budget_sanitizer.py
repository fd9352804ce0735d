"""
Tests for the budget_items sanitizer and its merge policy.
"""
import pytest

from app.schemas.wedding import BudgetCategory
from app.services.sanitizers.budget_sanitizer import sanitize_budget_items


class TestSanitizeBudgetItems:

    def test_single_item(self):
        result = sanitize_budget_items([{
            "category": "Floral",
            "budgeted_amount": "$2,000",
            "spent_amount": "$450",
            "transaction_date": "2025-04-02",
            "transaction_amount": 450,
            "transaction_description": " Deposit for bouquets ",
            "notes": "Peonies if in season",
        }])

        assert result.warnings == []
        item = result.sanitized[0]
        assert item.category is BudgetCategory.FLOWERS
        assert item.budgeted_amount == 2000
        assert item.spent_amount == 450
        assert item.transaction_date == "2025-04-02"
        assert item.transaction_amount == 450
        assert item.transaction_description == "Deposit for bouquets"
        assert item.notes == "Peonies if in season"

    def test_same_category_spend_accumulates(self):
        result = sanitize_budget_items([
            {"category": "flowers", "spent_amount": 200},
            {"category": "flowers", "spent_amount": 250},
        ])

        assert len(result.sanitized) == 1
        assert result.sanitized[0].spent_amount == 450
        assert result.warnings == ['Merged duplicate budget category "flowers".']

    def test_synonyms_merge_into_one_category(self):
        result = sanitize_budget_items([
            {"category": "food", "spent_amount": 1000},
            {"category": "Catering", "spent_amount": 500},
        ])

        assert len(result.sanitized) == 1
        assert result.sanitized[0].category is BudgetCategory.CATERING
        assert result.sanitized[0].spent_amount == 1500

    def test_last_non_null_wins_for_other_fields(self):
        result = sanitize_budget_items([
            {
                "category": "venue",
                "budgeted_amount": 10000,
                "transaction_amount": 2000,
                "transaction_description": "Deposit",
                "notes": "first",
            },
            {
                "category": "venue",
                "budgeted_amount": 12000,
                "transaction_description": "Balance",
            },
        ])

        item = result.sanitized[0]
        assert item.budgeted_amount == 12000
        assert item.transaction_amount == 2000
        assert item.transaction_description == "Balance"
        assert item.notes == "first"
        assert item.spent_amount is None

    def test_no_monetary_value_rejected(self):
        result = sanitize_budget_items([
            {"category": "cake", "notes": "Lemon sponge", "transaction_description": "Tasting"},
        ])

        assert result.sanitized == []
        assert result.warnings == [
            'Skipped budget item for category "cake": no monetary values provided.'
        ]

    def test_invalid_amount_counts_as_missing(self):
        result = sanitize_budget_items([{"category": "cake", "spent_amount": "a lot"}])

        assert result.sanitized == []
        assert len(result.warnings) == 1

    def test_unsupported_category_and_non_object(self):
        result = sanitize_budget_items([
            42,
            {"category": "fireworks", "spent_amount": 300},
            {"spent_amount": 300},
            {"category": "music", "spent_amount": 300},
        ])

        assert [item.category for item in result.sanitized] == [BudgetCategory.MUSIC]
        assert result.warnings == [
            "Skipped budget item at index 0: expected object.",
            'Skipped budget item at index 1: unsupported category "fireworks".',
            'Skipped budget item at index 2: unsupported category "null".',
        ]

    def test_invalid_optional_field_dropped_with_warning(self):
        result = sanitize_budget_items([{
            "category": "attire",
            "spent_amount": 900,
            "budgeted_amount": "TBD",
            "transaction_date": "last Tuesday",
        }])

        item = result.sanitized[0]
        assert item.spent_amount == 900
        assert item.budgeted_amount is None
        assert item.transaction_date is None
        assert result.warnings == [
            'Removed invalid budgeted_amount "TBD" for budget category "attire".',
            'Removed invalid transaction_date "last Tuesday" for budget category "attire".',
        ]

    def test_categories_keep_first_seen_order(self):
        result = sanitize_budget_items([
            {"category": "music", "spent_amount": 1},
            {"category": "venue", "spent_amount": 1},
            {"category": "music", "spent_amount": 1},
        ])

        assert [item.category.value for item in result.sanitized] == ["music", "venue"]

    @pytest.mark.parametrize("items", [None, {"category": "venue"}, "venue"])
    def test_non_list_input(self, items):
        result = sanitize_budget_items(items)

        assert result.sanitized == []
        assert result.warnings == []
