"""Unit tests for budget approval rules."""

from decimal import Decimal

from marketing_budget.models.budget import Budget, BudgetLineItem
from marketing_budget.validators.budget_validators import (
    ADDRESS_REQUIRED,
    ITEM_PRICES_REQUIRED,
    LINE_ITEMS_REQUIRED,
    SCHEDULE_REQUIRED,
    SELECTED_ITEMS_REQUIRED,
    check_address,
    check_item_prices,
    validate_for_approval,
)


class TestApprovalRules:
    """Test the individual approval rules."""

    def test_valid_budget_passes(self, approvable_budget):
        """Test that a complete budget has no issues."""
        result = validate_for_approval(approvable_budget)
        assert result.is_valid
        assert result.errors == []

    def test_whitespace_address_fails(self, approvable_budget):
        """Test that the address is trimmed before checking."""
        approvable_budget.property_address = "   "
        issue = check_address(approvable_budget)
        assert issue.rule == ADDRESS_REQUIRED
        assert issue.message == "Property address is required."

    def test_single_unpriced_item_message(self, approvable_budget):
        """Test the singular unpriced-item message."""
        approvable_budget.line_items[0] = BudgetLineItem(service_id=1)
        issue = check_item_prices(approvable_budget)
        assert issue.rule == ITEM_PRICES_REQUIRED
        assert issue.message == (
            "1 selected line item has no price. Set a price or deselect it."
        )

    def test_several_unpriced_items_message(self, approvable_budget):
        """Test the plural unpriced-item message."""
        approvable_budget.line_items = [
            BudgetLineItem(service_id=1, schedule_price=0),
            BudgetLineItem(service_id=2),
        ]
        issue = check_item_prices(approvable_budget)
        assert issue.message.startswith("2 selected line items have no price.")
        assert issue.message.endswith("deselect them.")

    def test_unselected_unpriced_item_ignored(self, approvable_budget):
        """Test that only selected lines need a price."""
        approvable_budget.line_items.append(
            BudgetLineItem(service_id=3, is_selected=False)
        )
        assert check_item_prices(approvable_budget) is None

    def test_zero_override_counts_as_unpriced(self, approvable_budget):
        """Test that an override to 0 leaves the line without a price."""
        approvable_budget.line_items[1] = approvable_budget.line_items[1].with_override(
            Decimal("0")
        )
        assert check_item_prices(approvable_budget) is not None


class TestValidateForApproval:
    """Test running all rules together."""

    def test_all_failures_collected(self):
        """Test that every failing rule is reported, in rule order."""
        result = validate_for_approval(Budget())

        assert [issue.rule for issue in result.errors] == [
            ADDRESS_REQUIRED,
            LINE_ITEMS_REQUIRED,
            SELECTED_ITEMS_REQUIRED,
            SCHEDULE_REQUIRED,
        ]
        assert result.error_count == 4

    def test_nothing_selected(self, approvable_budget):
        """Test a budget whose lines are all deselected."""
        for item in approvable_budget.line_items:
            item.is_selected = False
        result = validate_for_approval(approvable_budget)

        assert [issue.rule for issue in result.errors] == [SELECTED_ITEMS_REQUIRED]

    def test_validation_does_not_mutate(self, approvable_budget):
        """Test that validation leaves the budget unchanged."""
        before = approvable_budget.model_copy(deep=True)
        validate_for_approval(approvable_budget)
        assert approvable_budget == before
