"""End-to-end matcher tests on declarative models with the default provider."""

import pytest

from assoc_matchers import (
    assert_association,
    assert_no_association,
    belong_to,
    have_and_belong_to_many,
    have_many,
    have_one,
)
from tests.fixtures.models import Customer, Order


def test_order_belongs_to_customer() -> None:
    """Order belongs to Customer with customer_id on orders."""
    assert_association(Order(), belong_to("customer"))


def test_class_name_mismatch_message() -> None:
    """Expecting class Client when customer resolves to Customer fails."""
    matcher = belong_to("customer").with_class_name("Client")
    assert matcher.matches(Order()) is False
    assert "should resolve to Client" in matcher.failure_message()


def test_has_many_with_dependent_order_and_validate() -> None:
    """Customer.orders matches dependent, order and validate expectations."""
    assert_association(
        Customer(),
        have_many("orders")
        .with_class_name("Order")
        .with_dependent("delete-orphan")
        .with_order("orders.placed_at DESC")
        .with_validate(),
    )


def test_has_many_with_explicit_foreign_key() -> None:
    """with_foreign_key compares the relationship's recorded key."""
    assert_association(Customer, have_many("orders").with_foreign_key("customer_id"))
    assert_no_association(Customer, have_many("orders").with_foreign_key("client_id"))


def test_has_one_profile() -> None:
    """Customer has one profile, nullified on delete."""
    assert_association(Customer(), have_one("profile").with_dependent("nullify"))


def test_habtm_tags() -> None:
    """Customer has and belongs to many tags through customer_tags."""
    assert_association(Customer(), have_and_belong_to_many("tags").with_class_name("Tag"))


def test_has_many_through_proxy() -> None:
    """Customer has many products through orders."""
    assert_association(
        Customer(), have_many("products").with_through("orders").with_class_name("Product")
    )
    matcher = have_many("products").with_through("carts")
    assert matcher.matches(Customer()) is False
    assert "products should go through carts, actual: orders" in matcher.failure_message()


def test_touch_and_validate_flags() -> None:
    """Order.customer declares touch but not validate."""
    assert_association(Order(), belong_to("customer").with_touch().with_validate(False))
    matcher = belong_to("customer").with_validate()
    assert matcher.matches(Order()) is False
    assert "customer should have validate=True" in matcher.failure_message()


def test_conditions_compared_with_join_text() -> None:
    """conditions compare with the string form of the join condition."""
    join = Order.customer.property.primaryjoin
    assert_association(Order(), belong_to("customer").with_conditions(join))
    matcher = belong_to("customer").with_conditions("customers.active = 1")
    assert matcher.matches(Order()) is False
    assert "should have the following conditions: customers.active = 1" in matcher.failure_message()


def test_wrong_kind_asserted_absent() -> None:
    """assert_no_association passes when the kind differs."""
    assert_no_association(Order(), have_many("customer"))


def test_assert_association_raises_with_failure_message() -> None:
    """A failed match raises AssertionError carrying the failure message."""
    with pytest.raises(AssertionError) as exc_info:
        assert_association(Order(), belong_to("supplier"))
    assert str(exc_info.value) == (
        "Expected Order to have a belongs-to association called supplier "
        "(no association called supplier)"
    )


def test_assert_no_association_raises_with_negated_message() -> None:
    """A match where none was expected raises with the negated message."""
    with pytest.raises(AssertionError) as exc_info:
        assert_no_association(Order(), belong_to("customer"))
    assert str(exc_info.value) == (
        "Did not expect Order to have a belongs-to association called customer"
    )
