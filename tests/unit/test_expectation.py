"""Tests for verify_that.assertions.expectation module."""

import pytest

from verify_that.assertions import AssertionScope, expect


def failures_of(check) -> list[str]:
    with AssertionScope() as scope:
        check()
        return scope.discard()


class TestPassingChecks:
    def test_equality(self):
        assert failures_of(lambda: expect(1).to_be(1)) == []

    def test_numbers(self):
        assert failures_of(lambda: expect(10).to_be_greater_than(5).and_.to_be_less_than(20)) == []

    def test_strings(self):
        check = lambda: expect("Hello hello").to_start_with("Hello").and_.to_end_with("hello").and_.to_contain("o h")
        assert failures_of(check) == []

    def test_misc(self):
        assert failures_of(lambda: expect(None).to_be_none()) == []
        assert failures_of(lambda: expect([1, 2]).to_have_length(2).and_.to_be_instance_of(list)) == []
        assert failures_of(lambda: expect(3).not_to_be(4).and_.to_satisfy(lambda v: v % 2 == 1)) == []


class TestFailureMessages:
    def test_to_be(self):
        assert failures_of(lambda: expect(2).to_be(1)) == ["Expected value to be 1, but found 2."]

    def test_to_be_quotes_strings(self):
        assert failures_of(lambda: expect("b").to_be("a")) == ['Expected value to be "a", but found "b".']

    def test_to_start_with_points_at_difference(self):
        failures = failures_of(lambda: expect("Hello hello").to_start_with("hello"))
        assert failures == [
            'Expected string to start with\n"hello", but\n"Hello hello" differs near "Hel" (index 0).'
        ]

    def test_to_start_with_non_string(self):
        failures = failures_of(lambda: expect(5).to_start_with("5"))
        assert failures == ['Expected string to start with "5", but found 5.']

    def test_to_end_with(self):
        failures = failures_of(lambda: expect("Hello hello").to_end_with("goodbye"))
        assert failures == ['Expected string\n"Hello hello" to end with\n"goodbye".']

    def test_to_have_length(self):
        assert failures_of(lambda: expect([1]).to_have_length(2)) == [
            "Expected value to have length 2, but found 1: [1]."
        ]
        assert "has no length" in failures_of(lambda: expect(3).to_have_length(1))[0]

    def test_to_contain_on_unsupported_type(self):
        assert failures_of(lambda: expect(3).to_contain(1)) == ["Expected 3 to contain 1."]

    def test_to_satisfy_uses_description(self):
        failures = failures_of(lambda: expect(2).to_satisfy(lambda v: v > 5, "more than five"))
        assert failures == ["Expected 2 to satisfy more than five."]

    def test_to_be_greater_than_none(self):
        assert failures_of(lambda: expect(None).to_be_greater_than(0)) == [
            "Expected value to be greater than 0, but found None."
        ]


def test_expect_raises_outside_scope():
    with pytest.raises(AssertionError, match="Expected value to be 1, but found 2."):
        expect(2).to_be(1)
