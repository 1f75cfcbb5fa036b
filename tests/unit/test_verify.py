"""Tests for Verify.that used with unittest.mock call assertions."""

from collections.abc import Callable
from unittest.mock import Mock, call

import pytest

from verify_that import (
    ArgumentPlaceholder,
    ArgumentTypeMismatchError,
    PlaceholderMisuseError,
    Verify,
    assert_received,
    assert_received_once,
    default_value,
    expect,
    that,
)


def message_for(act: Callable[[], None]) -> str:
    try:
        act()
    except AssertionError as exc:
        return str(exc)
    return ""


def is_one(value):
    expect(value).to_be(1)


@pytest.fixture
def sub() -> Mock:
    return Mock()


def test_successful_check_has_no_failure_message(sub):
    sub.single_param(1)

    actual = message_for(lambda: sub.single_param.assert_called_with(Verify.that(is_one, int)))

    assert actual == ""


def test_missing_call_failure_does_not_include_verification_details(sub):
    actual = message_for(lambda: sub.single_param.assert_called_with(Verify.that(is_one, int)))

    assert actual.startswith('expected call not found.\nExpected: single_param("")\n')
    assert "Expected value" not in actual


def test_wrong_call_failure_includes_verification_details(sub):
    sub.single_param(2)

    actual = message_for(lambda: sub.single_param.assert_called_with(Verify.that(is_one, int)))

    assert actual.startswith(
        'expected call not found.\nExpected: single_param("\nExpected value to be 1, but found 2.")\n'
    )


def test_documentation_example(sub):
    sub.some_method("Hello hello")

    actual = message_for(
        lambda: sub.some_method.assert_called_with(
            Verify.that(lambda s: expect(s).to_start_with("hello").and_.to_end_with("goodbye"), str)
        )
    )

    assert '"Hello hello" differs near "Hel" (index 0).' in actual
    assert '"goodbye".' in actual


def test_plain_assert_statements_work_as_checks(sub):
    sub.single_param(2)

    def check(value):
        if value != 1:
            raise AssertionError(f"{value} is not one")

    actual = message_for(lambda: sub.single_param.assert_called_with(that(check, int)))

    assert 'single_param("2 is not one")' in actual


def test_each_position_gets_its_own_check(sub):
    sub.double_param(1, 2.5)

    sub.double_param.assert_called_with(
        that(is_one, int),
        that(lambda y: expect(y).to_be_greater_than(2.0), float),
    )


def test_checks_work_for_keyword_arguments(sub):
    sub.send(to="alice@example.com", retries=3)

    sub.send.assert_called_with(
        to=that(lambda to: expect(to).to_end_with("@example.com"), str),
        retries=3,
    )


def test_checks_work_inside_call_lists(sub):
    sub.single_param(5)
    sub.single_param(1)

    assert sub.single_param.call_args_list == [
        call(that(lambda v: expect(v).to_be_greater_than(4), int)),
        call(that(is_one, int)),
    ]


def test_type_mismatch_is_not_downgraded_to_a_failed_match(sub):
    sub.single_param("two")

    with pytest.raises(ArgumentTypeMismatchError):
        sub.single_param.assert_called_with(that(is_one, int))


def test_comparison_consumes_the_specification(match_context, sub):
    sub.single_param(1)
    placeholder = that(is_one, int)
    assert len(match_context) == 1

    sub.single_param.assert_called_with(placeholder)

    assert len(match_context) == 0


def test_placeholder_is_typed_stand_in(match_context):
    placeholder = that(is_one, int)

    assert isinstance(placeholder, ArgumentPlaceholder)
    assert placeholder.arg_type is int
    assert placeholder == placeholder
    assert placeholder != that(is_one, int)
    assert repr(placeholder) == '""'
    assert len({placeholder}) == 1
    match_context.clear()


def test_default_value():
    assert default_value(int) == 0
    assert default_value(str) == ""
    assert default_value(ArgumentPlaceholder) is None


class TestAssertReceived:
    def test_matching_call_among_many(self, match_context, sub):
        sub.single_param(3)
        sub.single_param(1)

        assert_received(sub.single_param, that(is_one, int))

        assert len(match_context) == 0

    def test_reports_last_evaluated_failure(self, sub):
        sub.single_param(2)

        actual = message_for(lambda: assert_received(sub.single_param, that(is_one, int)))

        assert actual.startswith('single_param("\nExpected value to be 1, but found 2.") call not found')

    def test_never_called(self, sub):
        actual = message_for(lambda: assert_received(sub.single_param, that(is_one, int)))

        assert actual.startswith('single_param("") call not found')

    def test_consumes_in_argument_order(self, match_context, sub):
        sub.double_param(1, 2.0)

        assert_received(sub.double_param, that(is_one, int), that(lambda y: None, float))

        assert len(match_context) == 0

    def test_reused_placeholder_is_rejected(self, sub):
        sub.single_param(1)
        stale = that(is_one, int)
        assert_received(sub.single_param, stale)

        with pytest.raises(PlaceholderMisuseError):
            assert_received(sub.single_param, stale)

    def test_placeholders_out_of_order_are_rejected(self, match_context, sub):
        sub.double_param(1, 1)
        first = that(is_one, int)
        second = that(is_one, int)

        with pytest.raises(PlaceholderMisuseError):
            assert_received(sub.double_param, second, first)
        match_context.clear()

    def test_once(self, sub):
        sub.single_param(1)

        assert_received_once(sub.single_param, that(is_one, int))

    def test_once_rejects_repeated_calls(self, sub):
        sub.single_param(1)
        sub.single_param(1)

        with pytest.raises(AssertionError, match="Expected 'single_param' to be called once"):
            assert_received_once(sub.single_param, that(is_one, int))


def test_optional_argument_type_in_mock_call(sub):
    sub.lookup(None)

    actual = message_for(lambda: sub.lookup.assert_called_with(that(is_one, int | None)))

    assert 'lookup("\nExpected value to be 1, but found None.")' in actual
