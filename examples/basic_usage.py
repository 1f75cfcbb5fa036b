"""Checking mock call arguments with Verify.that."""

from unittest.mock import Mock

from verify_that import Verify, assert_received, expect


def main():
    notifier = Mock()
    notifier.send("Hello hello", retries=3)

    # Passes: the argument satisfies every check.
    notifier.send.assert_called_with(
        Verify.that(lambda text: expect(text).to_start_with("Hello"), str),
        retries=3,
    )

    # Fails: both failed checks are shown in the expected call.
    try:
        assert_received(
            notifier.send,
            Verify.that(lambda text: expect(text).to_start_with("hello").and_.to_end_with("goodbye"), str),
            retries=3,
        )
    except AssertionError as exc:
        print(exc)


if __name__ == "__main__":
    main()
