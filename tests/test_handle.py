"""
Test the synchronous sequencing protocol: handle() and @do.

Step-sequences are generator functions. A step-sequence that never
pauses still needs a `yield` somewhere to be a generator.
"""

import logging

import pytest

from fallible import (
    Err,
    Ok,
    UnwrapError,
    do,
    done,
    drive,
    failure,
    handle,
    success,
)


def get_value(fail: bool):
    if fail:
        return failure("failed")
    return success(3)


# =============================================================================
# Completion
# =============================================================================


def test_never_pausing_sequence_returns_ok():
    def steps():
        return 3
        yield  # unreachable, makes this a generator

    assert handle(steps) == success(3)


def test_returns_class_instance():
    class Box:
        def __init__(self, member: int) -> None:
            self.member = member

    def steps():
        return Box(99)
        yield

    result = handle(steps)
    assert isinstance(result, Ok)
    assert result.value.member == 99


def test_falling_off_the_end_is_ok_none():
    def steps():
        yield from success(1)

    assert handle(steps) == success(None)


def test_done_finishes_the_run():
    calls = []

    def steps():
        value = yield from success(5)
        yield done(value * 2)
        calls.append("after done")

    assert handle(steps) == success(10)
    assert calls == []


# =============================================================================
# Pausing on outcomes
# =============================================================================


def test_yield_from_ok_resumes_with_value():
    def steps():
        ok = yield from success("3")
        return ok + "!"

    assert handle(steps) == success("3!")


def test_plain_yield_ok_resumes_with_value():
    def steps():
        ok = yield success("3")
        return ok + "!"

    assert handle(steps) == success("3!")


def test_bare_value_is_sent_back_unchanged():
    def steps():
        value = yield 5
        return value + 1

    assert handle(steps) == success(6)


def test_resumed_value_is_the_exact_object():
    payload = {"id": 1}
    seen = []

    def steps():
        got = yield from success(payload)
        seen.append(got)
        return got

    handle(steps)
    assert seen[0] is payload


def test_returns_err():
    def steps():
        yield from failure("3")

    assert handle(steps) == failure("3")


def test_err_is_returned_unchanged():
    err = failure(ValueError("bad"))

    def steps():
        yield from err
        return 1

    assert handle(steps) is err


def test_mixed_error_types():
    cond = False

    def steps():
        yield from success(1)
        if cond:
            yield from failure("4")
        yield from failure(3)
        x3 = yield from success(1)
        return x3 + 1

    assert handle(steps) == failure(3)


def test_inline_yield_expression():
    class Box:
        def __init__(self, member: int) -> None:
            self.member = member

    def steps():
        return Box((yield from get_value(True)))

    assert handle(steps) == failure("failed")


def test_nested_runs_compose():
    def inner():
        a = yield from success(2)
        return a * 10

    def outer():
        value = yield from handle(inner)
        return value + 1

    assert handle(outer) == success(21)


def test_nested_failure_propagates():
    def inner():
        yield from failure("inner broke")
        return 0

    def outer():
        value = yield from handle(inner)
        return value + 1

    assert handle(outer) == failure("inner broke")


# =============================================================================
# Scenarios and short-circuit
# =============================================================================


def test_scenario_sum_of_two_successes():
    def steps():
        a = yield from success(1)
        b = yield from success(2)
        return a + b

    assert handle(steps) == success(3)


def test_scenario_failure_stops_remaining_steps(calls):
    def steps():
        calls.append("one")
        yield from success(1)
        calls.append("x")
        yield from failure("x")
        calls.append("two")
        yield from success(2)
        return "unreachable"

    assert handle(steps) == failure("x")
    assert calls == ["one", "x"]


@pytest.mark.parametrize("k", [0, 1, 2, 4])
def test_failure_at_kth_pause(k, calls):
    def steps():
        for i in range(5):
            calls.append(i)
            if i == k:
                yield from failure(f"stop at {i}")
            yield from success(i)
        return "finished"

    assert handle(steps) == failure(f"stop at {k}")
    assert calls == list(range(k + 1))


def test_finally_runs_on_short_circuit(calls):
    def steps():
        try:
            yield from failure("x")
        finally:
            calls.append("cleanup")

    assert handle(steps) == failure("x")
    assert calls == ["cleanup"]


def test_finally_runs_on_done(calls):
    def steps():
        try:
            yield done(1)
        finally:
            calls.append("cleanup")

    assert handle(steps) == success(1)
    assert calls == ["cleanup"]


def test_short_circuit_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="fallible")

    def steps():
        yield from failure("x")

    handle(steps)

    assert any("short-circuited" in record.getMessage() for record in caplog.records)


# =============================================================================
# Faults propagate
# =============================================================================


def test_unwrap_inside_sequence_propagates():
    def steps():
        value = failure(-1).unwrap()
        yield from success(value)

    with pytest.raises(UnwrapError, match="-1"):
        handle(steps)


def test_exception_inside_sequence_propagates_unchanged():
    boom = RuntimeError("boom")

    def steps():
        yield from success(1)
        raise boom

    with pytest.raises(RuntimeError) as exc_info:
        handle(steps)
    assert exc_info.value is boom


def test_yielded_coroutine_is_rejected(calls):
    async def fetch():
        return success(1)

    pending = fetch()

    def steps():
        try:
            got = yield pending
            calls.append(got)
        finally:
            calls.append("cleanup")

    with pytest.raises(TypeError, match="handle_async"):
        handle(steps)

    assert calls == ["cleanup"]
    assert pending.cr_frame is None


def test_wrong_arity_raises_type_error():
    with pytest.raises(TypeError):
        handle()  # type: ignore[call-overload]


# =============================================================================
# Receiver binding
# =============================================================================


def test_receiver_is_bound_for_whole_run():
    class Account:
        def __init__(self) -> None:
            self.balance = 3
            self.seen: list[int] = []

        def withdraw(self, amount: int):
            return handle(self, lambda this: this._steps(amount))

        def _steps(self, amount: int):
            self.seen.append(self.balance)
            checked = yield from (success(amount) if amount <= self.balance else failure("insufficient"))
            self.seen.append(self.balance)
            return self.balance - checked

    account = Account()

    assert account.withdraw(2) == success(1)
    assert account.seen == [3, 3]
    assert account.withdraw(5) == failure("insufficient")


def test_receiver_with_plain_function():
    class Config:
        port = 8080

    def steps(ctx):
        port = yield from success(ctx.port)
        return port + 1

    assert handle(Config(), steps) == success(8081)


# =============================================================================
# @do decorator
# =============================================================================


def test_do_decorator():
    @do
    def parse(raw: str):
        value = yield from (success(int(raw)) if raw.isdigit() else failure(f"not a number: {raw}"))
        return value * 2

    assert parse("21") == success(42)
    assert parse("x") == failure("not a number: x")
    assert parse.__name__ == "parse"


def test_do_decorator_on_method():
    class Service:
        factor = 10

        @do
        def scale(self, value: int):
            checked = yield from success(value)
            return checked * self.factor

    assert Service().scale(4) == success(40)


def test_drive_takes_created_generator():
    def steps(a: int):
        b = yield from success(a + 1)
        return b

    assert drive(steps(1)) == Ok(2)
    assert isinstance(drive(steps(1)), Ok)
    assert not isinstance(drive(steps(1)), Err)
