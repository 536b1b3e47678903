import asyncio

import pytest

from brush_translate.translation.coordinator import (
    OperationKind,
    OperationState,
    RequestCoordinator,
)


@pytest.mark.unit
def test_tokens_strictly_increase_per_kind():
    coordinator = RequestCoordinator()
    first = coordinator.begin(OperationKind.TRANSLATION)
    second = coordinator.begin(OperationKind.TRANSLATION)
    analysis = coordinator.begin(OperationKind.ANALYSIS)

    assert second.value > first.value
    assert analysis.value == 1
    assert not coordinator.is_current(first)
    assert coordinator.is_current(second)


@pytest.mark.unit
def test_state_machine():
    coordinator = RequestCoordinator()
    assert coordinator.state(OperationKind.TRANSLATION) is OperationState.IDLE

    token = coordinator.begin(OperationKind.TRANSLATION)
    assert coordinator.state(OperationKind.TRANSLATION) is OperationState.IN_FLIGHT

    assert coordinator.finish(token) is True
    assert coordinator.state(OperationKind.TRANSLATION) is OperationState.IDLE
    assert coordinator.finish(token) is False


@pytest.mark.unit
def test_translation_resets_analysis():
    coordinator = RequestCoordinator()
    analysis = coordinator.begin(OperationKind.ANALYSIS)

    coordinator.begin(OperationKind.TRANSLATION)

    assert coordinator.state(OperationKind.ANALYSIS) is OperationState.IDLE
    assert not coordinator.is_current(analysis)
    # A later analysis never reuses the stale value
    assert coordinator.begin(OperationKind.ANALYSIS).value > analysis.value


@pytest.mark.unit
def test_analysis_does_not_reset_translation():
    coordinator = RequestCoordinator()
    translation = coordinator.begin(OperationKind.TRANSLATION)
    coordinator.begin(OperationKind.ANALYSIS)
    assert coordinator.is_current(translation)


@pytest.mark.asyncio
async def test_older_result_arriving_last_is_dropped():
    coordinator = RequestCoordinator()
    gate_a = asyncio.Event()
    delivered = []

    async def operation_a():
        await gate_a.wait()
        return "A"

    async def operation_b():
        return "B"

    token_a = coordinator.begin(OperationKind.TRANSLATION)
    task_a = asyncio.create_task(coordinator.complete(token_a, operation_a(), delivered.append))
    token_b = coordinator.begin(OperationKind.TRANSLATION)

    assert await coordinator.complete(token_b, operation_b(), delivered.append) is True
    gate_a.set()
    assert await task_a is False

    assert delivered == ["B"]


@pytest.mark.asyncio
async def test_older_result_arriving_first_is_dropped():
    coordinator = RequestCoordinator()
    gate_b = asyncio.Event()
    delivered = []

    async def operation_a():
        return "A"

    async def operation_b():
        await gate_b.wait()
        return "B"

    token_a = coordinator.begin(OperationKind.TRANSLATION)
    token_b = coordinator.begin(OperationKind.TRANSLATION)
    task_b = asyncio.create_task(coordinator.complete(token_b, operation_b(), delivered.append))

    assert await coordinator.complete(token_a, operation_a(), delivered.append) is False
    gate_b.set()
    assert await task_b is True

    assert delivered == ["B"]


@pytest.mark.asyncio
async def test_errors_of_current_operation_reach_callback():
    coordinator = RequestCoordinator()
    errors = []

    async def failing():
        raise RuntimeError("boom")

    token = coordinator.begin(OperationKind.ANALYSIS)
    assert await coordinator.complete(token, failing(), lambda r: None, errors.append) is True
    assert str(errors[0]) == "boom"


@pytest.mark.asyncio
async def test_errors_propagate_without_error_callback():
    coordinator = RequestCoordinator()

    async def failing():
        raise RuntimeError("boom")

    token = coordinator.begin(OperationKind.ANALYSIS)
    with pytest.raises(RuntimeError):
        await coordinator.complete(token, failing(), lambda r: None)


@pytest.mark.asyncio
async def test_errors_of_stale_operation_are_dropped():
    coordinator = RequestCoordinator()

    async def failing():
        raise RuntimeError("boom")

    stale = coordinator.begin(OperationKind.TRANSLATION)
    coordinator.begin(OperationKind.TRANSLATION)

    assert await coordinator.complete(stale, failing(), lambda r: None) is False
