import pytest

from oslab.bankers import (
    BankerProcess,
    ResourceRequestDenied,
    cyclic_safety_order,
    detect_deadlock,
    request_resources,
    safety_sequence,
)

MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
AVAILABLE = [3, 3, 2]
TOTALS = [10, 5, 7]


def _replays(sequence, maximum, allocation, available):
    avail = list(available)
    for index in sequence:
        need = [m - a for m, a in zip(maximum[index], allocation[index])]
        if any(n > a for n, a in zip(need, avail)):
            return False
        avail = [a + b for a, b in zip(avail, allocation[index])]
    return True


def _processes():
    return [
        BankerProcess(f"P{i}", tuple(m), tuple(a))
        for i, (m, a) in enumerate(zip(MAXIMUM, ALLOCATION))
    ]


def test_safety_sequence_textbook_state_is_safe():
    result = safety_sequence(MAXIMUM, ALLOCATION, AVAILABLE)
    assert result.safe is True
    assert sorted(result.sequence) == list(range(5))
    assert result.blocked == ()
    assert _replays(result.sequence, MAXIMUM, ALLOCATION, AVAILABLE)


def test_safety_sequence_starts_with_first_runnable_process():
    result = safety_sequence(MAXIMUM, ALLOCATION, AVAILABLE)
    assert result.sequence[0] == 1


def test_safety_sequence_unsafe():
    result = safety_sequence([[2]], [[0]], [1])
    assert result.safe is False
    assert result.sequence == ()
    assert result.blocked == (0,)


def test_safety_sequence_partial_progress():
    result = safety_sequence([[1], [3]], [[0], [0]], [2])
    assert result.safe is False
    assert result.sequence == (0,)
    assert result.blocked == (1,)


def test_safety_sequence_rejects_bad_shapes():
    with pytest.raises(ValueError):
        safety_sequence([[1, 2]], [[0]], [1, 1])
    with pytest.raises(ValueError):
        safety_sequence([[1], [1]], [[0]], [1])


def test_detect_deadlock_none():
    assert detect_deadlock(MAXIMUM, ALLOCATION, AVAILABLE) == ()


def test_detect_deadlock_finds_both_processes():
    maximum = [[1, 1], [1, 1]]
    allocation = [[1, 0], [0, 1]]
    assert detect_deadlock(maximum, allocation, [0, 0]) == (0, 1)


def test_cyclic_safety_order_textbook():
    result = cyclic_safety_order(MAXIMUM, ALLOCATION, AVAILABLE)
    assert result.safe is True
    assert result.sequence == (1, 3, 4, 0, 2)
    assert _replays(result.sequence, MAXIMUM, ALLOCATION, AVAILABLE)


def test_cyclic_safety_order_unsafe():
    result = cyclic_safety_order([[2], [5]], [[0], [0]], [1])
    assert result.safe is False
    assert result.blocked == (0, 1)


def test_cyclic_safety_order_empty_is_safe():
    result = cyclic_safety_order([], [], [])
    assert result.safe is True
    assert result.sequence == ()


def test_banker_process_need_and_validation():
    assert BankerProcess("A", (2, 3), (2, 3)).need == (0, 0)
    with pytest.raises(ValueError):
        BankerProcess("A", (1, 2), (1,))


def test_request_granted_updates_allocation_and_stays_safe():
    outcome = request_resources(_processes(), TOTALS, "P1", (1, 0, 2))
    granted = outcome.processes[1]
    assert granted.allocation == tuple(
        a + r for a, r in zip(ALLOCATION[1], (1, 0, 2))
    )
    used = [sum(col) for col in zip(*(p.allocation for p in outcome.processes))]
    assert list(outcome.available) == [t - u for t, u in zip(TOTALS, used)]
    assert outcome.safe is True
    assert sorted(outcome.sequence) == sorted(p.name for p in _processes())


def test_request_greater_than_need_is_denied():
    with pytest.raises(ResourceRequestDenied):
        request_resources(_processes(), TOTALS, "P0", (8, 0, 0))


def test_request_for_unknown_process():
    with pytest.raises(KeyError):
        request_resources(_processes(), TOTALS, "missing", (0, 0, 0))


def test_request_leading_to_unsafe_state():
    processes = [BankerProcess("A", (2,), (1,)), BankerProcess("B", (2,), (0,))]
    outcome = request_resources(processes, (2,), "B", (1,))
    assert outcome.safe is False
    assert outcome.sequence == ()
    assert outcome.available == (0,)