import io

import pytest

from oslab.semaphore import BufferEmpty, BufferFull, ProducerConsumer, main


def test_produce_numbers_items_up_to_capacity():
    buffer = ProducerConsumer()
    produced = [buffer.produce() for _ in range(buffer.capacity)]
    assert produced == list(range(1, buffer.capacity + 1))
    assert buffer.empty == 0


def test_produce_into_full_buffer_raises():
    buffer = ProducerConsumer(capacity=2)
    buffer.produce()
    buffer.produce()
    with pytest.raises(BufferFull):
        buffer.produce()
    assert buffer.full == 2


def test_consume_returns_latest_item():
    buffer = ProducerConsumer()
    buffer.produce()
    second = buffer.produce()
    assert buffer.consume() == second
    assert buffer.full == 1


def test_consume_from_empty_buffer_raises():
    with pytest.raises(BufferEmpty):
        ProducerConsumer().consume()


def test_full_and_empty_always_sum_to_capacity():
    buffer = ProducerConsumer(capacity=4)
    for action in ["p", "p", "c", "p", "p", "p", "c"]:
        if action == "p":
            buffer.produce()
        else:
            buffer.consume()
        assert buffer.full + buffer.empty == buffer.capacity


def test_invalid_capacity_raises():
    with pytest.raises(ValueError):
        ProducerConsumer(capacity=0)


def test_main_menu_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n1\n2\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "BUFFER IS EMPTY" in out
    assert "Producer produces the item1" in out
    assert "Producer produces the item2" in out
    assert "Consumer consumes item2" in out


def test_main_reports_full_buffer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n"))
    assert main(["--capacity", "1"]) == 0
    assert "BUFFER IS FULL" in capsys.readouterr().out