import pytest

from estructuras.stack_queue import Queue, Stack


def test_stack_sequence():
    pila = Stack()
    pila.push(1)
    assert pila.pop() == 1
    pila.push(2)
    pila.push(3)
    assert pila.pop() == 3
    assert pila.peek() == 2
    assert not pila.is_empty()
    pila.pop()
    assert pila.is_empty()
    pila.push(5)
    pila.push(12)
    assert pila.peek() == 12
    assert list(pila) == [12, 5]


def test_stack_init_pushes_in_order():
    pila = Stack([1, 2, 3])
    assert pila.peek() == 3
    assert len(pila) == 3
    assert str(pila) == "3 2 1"


def test_stack_empty_errors():
    pila = Stack()
    with pytest.raises(IndexError):
        pila.pop()
    with pytest.raises(IndexError):
        pila.peek()


def test_stack_lifo_round_trip():
    items = list(range(10))
    pila = Stack(items)
    assert [pila.pop() for _ in items] == items[::-1]
    assert pila.is_empty()


def test_queue_sequence():
    cola = Queue()
    cola.enqueue(5)
    cola.enqueue(2)
    cola.enqueue(3)
    assert str(cola) == "5 2 3"
    assert cola.dequeue() == 5
    assert cola.peek() == 2
    cola.dequeue()
    assert not cola.is_empty()
    cola.dequeue()
    assert cola.is_empty()


def test_queue_fifo_round_trip():
    items = ["a", "b", "c", "d"]
    cola = Queue(items)
    assert list(cola) == items
    assert [cola.dequeue() for _ in items] == items
    assert len(cola) == 0


def test_queue_empty_errors():
    cola = Queue()
    with pytest.raises(IndexError):
        cola.dequeue()
    with pytest.raises(IndexError):
        cola.peek()


def test_queue_reusable_after_emptied():
    cola = Queue([1])
    cola.dequeue()
    cola.enqueue(9)
    assert cola.peek() == 9
    assert len(cola) == 1