import threading

from movegen.tasks import BranchCounter, MoveStream


def test_stream_closes_when_count_returns_to_zero():
    stream = MoveStream()
    counter = BranchCounter(stream)
    counter.launched(2)
    counter.start()

    def worker(item):
        stream.send(item)
        counter.finished()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(2)]
    for t in threads:
        t.start()
    assert sorted(stream) == [0, 1]
    counter.join(timeout=5)
    assert stream.closed
    assert counter.launched_total == 2


def test_nested_launches_keep_stream_open():
    stream = MoveStream()
    counter = BranchCounter(stream)
    counter.launched()
    counter.start()

    def child(depth):
        if depth < 3:
            counter.launched()
            threading.Thread(target=child, args=(depth + 1,)).start()
        stream.send(depth)
        counter.finished()

    child(0)
    assert sorted(stream) == [0, 1, 2, 3]
    counter.join(timeout=5)
    assert counter.launched_total == 4


def test_close_is_idempotent():
    stream = MoveStream()
    stream.send("x")
    stream.close()
    stream.close()
    assert list(stream) == ["x"]
