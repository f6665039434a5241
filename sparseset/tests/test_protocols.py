from sparseset import SparseSet, Visitor


class Collector(Visitor):
    def __init__(self) -> None:
        self.seen = []

    def __call__(self, value: int, position: int, sparse_set: SparseSet) -> None:
        self.seen.append((position, value))


def test_visitor_implementation():
    s = SparseSet(3, 10)
    s.add(3)
    s.add(6)
    collector = Collector()
    s.for_each(collector)
    assert collector.seen == [(0, 3), (1, 6)]
    assert collector.seen == list(s.entries())
