import pytest

from primebag.holes import HolePool


class TestHolePool:

    def test_pops_largest_first(self):
        pool = HolePool()
        for p in (5, 13, 2, 7):
            pool.push(p)
        assert [pool.pop() for _ in range(4)] == [13, 7, 5, 2]

    def test_empty_pool(self):
        pool = HolePool()
        assert not pool
        assert len(pool) == 0
        with pytest.raises(IndexError):
            pool.pop()
        with pytest.raises(IndexError):
            pool.peek()

    def test_peek_does_not_consume(self):
        pool = HolePool()
        pool.push(3)
        pool.push(11)
        assert pool.peek() == 11
        assert len(pool) == 2

    def test_iteration_and_membership(self):
        pool = HolePool()
        for p in (3, 17, 7):
            pool.push(p)
        assert list(pool) == [17, 7, 3]
        assert 7 in pool
        assert 5 not in pool
        assert len(pool) == 3

    def test_clear(self):
        pool = HolePool()
        pool.push(2)
        pool.clear()
        assert len(pool) == 0
