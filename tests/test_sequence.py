import random
from collections import Counter

from blockfall.sequence import SequenceGenerator
from blockfall.tetromino import PieceKind


class FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_seven_draws_yield_every_kind_once():
    gen = SequenceGenerator(3)
    drawn = [gen.next() for _ in range(7)]
    assert sorted(drawn) == sorted(PieceKind)
    assert len(gen) == 0


def test_consecutive_bags_are_permutations():
    gen = SequenceGenerator(11)
    drawn = [gen.next() for _ in range(21)]
    for start in range(0, 21, 7):
        assert set(drawn[start : start + 7]) == set(PieceKind)


def test_pending_is_the_rest_of_the_bag():
    gen = SequenceGenerator(5)
    drawn = [gen.next() for _ in range(3)]
    pending = gen.pending
    assert len(pending) == 4
    assert set(pending).isdisjoint(drawn)
    assert gen.next() is pending[-1]


def test_select_and_remove_uses_random_index():
    gen = SequenceGenerator(FixedRandom(0.0))
    assert [gen.next() for _ in range(7)] == list(reversed(list(PieceKind)))

    gen = SequenceGenerator(FixedRandom(0.999))
    assert [gen.next() for _ in range(7)] == list(PieceKind)


def test_seeded_generators_agree():
    a = SequenceGenerator(42)
    b = SequenceGenerator(42)
    assert [a.next() for _ in range(28)] == [b.next() for _ in range(28)]


def test_clear_drops_rest_of_bag():
    gen = SequenceGenerator(1)
    gen.next()
    gen.clear()
    assert gen.pending == ()
    assert sorted(gen.next() for _ in range(7)) == sorted(PieceKind)


def test_first_draw_is_roughly_uniform():
    gen = SequenceGenerator(12345)
    bags = 7000
    counts = Counter()
    for _ in range(bags):
        gen.clear()
        counts[gen.next()] += 1
    assert set(counts) == set(PieceKind)
    for kind in PieceKind:
        assert 850 < counts[kind] < 1150, counts
