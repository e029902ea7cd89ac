import suite
from itertools import islice
from lazyseq import LazySequence, generator_sequence, range_sequence, fixed_sequence

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- helpers ---

def counting_generator(limit):
    """yields 1..limit one per step, recording every call in calls"""
    calls = []

    def step(n):
        calls.append(n)
        if n >= limit:
            return n, []
        return n + 1, [n + 1]

    return step, calls


def batched_generator(batch_size, limit):
    """yields consecutive ints in batches of batch_size up to limit"""
    def step(n):
        if n >= limit:
            return n, []
        batch = list(range(n + 1, min(n + batch_size, limit) + 1))
        return n + len(batch), batch

    return step


# construction

@test("new sequence starts empty and not done")
def test_construction_defaults():
    seq = LazySequence(lambda state: (state, [state]))
    assert_that(not seq.is_done(), "fresh sequence should not be done")
    assert_that(seq.next() == [None], f"default state should be None: {seq}")


@test("constructor rejects non-callable generator")
def test_construction_requires_callable():
    assert_raises(TypeError, LazySequence, 42)


# next() tests

@test("next returns one item by default")
def test_next_default():
    seq = range_sequence(1, 10)
    assert_that(seq.next() == [1], "first next should be [1]")
    assert_that(seq.next() == [2], "second next should be [2]")


@test("next returns requested number of items in order")
def test_next_count():
    seq = range_sequence(1, 10)
    assert_that(seq.next(3) == [1, 2, 3], "should take first three")
    assert_that(seq.next(4) == [4, 5, 6, 7], "should continue where it left off")


@test("next returns fewer items at exhaustion")
def test_next_short_read():
    seq = range_sequence(1, 3)
    assert_that(seq.next(10) == [1, 2, 3], "should return only what is left")
    assert_that(seq.next(10) == [], "exhausted sequence returns empty list")


@test("next with zero count does not run the generator")
def test_next_zero():
    step, calls = counting_generator(5)
    seq = generator_sequence(step, 0)
    assert_that(seq.next(0) == [], "zero count should give empty list")
    assert_that(calls == [], f"generator should not have been called: {calls}")


@test("next rejects malformed counts")
def test_next_bad_count():
    seq = range_sequence(1, 10)
    assert_raises(TypeError, seq.next, 1.5)
    assert_raises(TypeError, seq.next, True)
    assert_raises(TypeError, seq.next, "3")
    error = assert_raises(ValueError, seq.next, -1)
    assert_that("non-negative" in str(error), f"error should explain the problem: {error}")
    assert_that(seq.next() == [1], "failed calls should not consume anything")


@test("next consumes buffered batch items before generating")
def test_next_uses_buffer():
    step = batched_generator(3, 9)
    calls = []

    def recorded(n):
        calls.append(n)
        return step(n)

    seq = generator_sequence(recorded, 0)
    assert_that(seq.next() == [1], "first item of the first batch")
    assert_that(seq.next(2) == [2, 3], "rest of the first batch")
    assert_that(calls == [0], f"only one generator step should have run: {calls}")
    assert_that(seq.next() == [4], "second batch starts at 4")
    assert_that(calls == [0, 3], f"second step should run lazily: {calls}")


# next_one() tests

@test("next_one returns a bare item")
def test_next_one():
    seq = fixed_sequence(['a', 'b'])
    assert_that(seq.next_one() == 'a', "should return the item itself")
    assert_that(seq.next_one() == 'b', "should return the second item")


@test("next_one returns default at exhaustion")
def test_next_one_exhausted():
    seq = fixed_sequence([1])
    seq.next_one()
    assert_that(seq.next_one() is None, "default is None")
    assert_that(seq.next_one(default=-1) == -1, "custom default should be returned")


# is_done() tests

@test("is_done turns true once the generator returns nothing")
def test_is_done():
    seq = range_sequence(1, 2)
    assert_that(not seq.is_done(), "not done before consumption")
    seq.next(2)
    assert_that(not seq.is_done(), "not done while the generator has not reported exhaustion")
    seq.next()
    assert_that(seq.is_done(), "done after an empty generator step")


@test("is_done is a pure query")
def test_is_done_no_side_effect():
    step, calls = counting_generator(3)
    seq = generator_sequence(step, 0)
    for _ in range(5):
        seq.is_done()
    assert_that(calls == [], "is_done should never call the generator")


@test("exhaustion is permanent even if the generator would produce again")
def test_exhaustion_monotonic():
    calls = []

    def flaky(n):
        calls.append(n)
        # produces nothing at n == 2, but would produce again afterwards
        return n + 1, ([] if n == 2 else [n])

    seq = generator_sequence(flaky, 0)
    assert_that(seq.next(5) == [0, 1], "should stop at the first empty step")
    assert_that(seq.is_done(), "should be done")
    for _ in range(3):
        assert_that(seq.next(3) == [], "done sequence yields nothing")
        assert_that(seq.all() == [], "all on a done sequence is empty")
    assert_that(calls == [0, 1, 2], f"generator must not run after exhaustion: {calls}")


# all() tests

@test("all drains buffer and generator")
def test_all():
    seq = range_sequence(1, 5)
    seq.next()
    assert_that(seq.all() == [2, 3, 4, 5], "all should return the remaining items")
    assert_that(seq.is_done(), "all should leave the sequence done")
    assert_that(seq.all() == [], "second all should be empty")


@test("successive next chunks match a single all")
def test_buffer_ordering():
    chunks = []
    seq = generator_sequence(batched_generator(4, 23), 0)
    for size in (1, 3, 2, 7, 5):
        chunks.extend(seq.next(size))
    chunks.extend(seq.all())
    expected = generator_sequence(batched_generator(4, 23), 0).all()
    assert_that(chunks == expected, f"chunked read should match all(): {chunks}")
    assert_that(expected == list(range(1, 24)), "all should return 1..23 in order")


# generator contract tests

@test("generator state is replaced by the returned state")
def test_generator_state_passing():
    seen = []

    def doubling(state):
        seen.append(state)
        return state * 2, [state]

    seq = generator_sequence(doubling, 1)
    assert_that(seq.next(4) == [1, 2, 4, 8], "each step should see the previous state")
    assert_that(seen == [1, 2, 4, 8], f"generator should get the stored state: {seen}")


@test("generator may return several items or None")
def test_generator_items_shapes():
    def step(n):
        if n == 2:
            return n, None
        return n + 1, (x for x in ('a', 'b'))

    seq = generator_sequence(step, 0)
    assert_that(seq.all() == ['a', 'b', 'a', 'b'], "generator expressions should be accepted")
    assert_that(seq.is_done(), "None items should signal exhaustion")


@test("generator returning a non-pair is rejected")
def test_generator_bad_shape():
    seq = generator_sequence(lambda state: [1, 2, 3], 0)
    error = assert_raises(TypeError, seq.next)
    assert_that("(state, items)" in str(error), f"error should describe the contract: {error}")


@test("errors from the generator propagate unchanged")
def test_generator_error_propagates():
    class Boom(Exception):
        pass

    def explode(state):
        raise Boom("generator failed")

    seq = generator_sequence(explode)
    error = assert_raises(Boom, seq.next)
    assert_that(str(error) == "generator failed", "original exception should reach the caller")


# iteration tests

@test("iteration consumes the sequence item by item")
def test_iteration():
    seq = range_sequence(1)
    first = list(islice(seq, 4))
    assert_that(first == [1, 2, 3, 4], f"islice should work on unbounded sequences: {first}")
    assert_that(seq.next() == [5], "iteration should have consumed four items")


@test("for loop stops at exhaustion")
def test_for_loop():
    collected = [x for x in fixed_sequence([3, 1, 2])]
    assert_that(collected == [3, 1, 2], "should iterate in order")


@test("repr reports buffer and done flag")
def test_repr():
    seq = generator_sequence(batched_generator(3, 3), 0)
    seq.next()
    assert_that(repr(seq) == "LazySequence(buffered=2, done=False)", f"unexpected repr: {seq!r}")


if __name__ == "__main__":
    suite.main(title="lazyseq core sequence test suite")
