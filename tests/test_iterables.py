"""Tests for bulk operations over iterables of Results."""

from hypothesis import given

from anyhow import Err, Ok
from anyhow.iterables import (
    all_err,
    all_ok,
    any_err,
    any_ok,
    combine,
    count_err,
    count_ok,
    errors_of,
    filter_errors,
    filter_errors_to,
    filter_values,
    filter_values_to,
    fold,
    fold_right,
    map_result,
    map_result_indexed,
    map_result_indexed_not_none,
    map_result_indexed_not_none_to,
    map_result_indexed_to,
    map_result_not_none,
    map_result_not_none_to,
    map_result_to,
    partition,
    values_of,
)
from tests.strategies import result_lists


def _tracking(results, seen):
    for result in results:
        seen.append(result)
        yield result


class TestCombine:
    """Tests for all-or-nothing collection."""

    def test_all_ok(self):
        assert combine([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_error_wins(self):
        results = [Ok(20), Ok(40), Err('E1'), Ok(60), Err('E2'), Ok(80)]
        assert combine(results) == Err('E1')

    def test_empty(self):
        assert combine([]) == Ok([])

    def test_stops_consuming_at_first_error(self):
        seen = []
        combine(_tracking([Ok(1), Err('stop'), Ok(3)], seen))
        assert seen == [Ok(1), Err('stop')]


class TestPartition:
    """Tests for splitting values from errors."""

    def test_preserves_relative_order(self):
        results = [Err('E2'), Ok('a'), Err('E2'), Ok('b'), Err('E1')]
        assert partition(results) == (['a', 'b'], ['E2', 'E2', 'E1'])

    def test_values_and_errors_of(self):
        assert values_of(Ok(1), Err('x'), Ok(2)) == [1, 2]
        assert errors_of(Ok(1), Err('x'), Ok(2)) == ['x']

    @given(result_lists)
    def test_partition_agrees_with_filters(self, results):
        assert partition(results) == (filter_values(results), filter_errors(results))


class TestFilters:
    """Tests for filtering into fresh or supplied collections."""

    def test_filter_values_and_errors(self):
        results = [Ok(1), Err('a'), Ok(2)]
        assert filter_values(results) == [1, 2]
        assert filter_errors(results) == ['a']

    def test_filter_values_to_list(self):
        destination = [0]
        assert filter_values_to([Ok(1), Err('a')], destination) is destination
        assert destination == [0, 1]

    def test_filter_errors_to_set(self):
        assert filter_errors_to([Err('a'), Err('a'), Ok(1)], set()) == {'a'}


class TestPredicates:
    """Tests for all/any/count helpers."""

    def test_all_and_any(self):
        mixed = [Ok(1), Err('e')]
        assert not all_ok(mixed)
        assert not all_err(mixed)
        assert any_ok(mixed)
        assert any_err(mixed)
        assert all_ok([Ok(1)])
        assert all_err([Err(1)])

    def test_empty_input(self):
        assert all_ok([])
        assert all_err([])
        assert not any_ok([])
        assert not any_err([])

    def test_counts(self):
        results = [Ok(1), Err('a'), Ok(2), Err('b'), Err('c')]
        assert count_ok(results) == 2
        assert count_err(results) == 3

    @given(result_lists)
    def test_counts_cover_input(self, results):
        assert count_ok(results) + count_err(results) == len(results)


class TestFold:
    """Tests for fold and fold_right with a fallible step."""

    def test_fold_sums(self):
        assert fold([20, 30, 40, 50], 10, lambda acc, x: Ok(acc + x)) == Ok(150)

    def test_fold_aborts_on_error(self):
        calls = []

        def step(acc, x):
            calls.append(x)
            return Err(f'bad {x}') if x == 30 else Ok(acc + x)

        assert fold([20, 30, 40], 0, step) == Err('bad 30')
        assert calls == [20, 30]

    def test_fold_right_order(self):
        assert fold_right(['a', 'b', 'c'], '', lambda x, acc: Ok(acc + x)) == Ok('cba')

    def test_fold_right_aborts_on_error(self):
        assert fold_right([1, 2, 3], 0, lambda x, acc: Err(x)) == Err(3)

    def test_fold_empty(self):
        assert fold([], 7, lambda acc, x: Err('never')) == Ok(7)


class TestMapResult:
    """Tests for the map_result family."""

    def test_map_result(self):
        assert map_result(['1', '2'], lambda s: Ok(int(s))) == Ok([1, 2])

    def test_map_result_short_circuits(self):
        calls = []

        def parse(s):
            calls.append(s)
            return Ok(int(s)) if s.isdigit() else Err(f'not a number: {s}')

        assert map_result(['1', 'x', '3'], parse) == Err('not a number: x')
        assert calls == ['1', 'x']

    def test_map_result_to(self):
        destination = set()
        assert map_result_to([1, 2, 2], destination, lambda x: Ok(x * 10)) == Ok({10, 20})
        assert map_result_to([1], [], lambda x: Err('no')) == Err('no')

    def test_map_result_not_none(self):
        result = map_result_not_none([1, 2, 3, 4], lambda x: Ok(x) if x % 2 == 0 else None)
        assert result == Ok([2, 4])
        assert map_result_not_none([1, 2], lambda x: Err(x) if x == 2 else None) == Err(2)
        assert map_result_not_none_to([1, 2], [0], lambda x: None) == Ok([0])

    def test_map_result_indexed(self):
        assert map_result_indexed(['a', 'b'], lambda i, s: Ok(f'{i}{s}')) == Ok(['0a', '1b'])
        assert map_result_indexed(['a', 'b'], lambda i, s: Err(i) if i == 1 else Ok(s)) == Err(1)
        assert map_result_indexed_to(['a'], ['z'], lambda i, s: Ok(s)) == Ok(['z', 'a'])

    def test_map_result_indexed_not_none(self):
        result = map_result_indexed_not_none(['a', 'b', 'c'], lambda i, s: None if i == 1 else Ok(s))
        assert result == Ok(['a', 'c'])
        assert map_result_indexed_not_none_to(['a'], [], lambda i, s: Err('x')) == Err('x')
