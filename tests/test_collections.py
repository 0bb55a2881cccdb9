"""
Tests for the rating filter, sequence concatenation and max-price selector.
"""

from core.domain.models import Product, RatedItem
from core.services.products import get_most_expensive_product
from core.services.ratings import MIN_RATING, filter_by_rating
from core.services.sequences import concatenate_arrays


class TestFilterByRating:
    """Test rating threshold filtering."""

    def test_keeps_only_high_ratings(self):
        items = [RatedItem(title="A", rating=5), RatedItem(title="B", rating=3)]

        assert filter_by_rating(items) == [RatedItem(title="A", rating=5)]

    def test_threshold_is_inclusive(self):
        items = [RatedItem(title="edge", rating=MIN_RATING), RatedItem(title="below", rating=3.99)]

        assert [item.title for item in filter_by_rating(items)] == ["edge"]

    def test_preserves_order(self):
        items = [RatedItem(title=t, rating=r) for t, r in [("x", 4), ("y", 1), ("z", 4.5)]]

        assert [item.title for item in filter_by_rating(items)] == ["x", "z"]

    def test_empty_input(self):
        assert filter_by_rating([]) == []

    def test_does_not_mutate_input(self):
        items = [RatedItem(title="A", rating=5), RatedItem(title="B", rating=3)]
        snapshot = list(items)

        result = filter_by_rating(items)

        assert items == snapshot
        assert result is not items

    def test_repeated_calls_identical(self):
        items = [RatedItem(title="A", rating=4), RatedItem(title="B", rating=2)]

        assert filter_by_rating(items) == filter_by_rating(items)


class TestConcatenateArrays:
    """Test one-level flattening."""

    def test_concatenates_in_argument_order(self):
        assert concatenate_arrays([1, 2], [3], []) == [1, 2, 3]

    def test_no_arguments(self):
        assert concatenate_arrays() == []

    def test_flattens_only_one_level(self):
        assert concatenate_arrays([[1], [2]], [[3]]) == [[1], [2], [3]]

    def test_does_not_mutate_inputs(self):
        first, second = [1, 2], [3]

        result = concatenate_arrays(first, second)
        result.append(4)

        assert first == [1, 2]
        assert second == [3]

    def test_single_sequence_returns_copy(self):
        source = ["a"]

        result = concatenate_arrays(source)

        assert result == source
        assert result is not source

    def test_repeated_calls_identical(self):
        first, second = [1], [2, 3]

        assert concatenate_arrays(first, second) == concatenate_arrays(first, second)


class TestMostExpensiveProduct:
    """Test max-price scan."""

    def test_first_of_ties_wins(self):
        products = [
            Product(name="A", price=10),
            Product(name="B", price=20),
            Product(name="C", price=20),
        ]

        assert get_most_expensive_product(products) == Product(name="B", price=20)

    def test_empty_returns_none(self):
        assert get_most_expensive_product([]) is None

    def test_single_product(self):
        only = Product(name="solo", price=0)

        assert get_most_expensive_product([only]) is only

    def test_negative_prices(self):
        products = [Product(name="a", price=-5), Product(name="b", price=-1)]

        assert get_most_expensive_product(products).name == "b"

    def test_repeated_calls_identical_and_input_unchanged(self):
        products = [
            Product(name="A", price=10),
            Product(name="B", price=20),
            Product(name="C", price=20),
        ]
        snapshot = list(products)

        first = get_most_expensive_product(products)
        second = get_most_expensive_product(products)

        assert first == second == Product(name="B", price=20)
        assert products == snapshot
