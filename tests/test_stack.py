"""Tests for monotonic stack algorithms."""


class TestDailyTemperatures:
    """Tests for daily_temperatures."""

    def test_example(self, lib):
        """Reference example."""
        result = lib.daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])
        assert result == [1, 1, 4, 2, 1, 1, 0, 0]

    def test_empty(self, lib):
        """Empty input gives empty output."""
        assert lib.daily_temperatures([]) == []

    def test_decreasing(self, lib):
        """No warmer day ahead means all zeros."""
        assert lib.daily_temperatures([80, 70, 60]) == [0, 0, 0]

    def test_equal_is_not_warmer(self, lib):
        """Only strictly warmer days count."""
        assert lib.daily_temperatures([70, 70, 71]) == [2, 1, 0]

    def test_increasing(self, lib):
        """Rising temperatures wait one day each."""
        assert lib.daily_temperatures([30, 40, 50, 60]) == [1, 1, 1, 0]

    def test_last_day_is_zero(self, lib):
        """Trailing day never has a warmer future."""
        assert lib.daily_temperatures([50])[-1] == 0
