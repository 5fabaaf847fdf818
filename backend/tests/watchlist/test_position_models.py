"""Tests for Position, EnrichedPosition and suggest_thresholds."""

import pytest

from stockwatch.errors import ValidationError
from stockwatch.watchlist.models import EnrichedPosition, Position, PositionStatus, suggest_thresholds


class TestSuggestThresholds:
    """Default stop-loss / take-profit bands."""

    def test_bands(self):
        """Stop loss is 90% and take profit 130% of the buy price."""
        assert suggest_thresholds(10000.0) == (9000.0, 13000.0)

    def test_rounded_to_cents(self):
        """Test that suggestions are rounded to two decimals."""
        assert suggest_thresholds(333.33) == (300.0, 433.33)

    @pytest.mark.parametrize("price", [0.0, -1.0, float("nan")])
    def test_invalid_buy_price(self, price):
        """Test that non-positive buy prices are rejected."""
        with pytest.raises(ValidationError):
            suggest_thresholds(price)


class TestPosition:
    """Unit tests for the Position model."""

    def test_code_normalized(self):
        """Test that codes are trimmed and upper-cased."""
        assert Position(code=" bbca ", buy_price=9000).code == "BBCA"

    def test_numbers_coerced(self):
        """Test that numeric strings from stored documents become floats."""
        position = Position(code="BBCA", buy_price="9000", stop_loss="8100")
        assert position.buy_price == 9000.0
        assert position.stop_loss == 8100.0

    def test_thresholds_default_to_unset(self):
        """Test that thresholds default to zero (unset)."""
        position = Position(code="BBCA", buy_price=9000)
        assert position.stop_loss == 0.0
        assert position.take_profit == 0.0
        assert position.last_price == 0.0

    @pytest.mark.parametrize("price", [0, -100, "abc", None, True])
    def test_invalid_buy_price(self, price):
        """Test that the buy price must be a positive number."""
        with pytest.raises(ValidationError):
            Position(code="BBCA", buy_price=price)

    def test_negative_threshold_rejected(self):
        """Test that thresholds cannot be negative."""
        with pytest.raises(ValidationError):
            Position(code="BBCA", buy_price=9000, stop_loss=-1)

    def test_blank_code_rejected(self):
        """Test that a code is required."""
        with pytest.raises(ValidationError):
            Position(code="  ", buy_price=9000)

    def test_with_defaults_fills_missing_thresholds(self):
        """Omitted thresholds come from suggest_thresholds()."""
        position = Position.with_defaults("BBCA", 10000)
        assert (position.stop_loss, position.take_profit) == (9000.0, 13000.0)

    def test_with_defaults_keeps_overrides(self):
        """Explicit thresholds, including zero, are kept."""
        position = Position.with_defaults("BBCA", 10000, stop_loss=0, take_profit=12000)
        assert (position.stop_loss, position.take_profit) == (0.0, 12000.0)

    def test_with_last_price_keeps_everything_else(self):
        """Test that remembering a price does not touch the buy price."""
        position = Position(code="BBCA", buy_price=9000, stop_loss=8100, take_profit=11700, added_at=1.0)
        updated = position.with_last_price(9300)
        assert updated.last_price == 9300.0
        assert (updated.buy_price, updated.stop_loss, updated.take_profit, updated.added_at) == (
            9000.0,
            8100.0,
            11700.0,
            1.0,
        )

    def test_from_dict_tolerates_missing_optionals(self):
        """Records written by older versions lack thresholds and prices."""
        position = Position.from_dict({"code": "BBCA", "buyPrice": 9000})
        assert position.stop_loss == 0.0
        assert position.last_price == 0.0

    def test_dict_round_trip(self):
        """Test that to_dict/from_dict preserve a position."""
        position = Position(code="BBCA", buy_price=9000, stop_loss=8100, take_profit=11700, last_price=9250, added_at=5.0)
        assert Position.from_dict(position.to_dict()) == position


class TestEnrichedPosition:
    """Serialization of enriched rows."""

    def test_to_dict(self):
        """Test the row layout sent to clients."""
        position = Position(code="BBCA", buy_price=8000, stop_loss=7200, take_profit=10400, added_at=1.0)
        row = EnrichedPosition(
            position=position,
            current_price=8800.0,
            change=100.0,
            change_percent=1.1494,
            status=PositionStatus.NORMAL,
            name="Bank Central Asia Tbk.",
        )
        data = row.to_dict()

        assert data["code"] == "BBCA"
        assert data["name"] == "Bank Central Asia Tbk."
        assert data["currentPrice"] == 8800.0
        assert data["status"] == "Normal"
        assert data["gainPercent"] == 10.0
        assert data["quoted"] is True

    def test_name_falls_back_to_code(self):
        """Test that a row without a quote name shows its code."""
        row = EnrichedPosition(
            position=Position(code="XYZ1", buy_price=100),
            current_price=0.0,
            change=0.0,
            change_percent=0.0,
            status=PositionStatus.NORMAL,
            quoted=False,
        )
        assert row.to_dict()["name"] == "XYZ1"
        assert row.gain_percent == 0.0
