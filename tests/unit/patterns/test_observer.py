"""Tests for the observer examples."""
from datetime import datetime
from unittest.mock import Mock

import pytest

from pattern_gallery.patterns.observer.social_network.refactored import (
    EventType,
    NotificationSystem,
)
from pattern_gallery.patterns.observer.social_network.refactored import User as SocialUser
from pattern_gallery.patterns.observer.status_updates.refactored import Follower
from pattern_gallery.patterns.observer.status_updates.refactored import User as StatusUser
from pattern_gallery.patterns.observer.stock_market.refactored import (
    PRICE_HISTORY_LIMIT,
    Investor,
    MarketAnalyst,
    MarketEvent,
    StockMarket,
)
from pattern_gallery.patterns.observer.weather_station.refactored import (
    CurrentConditionsDisplay,
    StatisticsDisplay,
    WeatherAlertSystem,
    WeatherCenter,
    WeatherData,
    WeatherLogger,
    WeatherStation,
)


class TestStatusUpdates:
    """Test subscribe, notify and unsubscribe."""

    def test_only_subscribers_are_notified(self, console):
        alice = StatusUser("Alice", console)
        bob, charlie = Follower("Bob", console), Follower("Charlie", console)
        alice.subscribe(bob)
        alice.subscribe(charlie)
        alice.subscribe(bob)

        alice.update_status("I'm happy today!")
        alice.unsubscribe(bob)
        alice.update_status("A new day!")

        assert [d["status"] for d in bob.received] == ["I'm happy today!"]
        assert [d["status"] for d in charlie.received] == ["I'm happy today!", "A new day!"]


class TestWeatherStation:
    """Test stations pushing measurements to their observers."""

    def setup_method(self):
        self.console = Mock()
        self.clock = Mock(return_value=datetime(2024, 3, 15, 10, 30))
        self.paris = WeatherStation("Paris", self.console, self.clock)
        self.lyon = WeatherStation("Lyon", self.console, self.clock)

    def test_display_receives_latest_measurements(self):
        display = CurrentConditionsDisplay("Town hall", self.console)
        display.subscribe(self.paris)

        self.paris.set_measurements(22.5, 65, 1013, 10, "SW")

        assert display.current.temperature == 22.5
        assert display.current.timestamp == self.clock.return_value

    def test_weather_data_is_a_copy(self):
        self.paris.set_measurements(22.5, 65, 1013, 10, "SW")

        data = self.paris.get_weather_data()
        data.temperature = 99

        assert self.paris.get_weather_data().temperature == 22.5

    def test_statistics_per_location(self):
        stats = StatisticsDisplay("National", self.console)
        stats.subscribe(self.paris)
        stats.subscribe(self.lyon)

        self.paris.set_measurements(20, 65, 1013, 10, "SW")
        self.paris.set_measurements(30, 45, 1010, 8, "S")
        self.lyon.set_measurements(24, 60, 1012, 5, "E")

        assert stats.min_temperature["Paris"] == 20
        assert stats.max_temperature["Paris"] == 30
        assert stats.get_average_temperature("Paris") == 25
        assert stats.reading_count == {"Paris": 2, "Lyon": 1}
        assert stats.get_average_temperature("Nice") is None

    def test_unsubscribed_observer_stops_receiving(self):
        weather_logger = WeatherLogger(self.console)
        weather_logger.subscribe(self.lyon)
        self.lyon.set_measurements(24, 60, 1012, 5, "E")

        weather_logger.unsubscribe(self.lyon)
        self.lyon.set_measurements(21, 82, 990, 50, "SW")

        assert weather_logger.get_log_count() == 1
        assert weather_logger.get_last_entry().temperature == 24

    def test_alerts(self):
        alerts = WeatherAlertSystem("National alert", self.console, self.clock)
        alerts.subscribe(self.lyon)

        self.lyon.set_measurements(36, 80, 965, 65, "SW")
        self.lyon.set_measurements(-15, 80, 1000, 10, "N")

        assert alerts.get_alert_count() == 4
        assert [a.message.split(" ALERT")[0] for a in alerts.get_alerts_by_type("temperature")] == [
            "EXTREME HEAT", "EXTREME COLD"]
        assert len(alerts.get_alerts_by_type("wind")) == 1
        assert len(alerts.get_alerts_by_type("pressure")) == 1

    def test_alert_thresholds(self):
        alerts = WeatherAlertSystem("National alert", self.console, self.clock)

        assert alerts.set_alert_threshold("high_temperature", 30) is True
        assert alerts.set_alert_threshold("humidity", 90) is False

        alerts.update(WeatherData(
            location="Paris", timestamp=self.clock(), temperature=32.2, pressure=1010))
        assert alerts.get_alerts_by_type("temperature")[0].message == "EXTREME HEAT ALERT in Paris: 32.2°C"

    def test_weather_center(self):
        center = WeatherCenter("National Weather Center", self.console)
        center.add_station(self.paris)

        assert center.get_station("Paris") is self.paris
        assert center.remove_station("Lyon") is False
        assert center.remove_station("Paris") is True
        assert center.get_all_stations() == []


class TestStockMarket:
    """Test per-event subscriptions and investor reactions."""

    def setup_method(self):
        self.console = Mock()
        self.market = StockMarket("NYSE", self.console)
        self.investor = Investor("Alice", 1000, self.console)
        self.investor.join_market(self.market)

    def test_observers_receive_only_subscribed_events(self):
        observer = Mock()
        self.market.subscribe(MarketEvent.MARKET_OPENED, observer)

        self.market.add_stock("AAPL", 100)
        self.market.open()

        observer.update.assert_called_once()
        assert observer.update.call_args.args[0] == MarketEvent.MARKET_OPENED

    def test_unsubscribe_removes_empty_event_lists(self):
        observer = Mock()
        self.market.subscribe(MarketEvent.MARKET_CLOSED, observer)
        self.investor.leave_market(self.market)

        self.market.unsubscribe(MarketEvent.MARKET_CLOSED, observer)

        assert self.market.observers == {}

    def test_percent_change_is_rounded(self):
        observer = Mock()
        self.market.add_stock("MSFT", 305.8)
        self.market.subscribe(MarketEvent.PRICE_CHANGED, observer)

        self.market.update_stock_price("MSFT", 285.4)

        assert observer.update.call_args.args[1]["percent_change"] == -6.67

    def test_unknown_stock(self):
        assert self.market.update_stock_price("TSLA", 10) is False
        assert self.market.remove_stock("TSLA") is False

    def test_zero_priced_stock_cannot_be_updated(self):
        observer = Mock()
        self.market.add_stock("PENNY", 0)
        self.market.subscribe(MarketEvent.PRICE_CHANGED, observer)

        assert self.market.update_stock_price("PENNY", 1.0) is False
        assert self.market.stocks["PENNY"] == 0
        observer.update.assert_not_called()

    def test_affordable_new_stocks_are_watched(self):
        self.market.add_stock("AAPL", 100)
        self.market.add_stock("GOOGL", 2750.75)

        assert self.investor.watchlist == {"AAPL"}

    def test_drop_triggers_buy_and_rise_triggers_sell(self):
        self.market.add_stock("AAPL", 100)

        self.market.update_stock_price("AAPL", 90)
        assert self.investor.portfolio == {"AAPL": 1}
        assert self.investor.budget == 910

        self.market.update_stock_price("AAPL", 100)
        assert self.investor.portfolio == {}
        assert self.investor.budget == 1010

    def test_insufficient_funds(self):
        self.market.add_stock("GOOGL", 2750.75)

        assert self.investor.buy_stock("GOOGL", 1) is False
        assert self.investor.portfolio == {}

    def test_removed_stock_leaves_watchlist(self):
        self.market.add_stock("AAPL", 100)

        self.market.remove_stock("AAPL")

        assert self.investor.watchlist == set()

    def test_portfolio_value(self):
        self.market.add_stock("AAPL", 100)
        self.investor.buy_stock("AAPL", 3)
        self.market.update_stock_price("AAPL", 101)

        assert self.investor.get_portfolio_value() == pytest.approx(303)


class TestMarketAnalyst:
    """Test trend analysis and recommendations."""

    def setup_method(self):
        self.console = Mock()
        self.market = StockMarket("NYSE", self.console)
        self.analyst = MarketAnalyst("David", "Technology", self.console)
        self.market.subscribe(MarketEvent.STOCK_ADDED, self.analyst)
        self.market.subscribe(MarketEvent.PRICE_CHANGED, self.analyst)

    def test_recommendations_sorted_by_symbol(self):
        for symbol in ("MSFT", "AAPL", "AMZN"):
            self.market.add_stock(symbol, 100)
            self.market.update_stock_price(symbol, 100)
        self.market.update_stock_price("MSFT", 90)
        self.market.update_stock_price("AAPL", 110)
        self.market.update_stock_price("AMZN", 101)

        recommendations = self.analyst.get_market_recommendations()

        assert [(r.symbol, r.recommendation) for r in recommendations] == [
            ("AAPL", "SELL"), ("AMZN", "HOLD"), ("MSFT", "BUY")]

    def test_needs_two_prices(self):
        self.market.add_stock("AAPL", 100)
        self.market.update_stock_price("AAPL", 120)

        assert self.analyst.get_market_recommendations() == []

    def test_history_is_bounded(self):
        self.market.add_stock("AAPL", 100)
        for step in range(PRICE_HISTORY_LIMIT + 5):
            self.market.update_stock_price("AAPL", 100 + step)

        assert len(self.analyst.price_history["AAPL"]) == PRICE_HISTORY_LIMIT
        assert self.analyst.price_history["AAPL"][0]["price"] == 105


class TestSocialNetwork:
    """Test users observing each other and the central log."""

    def setup_method(self):
        self.console = Mock()
        self.alice, self.bob, self.charlie = (SocialUser(name, self.console)
                                              for name in ("Alice", "Bob", "Charlie"))
        self.system = NotificationSystem(self.console)
        for user in (self.alice, self.bob, self.charlie):
            user.add_observer(self.system)

    def test_followers_are_notified_of_posts(self):
        self.bob.follow(self.alice)

        self.alice.create_post("Hello world!")

        assert [n.message for n in self.bob.get_notifications()] == ['Alice posted: "Hello world!"']
        assert self.charlie.get_notifications() == []

    def test_follow_and_like_notify_the_author(self):
        self.bob.follow(self.alice)
        self.alice.create_post("Hello world!")

        assert self.bob.like_post(self.alice, 0) is True
        assert self.bob.like_post(self.alice, 5) is False

        assert [n.message for n in self.alice.get_notifications()] == [
            "Bob started following you",
            'Bob liked your post: "Hello world!"',
        ]
        assert self.alice.posts[0].likes == 1

    def test_unfollow(self):
        self.charlie.follow(self.alice)
        self.charlie.unfollow(self.alice)

        self.alice.create_post("Charlie will not see this one")

        assert self.charlie.get_notifications() == []

    def test_mark_as_read(self):
        self.bob.follow(self.alice)

        self.alice.mark_notifications_as_read()

        assert self.alice.get_notifications(only_unread=True) == []
        assert len(self.alice.get_notifications()) == 1

    def test_system_statistics_count_published_posts(self):
        self.bob.follow(self.alice)
        self.alice.create_post("Hello world!")
        self.charlie.create_post("I'm learning Python!")

        stats = self.system.get_statistics()

        assert stats["total_events"] == 2
        assert stats["events_by_type"] == {EventType.POST_CREATED.value: 2}
        assert stats["events_by_user"] == {"Alice": 1, "Charlie": 1}
