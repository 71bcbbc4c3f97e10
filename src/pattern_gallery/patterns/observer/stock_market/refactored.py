"""
Stock market with observers subscribed per event type.

Investors and analysts pick the market events they care about. The market
only knows it has observers for an event type, never what they do with it.
"""
import math
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional, Set

from pydantic import BaseModel

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

Clock = Callable[[], datetime]

PRICE_HISTORY_LIMIT = 10


class MarketEvent(str, Enum):
    STOCK_ADDED = "stock-added"
    STOCK_REMOVED = "stock-removed"
    PRICE_CHANGED = "price-changed"
    MARKET_OPENED = "market-opened"
    MARKET_CLOSED = "market-closed"


class Recommendation(BaseModel):
    symbol: str
    current_price: float
    recommendation: str
    reason: str


class Observer(ABC):
    @abstractmethod
    def update(self, event_type: MarketEvent, data: Dict[str, Any]) -> None: ...


class Observable:
    """Keeps one observer list per event type."""

    def __init__(self, console: ConsolePort):
        self.console = console
        self.observers: Dict[MarketEvent, List[Observer]] = {}

    def subscribe(self, event_type: MarketEvent, observer: Observer) -> None:
        observers = self.observers.setdefault(event_type, [])
        if observer not in observers:
            observers.append(observer)
            self.console.print(f"Observer subscribed to event: {event_type.value}")

    def unsubscribe(self, event_type: MarketEvent, observer: Observer) -> None:
        observers = self.observers.get(event_type)
        if not observers or observer not in observers:
            return
        observers.remove(observer)
        self.console.print(f"Observer unsubscribed from event: {event_type.value}")
        if not observers:
            del self.observers[event_type]

    def notify(self, event_type: MarketEvent, data: Dict[str, Any]) -> None:
        for observer in list(self.observers.get(event_type, ())):
            observer.update(event_type, data)


class StockMarket(Observable):
    def __init__(self, name: str, console: ConsolePort, clock: Clock = datetime.now):
        super().__init__(console)
        self.name = name
        self.clock = clock
        self.stocks: Dict[str, float] = {}
        self.is_open = False

    def open(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        self.console.print(f"Market {self.name} opened")
        self.notify(MarketEvent.MARKET_OPENED, {"market_name": self.name, "timestamp": self.clock()})

    def close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self.console.print(f"Market {self.name} closed")
        self.notify(MarketEvent.MARKET_CLOSED, {"market_name": self.name, "timestamp": self.clock()})

    def add_stock(self, symbol: str, initial_price: float) -> None:
        self.stocks[symbol] = initial_price
        self.console.print(f"Stock {symbol} added to the market at {initial_price}€")
        self.notify(MarketEvent.STOCK_ADDED, {"symbol": symbol, "price": initial_price,
                                              "market_name": self.name})

    def remove_stock(self, symbol: str) -> bool:
        if symbol not in self.stocks:
            self.console.print(f"Error: stock {symbol} not found")
            return False
        last_price = self.stocks.pop(symbol)
        self.console.print(f"Stock {symbol} removed from the market")
        self.notify(MarketEvent.STOCK_REMOVED, {"symbol": symbol, "last_price": last_price,
                                                "market_name": self.name})
        return True

    def update_stock_price(self, symbol: str, new_price: float) -> bool:
        if not self.stocks.get(symbol):
            self.console.print(f"Error: stock {symbol} not found")
            return False
        old_price = self.stocks[symbol]
        percent_change = round((new_price - old_price) / old_price * 100, 2)
        self.stocks[symbol] = new_price
        self.console.print(f"{symbol} price updated: {old_price}€ -> {new_price}€ ({percent_change:.2f}%)")
        self.notify(MarketEvent.PRICE_CHANGED, {
            "symbol": symbol,
            "old_price": old_price,
            "new_price": new_price,
            "percent_change": percent_change,
            "timestamp": self.clock(),
            "market_name": self.name,
        })
        return True

    def get_stock_price(self, symbol: str) -> Optional[float]:
        return self.stocks.get(symbol)

    def get_all_stocks(self) -> List[Dict[str, Any]]:
        return [{"symbol": symbol, "price": price} for symbol, price in self.stocks.items()]


INVESTOR_EVENTS = tuple(MarketEvent)


class Investor(Observer):
    def __init__(self, name: str, budget: float, console: ConsolePort):
        self.name = name
        self.budget = budget
        self.console = console
        self.portfolio: Dict[str, int] = {}
        self.watchlist: Set[str] = set()
        self.market: Optional[StockMarket] = None

    def update(self, event_type: MarketEvent, data: Dict[str, Any]) -> None:
        if event_type == MarketEvent.STOCK_ADDED:
            self.handle_new_stock(data)
        elif event_type == MarketEvent.PRICE_CHANGED:
            self.handle_price_change(data)
        elif event_type == MarketEvent.MARKET_OPENED:
            self.console.print(f"[{self.name}] Market {data['market_name']} is open")
        elif event_type == MarketEvent.MARKET_CLOSED:
            self.console.print(f"[{self.name}] Market {data['market_name']} is closed")
        elif event_type == MarketEvent.STOCK_REMOVED and data["symbol"] in self.watchlist:
            self.console.print(f"[{self.name}] Alert: {data['symbol']} was removed from the market")
            self.watchlist.discard(data["symbol"])

    def handle_new_stock(self, data: Dict[str, Any]) -> None:
        self.console.print(f"[{self.name}] New stock available: {data['symbol']} at {data['price']}€")
        self.analyze_stock(data["symbol"], data["price"])

    def handle_price_change(self, data: Dict[str, Any]) -> None:
        symbol = data["symbol"]
        if symbol in self.portfolio:
            shares = self.portfolio[symbol]
            value_change = (data["new_price"] - data["old_price"]) * shares
            sign = "+" if value_change > 0 else ""
            self.console.print(f"[{self.name}] Portfolio update - {symbol}: {shares} shares, "
                               f"value: {data['new_price'] * shares:.2f}€ ({sign}{value_change:.2f}€)")
        if symbol in self.watchlist:
            self.console.print(f"[{self.name}] Alert - {symbol}: {data['old_price']}€ -> "
                               f"{data['new_price']}€ ({data['percent_change']:.2f}%)")
            self.make_investment_decision(data)

    def join_market(self, market: StockMarket) -> None:
        self.market = market
        for event_type in INVESTOR_EVENTS:
            market.subscribe(event_type, self)
        self.console.print(f"[{self.name}] joined market {market.name}")

    def leave_market(self, market: StockMarket) -> None:
        for event_type in INVESTOR_EVENTS:
            market.unsubscribe(event_type, self)
        if self.market is market:
            self.market = None
        self.console.print(f"[{self.name}] left market {market.name}")

    def watch_stock(self, symbol: str) -> bool:
        if self.market is not None and self.market.get_stock_price(symbol):
            self.watchlist.add(symbol)
            self.console.print(f"[{self.name}] {symbol} added to the watchlist")
            return True
        self.console.print(f"[{self.name}] Error: stock {symbol} not available on the market")
        return False

    def unwatch_stock(self, symbol: str) -> None:
        if symbol in self.watchlist:
            self.watchlist.discard(symbol)
            self.console.print(f"[{self.name}] {symbol} removed from the watchlist")

    def buy_stock(self, symbol: str, quantity: int) -> bool:
        if self.market is None:
            self.console.print(f"[{self.name}] Error: not connected to a market")
            return False
        price = self.market.get_stock_price(symbol)
        if not price:
            self.console.print(f"[{self.name}] Error: stock {symbol} not available")
            return False
        cost = price * quantity
        if cost > self.budget:
            self.console.print(f"[{self.name}] Insufficient funds to buy {quantity} {symbol}")
            return False
        self.budget -= cost
        self.portfolio[symbol] = self.portfolio.get(symbol, 0) + quantity
        self.console.print(f"[{self.name}] Bought {quantity} {symbol} at {price}€ (total: {cost:.2f}€)")
        return True

    def sell_stock(self, symbol: str, quantity: int) -> bool:
        if self.market is None:
            self.console.print(f"[{self.name}] Error: not connected to a market")
            return False
        if self.portfolio.get(symbol, 0) < quantity:
            self.console.print(f"[{self.name}] Not enough shares to sell {quantity} {symbol}")
            return False
        price = self.market.get_stock_price(symbol)
        revenue = price * quantity
        self.budget += revenue
        self.portfolio[symbol] -= quantity
        if self.portfolio[symbol] == 0:
            del self.portfolio[symbol]
        self.console.print(f"[{self.name}] Sold {quantity} {symbol} at {price}€ (total: {revenue:.2f}€)")
        return True

    def analyze_stock(self, symbol: str, price: float) -> None:
        """Watch affordable stocks automatically."""
        if price < 500 and self.budget > price * 5:
            self.watch_stock(symbol)

    def make_investment_decision(self, data: Dict[str, Any]) -> None:
        symbol = data["symbol"]
        percent_change = data["percent_change"]
        if percent_change <= -5:
            quantity = math.floor(self.budget * 0.1 / data["new_price"])
            if quantity > 0:
                self.console.print(f"[{self.name}] Buying opportunity detected for {symbol}")
                self.buy_stock(symbol, quantity)
        elif percent_change >= 10 and self.portfolio.get(symbol):
            quantity = math.ceil(self.portfolio[symbol] * 0.5)
            if quantity > 0:
                self.console.print(f"[{self.name}] Selling opportunity detected for {symbol}")
                self.sell_stock(symbol, quantity)

    def get_portfolio_value(self) -> float:
        if self.market is None:
            return 0.0
        total = 0.0
        for symbol, quantity in self.portfolio.items():
            price = self.market.get_stock_price(symbol)
            if price:
                total += price * quantity
        return total

    def get_portfolio_summary(self) -> float:
        self.console.print(f"=== {self.name}'s portfolio ===")
        self.console.print(f"Available budget: {self.budget:.2f}€")
        if self.market is None:
            self.console.print("Not connected to a market, current prices are unavailable")
            return 0.0
        for symbol, quantity in self.portfolio.items():
            price = self.market.get_stock_price(symbol)
            if price:
                self.console.print(f"{symbol}: {quantity} shares at {price}€ = {price * quantity:.2f}€")
        total = self.get_portfolio_value()
        self.console.print(f"Total portfolio value: {total:.2f}€")
        self.console.print(f"Net worth: {self.budget + total:.2f}€")
        return total


class MarketAnalyst(Observer):
    def __init__(self, name: str, speciality: str, console: ConsolePort, clock: Clock = datetime.now):
        self.name = name
        self.speciality = speciality
        self.console = console
        self.clock = clock
        self.stocks_tracked: Set[str] = set()
        self.price_history: Dict[str, Deque[Dict[str, Any]]] = {}

    def update(self, event_type: MarketEvent, data: Dict[str, Any]) -> None:
        if event_type == MarketEvent.STOCK_ADDED:
            self.console.print(f"[Analyst {self.name}] New stock of interest: {data['symbol']}")
            self.track_stock(data["symbol"])
        elif event_type == MarketEvent.PRICE_CHANGED and data["symbol"] in self.stocks_tracked:
            self.record_price(data["symbol"], data["new_price"])
            self.analyze_stock_trend(data["symbol"], data["percent_change"])

    def track_stock(self, symbol: str) -> None:
        self.stocks_tracked.add(symbol)
        self.price_history[symbol] = deque(maxlen=PRICE_HISTORY_LIMIT)
        self.console.print(f"[Analyst {self.name}] Now tracking {symbol}")

    def record_price(self, symbol: str, price: float) -> None:
        history = self.price_history.setdefault(symbol, deque(maxlen=PRICE_HISTORY_LIMIT))
        history.append({"price": price, "timestamp": self.clock()})

    def analyze_stock_trend(self, symbol: str, percent_change: float) -> Optional[float]:
        """Report strong moves and return the moving average, if there is enough history."""
        history = self.price_history.get(symbol, ())
        if len(history) < 2:
            return None
        if percent_change > 5:
            self.console.print(f"[Analyst {self.name}] {symbol} shows a strong upward trend (+{percent_change:.2f}%)")
        elif percent_change < -5:
            self.console.print(f"[Analyst {self.name}] {symbol} shows a strong downward trend ({percent_change:.2f}%)")
        moving_average = sum(entry["price"] for entry in history) / len(history)
        self.console.print(f"[Analyst {self.name}] Moving average over {len(history)} points "
                           f"for {symbol}: {moving_average:.2f}€")
        return moving_average

    def get_market_recommendations(self) -> List[Recommendation]:
        recommendations = []
        for symbol in sorted(self.stocks_tracked):
            history = self.price_history.get(symbol, ())
            if len(history) < 2:
                continue
            current = history[-1]["price"]
            previous = history[-2]["price"]
            percent_change = round((current - previous) / previous * 100, 2)
            if percent_change > 3:
                recommendation = "SELL"
            elif percent_change < -3:
                recommendation = "BUY"
            else:
                recommendation = "HOLD"
            recommendations.append(Recommendation(
                symbol=symbol,
                current_price=current,
                recommendation=recommendation,
                reason=f"Recent change of {percent_change:.2f}%",
            ))
        return recommendations

    def publish_analysis(self) -> List[Recommendation]:
        self.console.print(f"=== Market analysis by {self.name} (speciality: {self.speciality}) ===")
        recommendations = self.get_market_recommendations()
        if not recommendations:
            self.console.print("Not enough data to make recommendations")
        for rec in recommendations:
            self.console.print(f"{rec.symbol} - {rec.current_price}€ - {rec.recommendation} - {rec.reason}")
        return recommendations


def run(context: DemoContext) -> None:
    console = context.console
    nyse = StockMarket("NYSE", console, context.clock)

    alice = Investor("Alice", 10000, console)
    bob = Investor("Bob", 5000, console)
    charlie = Investor("Charlie", 15000, console)
    analyst = MarketAnalyst("David", "Technology", console, context.clock)

    for investor in (alice, bob, charlie):
        investor.join_market(nyse)
    nyse.subscribe(MarketEvent.STOCK_ADDED, analyst)
    nyse.subscribe(MarketEvent.PRICE_CHANGED, analyst)

    nyse.open()
    nyse.add_stock("AAPL", 150.25)
    nyse.add_stock("GOOGL", 2750.75)
    nyse.add_stock("AMZN", 3220.5)
    nyse.add_stock("MSFT", 305.8)

    alice.watch_stock("MSFT")
    bob.watch_stock("GOOGL")
    bob.watch_stock("AMZN")
    charlie.watch_stock("AAPL")
    charlie.watch_stock("GOOGL")

    alice.buy_stock("AAPL", 10)
    alice.buy_stock("GOOGL", 2)
    bob.buy_stock("AMZN", 1)
    bob.buy_stock("MSFT", 5)
    charlie.buy_stock("AAPL", 20)
    charlie.buy_stock("MSFT", 10)

    console.print("=== Market fluctuations ===")
    nyse.update_stock_price("AAPL", 160.75)
    nyse.update_stock_price("AMZN", 2950.3)
    nyse.update_stock_price("GOOGL", 2900.1)
    nyse.update_stock_price("MSFT", 285.4)

    analyst.publish_analysis()
    for investor in (alice, bob, charlie):
        investor.get_portfolio_summary()

    nyse.close()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
