"""Stock market calling every investor method directly."""
import math
from typing import Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class StockMarket:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.stocks: Dict[str, float] = {}
        self.investors: List["Investor"] = []

    def add_stock(self, symbol: str, initial_price: float) -> None:
        self.stocks[symbol] = initial_price
        self.console.print(f"Stock {symbol} added to the market at {initial_price}€")
        for investor in self.investors:
            investor.notify_new_stock(symbol, initial_price)

    def update_stock_price(self, symbol: str, new_price: float) -> bool:
        if not self.stocks.get(symbol):
            self.console.print(f"Error: stock {symbol} not found")
            return False
        old_price = self.stocks[symbol]
        percent_change = (new_price - old_price) / old_price * 100
        self.stocks[symbol] = new_price
        self.console.print(f"{symbol} price updated: {old_price}€ -> {new_price}€ ({percent_change:.2f}%)")
        for investor in self.investors:
            investor.notify_price_change(symbol, old_price, new_price)
        return True

    def register_investor(self, investor: "Investor") -> None:
        self.investors.append(investor)
        self.console.print(f"New investor registered: {investor.name}")

    def remove_investor(self, investor: "Investor") -> None:
        if investor in self.investors:
            self.investors.remove(investor)
            self.console.print(f"Investor removed: {investor.name}")

    def get_stock_price(self, symbol: str):
        return self.stocks.get(symbol)


class Investor:
    def __init__(self, name: str, budget: float, console: ConsolePort):
        self.name = name
        self.budget = budget
        self.console = console
        self.portfolio: Dict[str, int] = {}
        self.watchlist: List[str] = []

    def notify_price_change(self, symbol: str, old_price: float, new_price: float) -> None:
        if symbol in self.portfolio:
            shares = self.portfolio[symbol]
            value_change = (new_price - old_price) * shares
            sign = "+" if value_change > 0 else ""
            self.console.print(f"[{self.name}] Portfolio update - {symbol}: {shares} shares, "
                               f"value: {new_price * shares:.2f}€ ({sign}{value_change:.2f}€)")
        if symbol in self.watchlist:
            percent_change = (new_price - old_price) / old_price * 100
            self.console.print(f"[{self.name}] Alert - {symbol}: {old_price}€ -> {new_price}€ "
                               f"({percent_change:.2f}%)")
            self.make_investment_decision(symbol, old_price, new_price)

    def notify_new_stock(self, symbol: str, price: float) -> None:
        self.console.print(f"[{self.name}] New stock available: {symbol} at {price}€")

    def add_to_watchlist(self, symbol: str) -> None:
        if symbol not in self.watchlist:
            self.watchlist.append(symbol)
            self.console.print(f"[{self.name}] {symbol} added to the watchlist")

    def buy_stock(self, market: StockMarket, symbol: str, quantity: int) -> bool:
        price = market.get_stock_price(symbol)
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

    def make_investment_decision(self, symbol: str, old_price: float, new_price: float) -> None:
        # The decision is only announced: the investor has no market reference to trade with.
        percent_change = (new_price - old_price) / old_price * 100
        if percent_change <= -5:
            if math.floor(self.budget * 0.1 / new_price) > 0:
                self.console.print(f"[{self.name}] Buying opportunity detected for {symbol}")
        elif percent_change >= 10 and self.portfolio.get(symbol):
            self.console.print(f"[{self.name}] Selling opportunity detected for {symbol}")

    def get_portfolio_summary(self, market: StockMarket) -> float:
        self.console.print(f"=== {self.name}'s portfolio ===")
        self.console.print(f"Available budget: {self.budget:.2f}€")
        total = 0.0
        for symbol, quantity in self.portfolio.items():
            price = market.get_stock_price(symbol)
            total += price * quantity
            self.console.print(f"{symbol}: {quantity} shares at {price}€ = {price * quantity:.2f}€")
        self.console.print(f"Total portfolio value: {total:.2f}€")
        self.console.print(f"Net worth: {self.budget + total:.2f}€")
        return total


def run(context: DemoContext) -> None:
    console = context.console
    market = StockMarket(console)
    market.add_stock("AAPL", 150.25)
    market.add_stock("GOOGL", 2750.75)
    market.add_stock("AMZN", 3220.5)
    market.add_stock("MSFT", 305.8)

    alice = Investor("Alice", 10000, console)
    bob = Investor("Bob", 5000, console)
    charlie = Investor("Charlie", 15000, console)
    for investor in (alice, bob, charlie):
        market.register_investor(investor)

    alice.add_to_watchlist("MSFT")
    bob.add_to_watchlist("GOOGL")
    bob.add_to_watchlist("AMZN")
    charlie.add_to_watchlist("AAPL")

    alice.buy_stock(market, "AAPL", 10)
    bob.buy_stock(market, "AMZN", 1)
    charlie.buy_stock(market, "AAPL", 20)

    market.update_stock_price("AAPL", 160.75)
    market.update_stock_price("AMZN", 2950.3)
    market.update_stock_price("MSFT", 285.4)

    for investor in (alice, bob, charlie):
        investor.get_portfolio_summary(market)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
