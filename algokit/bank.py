"""Thread-safe accounts and transfers between them."""

import threading
from contextlib import ExitStack

__all__ = ["Account", "Bank"]


class Account:
    """A balance guarded by a reentrant lock."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = balance
        self.lock = threading.RLock()

    def credit(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        with self.lock:
            self._balance += amount

    def debit(self, amount: int) -> bool:
        """Take ``amount`` out if the balance covers it; return whether it did."""
        with self.lock:
            if self._balance >= amount:
                self._balance -= amount
                return True
            return False

    def balance(self) -> int:
        """Current balance."""
        with self.lock:
            return self._balance


class Bank:
    """A fixed set of accounts opened with the same balance."""

    def __init__(self, accounts: int, initial_balance: int) -> None:
        if accounts < 0:
            raise ValueError("number of accounts must not be negative")
        self._accounts = [Account(initial_balance) for _ in range(accounts)]

    def transfer(self, source: int, target: int, amount: int) -> bool:
        """Move ``amount`` from ``source`` to ``target``; False if impossible."""
        count = len(self._accounts)
        if not (0 <= source < count and 0 <= target < count):
            return False
        with ExitStack() as stack:
            for index in sorted({source, target}):
                stack.enter_context(self._accounts[index].lock)
            if not self._accounts[source].debit(amount):
                return False
            self._accounts[target].credit(amount)
            return True

    def balances(self) -> list[int]:
        """Balance of every account, by index."""
        return [account.balance() for account in self._accounts]