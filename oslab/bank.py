"""Shared bank balance updated by concurrent deposit and withdrawal threads."""

from __future__ import annotations

import sys
import threading
from typing import Callable

from .disksched import _atoi

DEPOSIT_THREADS = 7
WITHDRAW_THREADS = 3
UNBOUNDED_THREADS_EACH = 3
LIMIT = 400

Writer = Callable[[str], object]


class Account:
    """A balance guarded by a lock; every change is reported while the lock is held."""

    _deposit_label = "Deposit Amount"
    _withdraw_label = "Withdraw Amount"

    def __init__(self, balance: int = 0, report: Writer | None = None):
        self.balance = balance
        self._lock = threading.Lock()
        self._report = report

    def _change(self, delta: int, label: str) -> int:
        with self._lock:
            self.balance += delta
            if self._report is not None:
                self._report(f"{label} = {self.balance}")
            return self.balance

    def deposit(self, amount: int) -> int:
        """Add ``amount`` and return the new balance."""
        return self._change(amount, self._deposit_label)

    def withdraw(self, amount: int) -> int:
        """Subtract ``amount`` and return the new balance."""
        return self._change(-amount, self._withdraw_label)


class BoundedAccount(Account):
    """An account kept between zero and ``limit`` by counting semaphores.

    A deposit waits until there is room for one more transaction and a
    withdrawal waits until there is money for one. With ``timeout`` set, a
    wait that runs out raises TimeoutError; otherwise it blocks indefinitely.
    """

    _deposit_label = "Deposit: Amount"
    _withdraw_label = "Withdraw: Amount"

    def __init__(self, transaction_amount: int, limit: int = LIMIT, balance: int = 0,
                 report: Writer | None = None, timeout: float | None = None):
        if transaction_amount <= 0:
            raise ValueError("transaction amount must be positive")
        if not 0 <= balance <= limit:
            raise ValueError("balance must lie between zero and the limit")
        super().__init__(balance, report)
        self._deposits_allowed = threading.Semaphore((limit - balance) // transaction_amount)
        self._withdrawals_allowed = threading.Semaphore(balance // transaction_amount)
        self._timeout = timeout

    def _wait(self, semaphore: threading.Semaphore, what: str) -> None:
        if not semaphore.acquire(timeout=self._timeout):
            raise TimeoutError(f"timed out waiting for a {what} slot")

    def deposit(self, amount: int) -> int:
        """Wait for room, add ``amount`` and return the new balance."""
        self._wait(self._deposits_allowed, "deposit")
        balance = super().deposit(amount)
        self._withdrawals_allowed.release()
        return balance

    def withdraw(self, amount: int) -> int:
        """Wait for funds, subtract ``amount`` and return the new balance."""
        self._wait(self._withdrawals_allowed, "withdrawal")
        balance = super().withdraw(amount)
        self._deposits_allowed.release()
        return balance


def _run_threads(targets: list[Callable[[], object]]) -> None:
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def run_unbounded(deposit_amount: int, withdraw_amount: int, write: Writer = print) -> int:
    """Run three withdrawal then three deposit threads; return the final balance."""
    account = Account(report=write)
    targets = [lambda: account.withdraw(withdraw_amount)] * UNBOUNDED_THREADS_EACH
    targets += [lambda: account.deposit(deposit_amount)] * UNBOUNDED_THREADS_EACH
    _run_threads(targets)
    write(f"Final Amount = {account.balance}")
    return account.balance


def run_bounded(transaction_amount: int, write: Writer = print) -> int:
    """Run seven deposit and three withdrawal threads on a bounded account.

    Returns the final balance. If the amount leaves too few slots for every
    thread, the run blocks just as the semaphores dictate.
    """
    account = BoundedAccount(transaction_amount, report=write)

    def deposit() -> None:
        write("Executing deposit function")
        account.deposit(transaction_amount)

    def withdraw() -> None:
        write("Executing withdraw function")
        account.withdraw(transaction_amount)

    _run_threads([deposit] * DEPOSIT_THREADS + [withdraw] * WITHDRAW_THREADS)
    write(f"Final Amount = {account.balance}")
    return account.balance


def main(argv=None) -> int:
    """Usage: bank deposit_amount withdraw_amount."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: bank deposit_amount withdraw_amount")
        return 1
    run_unbounded(_atoi(args[0]), _atoi(args[1]), lambda line: print(line, flush=True))
    return 0


def main_bounded(argv=None) -> int:
    """Usage: bank-bounded transaction_amount."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: bank-bounded transaction_amount", file=sys.stderr)
        return 1
    try:
        run_bounded(_atoi(args[0]), lambda line: print(line, flush=True))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())