from abc import ABC, abstractmethod


class InsufficientFunds(Exception):
    """Raised by a ledger when it rejects a transfer."""


class LedgerServiceInterface(ABC):
    @abstractmethod
    async def free_balance(self, account: str) -> int:
        """
        Returns the balance the account can spend.

        :param account: The account to look up
        :return: The free balance, 0 for unknown accounts
        """
        pass

    @abstractmethod
    async def transfer(self, source: str, dest: str, amount: int, keep_alive: bool = True) -> None:
        """
        Moves the amount from source to dest.

        :param source: The paying account
        :param dest: The receiving account
        :param amount: The amount to move
        :param keep_alive: When set, the transfer must not take the source account below
        the minimum balance that keeps it alive
        :raises InsufficientFunds: if the transfer is rejected
        """
        pass
