from quiz_engine.app.domain.services_interfaces.ledger_service import InsufficientFunds, LedgerServiceInterface
from typing import Optional
import logging


logger = logging.getLogger('infrastructure')


class MemoryLedgerService(LedgerServiceInterface):
    """
    In-process balances. A transfer with keep_alive may not take the source below
    `existential_deposit`, a transfer without it may only empty the source.
    """
    def __init__(self, balances: Optional[dict[str, int]] = None, existential_deposit: int = 1):
        self.balances: dict[str, int] = dict(balances or {})
        self.existential_deposit = existential_deposit

    async def free_balance(self, account: str) -> int:
        return self.balances.get(account, 0)

    async def deposit(self, account: str, amount: int) -> None:
        if amount < 0:
            raise ValueError("Deposit amount can't be negative")
        self.balances[account] = self.balances.get(account, 0) + amount

    async def transfer(self, source: str, dest: str, amount: int, keep_alive: bool = True) -> None:
        if amount < 0:
            raise ValueError("Transfer amount can't be negative")
        if amount == 0:
            return
        balance = self.balances.get(source, 0)
        minimum = self.existential_deposit if keep_alive else 0
        if balance - amount < minimum:
            raise InsufficientFunds(f"{source} can't pay {amount} out of {balance}")
        self.balances[source] = balance - amount
        self.balances[dest] = self.balances.get(dest, 0) + amount
        logger.info("TRANSFERRED %s TO %s", amount, dest, extra={'user': source})
