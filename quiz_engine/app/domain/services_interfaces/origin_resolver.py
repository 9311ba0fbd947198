from abc import ABC, abstractmethod
from quiz_engine.app.domain.entities.call_context import CallContext


class OriginResolverInterface(ABC):
    @abstractmethod
    async def resolve(self, ctx: CallContext) -> str:
        """
        Turns the authentication context of a call into the calling account.

        :param ctx: The context of the inbound call
        :return: The account making the call
        :raises Unauthenticated: for anonymous calls
        """
        pass
