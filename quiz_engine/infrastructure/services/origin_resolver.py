from quiz_engine.app.domain.services_interfaces.origin_resolver import OriginResolverInterface
from quiz_engine.app.domain.entities.call_context import CallContext
from quiz_engine.app.domain.errors import Unauthenticated


class SignedOriginResolver(OriginResolverInterface):
    async def resolve(self, ctx: CallContext) -> str:
        if not ctx.signer:
            raise Unauthenticated("The call must be signed")
        return ctx.signer
