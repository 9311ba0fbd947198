from pydantic import BaseModel
from typing import Optional


"""
CallContext Entity:
1. signer (str, None): Account that signed the call. None for anonymous calls,
which are rejected by the origin resolver.
"""
class CallContext(BaseModel):
    signer: Optional[str] = None

    @classmethod
    def signed(cls, account: str) -> "CallContext":
        return cls(signer=account)
