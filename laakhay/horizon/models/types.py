"""Constrained wire types shared by resource models."""

from typing import Annotated

from pydantic import Field, StrictInt

UINT32_MAX = 2**32 - 1

# Signer and master key weights are single bytes on the ledger.
Weight = Annotated[StrictInt, Field(ge=0, le=255)]

# Threshold sums are unsigned 32-bit values.
Threshold = Annotated[StrictInt, Field(ge=0, le=UINT32_MAX)]

# Strkey-encoded account ids and signer keys.
PublicKey = Annotated[str, Field(min_length=1)]
