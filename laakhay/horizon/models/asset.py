"""Asset and account flag models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, model_validator

AUTH_REQUIRED_FLAG = 0x1
AUTH_REVOCABLE_FLAG = 0x2
AUTH_IMMUTABLE_FLAG = 0x4
AUTH_CLAWBACK_ENABLED_FLAG = 0x8
_FLAG_FIELDS = {
    "auth_required": AUTH_REQUIRED_FLAG,
    "auth_revocable": AUTH_REVOCABLE_FLAG,
    "auth_immutable": AUTH_IMMUTABLE_FLAG,
    "auth_clawback_enabled": AUTH_CLAWBACK_ENABLED_FLAG,
}
_KNOWN_FLAG_BITS = sum(_FLAG_FIELDS.values())

NATIVE = "native"
CREDIT_TYPES = ("credit_alphanum4", "credit_alphanum12")
LIQUIDITY_POOL_SHARES = "liquidity_pool_shares"


def _bits_to_dict(bits: int) -> dict[str, bool]:
    if bits < 0 or bits & ~_KNOWN_FLAG_BITS:
        raise ValueError(f"unknown flag bits in {bits:#x}")
    return {name: bool(bits & bit) for name, bit in _FLAG_FIELDS.items()}


class Flag(BaseModel):
    """Account authorization flags.

    AUTH_REQUIRED (0x1): trustlines are created unauthorized and the issuer
    must authorize each one.
    AUTH_REVOCABLE (0x2): the issuer may clear a trustline's authorization.
    AUTH_IMMUTABLE (0x4): none of the flags can change and the account can
    never be deleted.
    AUTH_CLAWBACK_ENABLED (0x8): the issuer may claw back its asset.

    The last two were added to the ledger later and default to False when
    the wire object omits them. Any other bit is rejected.

    Horizon has sent these as an object, as an integer bitmask and as a list
    of bit values; all three forms are accepted.
    """

    auth_required: StrictBool
    auth_revocable: StrictBool
    auth_immutable: StrictBool = False
    auth_clawback_enabled: StrictBool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def from_wire(cls, data: Any) -> Any:
        if isinstance(data, bool):
            raise ValueError("flags must be an object, bitmask or list of bits")
        if isinstance(data, int):
            return _bits_to_dict(data)
        if isinstance(data, list):
            bits = 0
            for bit in data:
                if isinstance(bit, bool) or not isinstance(bit, int):
                    raise ValueError(f"flag bits must be integers, got {bit!r}")
                bits |= bit
            return _bits_to_dict(bits)
        return data

    @classmethod
    def from_bits(cls, bits: int) -> Flag:
        """Build flags from a ledger bitmask."""
        return cls.model_validate(bits)

    @property
    def bits(self) -> int:
        """The ledger bitmask for these flags."""
        return sum(bit for name, bit in _FLAG_FIELDS.items() if getattr(self, name))


class Asset(BaseModel):
    """A native or issued asset, or shares of a liquidity pool.

    Pool shares carry no code or issuer; the pool is named by the balance
    line holding them.
    """

    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def check_shape(self) -> Asset:
        if self.asset_type in (NATIVE, LIQUIDITY_POOL_SHARES):
            if self.asset_code or self.asset_issuer:
                raise ValueError(f"{self.asset_type} asset has no code or issuer")
        elif self.asset_type in CREDIT_TYPES:
            if not self.asset_code or not self.asset_issuer:
                raise ValueError(f"{self.asset_type} asset requires asset_code and asset_issuer")
        else:
            raise ValueError(f"unknown asset_type {self.asset_type!r}")
        return self

    @classmethod
    def native(cls) -> Asset:
        return cls(asset_type=NATIVE)

    @classmethod
    def credit(cls, code: str, issuer: str) -> Asset:
        """Issued asset, picking the alphanum type from the code length."""
        asset_type = CREDIT_TYPES[0] if len(code) <= 4 else CREDIT_TYPES[1]
        return cls(asset_type=asset_type, asset_code=code, asset_issuer=issuer)

    @property
    def is_native(self) -> bool:
        return self.asset_type == NATIVE

    @property
    def is_pool_share(self) -> bool:
        return self.asset_type == LIQUIDITY_POOL_SHARES

    def __str__(self) -> str:
        if self.is_native or self.is_pool_share:
            return self.asset_type
        return f"{self.asset_code}:{self.asset_issuer}"


def collect_asset(data: dict[str, Any], prefix: str = "", target: str = "asset") -> dict[str, Any]:
    """Gather flat ``{prefix}asset_*`` wire keys into one nested asset object.

    Returns a shallow copy of ``data``. When none of the prefixed keys are
    present ``target`` is left unset, so validation reports it as missing.
    """
    data = dict(data)
    nested = {}
    for key in ("asset_type", "asset_code", "asset_issuer"):
        wire_key = f"{prefix}{key}"
        if wire_key in data:
            nested[key] = data.pop(wire_key)
    if nested and target not in data:
        data[target] = nested
    return data
