"""Core enumerations shared by endpoints and resources.

Key Types:
    - Network: Which Horizon deployment a client talks to
    - OperationType: Wire discriminator codes (``type_i``) of operation records
    - Order: Sort direction for list endpoints
    - BatchPolicy: How list parsing treats malformed records
"""

from enum import Enum, IntEnum


class Network(str, Enum):
    """Public Horizon deployments."""

    PUBLIC = "public"
    TESTNET = "testnet"


class OperationType(IntEnum):
    """Operation discriminator values as sent in ``type_i``.

    The member name is the snake_case ``type`` string Horizon sends
    alongside the code, upper-cased.
    """

    CREATE_ACCOUNT = 0
    PAYMENT = 1
    PATH_PAYMENT = 2
    MANAGE_OFFER = 3
    CREATE_PASSIVE_OFFER = 4
    SET_OPTIONS = 5
    CHANGE_TRUST = 6
    ALLOW_TRUST = 7
    ACCOUNT_MERGE = 8
    INFLATION = 9
    MANAGE_DATA = 10

    @property
    def wire_name(self) -> str:
        """The ``type`` string Horizon sends for this code."""
        return self.name.lower()

    @property
    def wire_names(self) -> frozenset[str]:
        """Every ``type`` string Horizon has sent for this code.

        Later Horizon releases renamed a few operations without changing the
        code, so the current and the original names are both accepted.
        """
        return frozenset({self.wire_name, *_WIRE_ALIASES.get(self, ())})

    @classmethod
    def from_code(cls, code: int) -> "OperationType | None":
        """Look up a discriminator, returning None for codes this library does not know."""
        try:
            return cls(code)
        except ValueError:
            return None


_WIRE_ALIASES: dict[OperationType, tuple[str, ...]] = {
    OperationType.PATH_PAYMENT: ("path_payment_strict_receive",),
    OperationType.MANAGE_OFFER: ("manage_sell_offer",),
    OperationType.CREATE_PASSIVE_OFFER: ("create_passive_sell_offer",),
}


class Order(str, Enum):
    """Record ordering for list endpoints."""

    ASC = "asc"
    DESC = "desc"


class BatchPolicy(str, Enum):
    """Malformed-record handling when parsing a list of records.

    FAIL_FAST raises on the first bad record, naming its index.
    SKIP_INVALID keeps the good records and reports the bad ones per index.
    """

    FAIL_FAST = "fail_fast"
    SKIP_INVALID = "skip_invalid"
