"""Operation resource: shared header plus one variant payload."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, SerializeAsAny, StrictInt

from ...core.enums import OperationType
from ...core.exceptions import UnknownVariantError
from .detail import OperationDetail, UnknownOperation
from .manage_data import ManageData
from .offer import CreatePassiveOffer, ManageOffer
from .payment import AccountMerge, CreateAccount, Inflation, PathPayment, Payment
from .set_options import SetOptions
from .trust import AllowTrust, ChangeTrust


class Operation(BaseModel):
    """One operation record.

    The ``type_i`` discriminator selects the class of ``detail``. Test the
    variant through the ``is_*`` predicates, or type-test ``detail``:

        >>> if op.is_set_options:
        ...     op.detail.signer_weight

    Records with a ``type_i`` this library does not know carry an
    UnknownOperation detail; ``is_known`` is False for them.
    """

    type_i: StrictInt
    type: str | None = None
    id: str | None = None
    paging_token: str | None = None
    source_account: str | None = None
    created_at: datetime | None = None
    transaction_hash: str | None = None
    detail: SerializeAsAny[OperationDetail]

    model_config = ConfigDict(frozen=True)

    @property
    def operation_type(self) -> OperationType | None:
        return OperationType.from_code(self.type_i)

    @property
    def is_known(self) -> bool:
        return not isinstance(self.detail, UnknownOperation)

    def require_known(self) -> OperationDetail:
        """Return the detail, raising UnknownVariantError for unknown records."""
        if isinstance(self.detail, UnknownOperation):
            raise UnknownVariantError(self.type_i, self.type)
        return self.detail

    @property
    def is_create_account(self) -> bool:
        return isinstance(self.detail, CreateAccount)

    @property
    def is_payment(self) -> bool:
        return isinstance(self.detail, Payment)

    @property
    def is_path_payment(self) -> bool:
        return isinstance(self.detail, PathPayment)

    @property
    def is_manage_offer(self) -> bool:
        return isinstance(self.detail, ManageOffer)

    @property
    def is_create_passive_offer(self) -> bool:
        return isinstance(self.detail, CreatePassiveOffer)

    @property
    def is_set_options(self) -> bool:
        return isinstance(self.detail, SetOptions)

    @property
    def is_change_trust(self) -> bool:
        return isinstance(self.detail, ChangeTrust)

    @property
    def is_allow_trust(self) -> bool:
        return isinstance(self.detail, AllowTrust)

    @property
    def is_account_merge(self) -> bool:
        return isinstance(self.detail, AccountMerge)

    @property
    def is_inflation(self) -> bool:
        return isinstance(self.detail, Inflation)

    @property
    def is_manage_data(self) -> bool:
        return isinstance(self.detail, ManageData)
