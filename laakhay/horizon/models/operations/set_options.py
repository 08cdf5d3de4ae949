"""Set options operation."""

from __future__ import annotations

from typing import ClassVar

from ...core.enums import OperationType
from ..asset import Flag
from ..types import PublicKey, Threshold, Weight
from .detail import OperationDetail


class SetOptions(OperationDetail):
    """Use "Set Options" to change the following options of an account.

    - Set or clear account flags (see Flag).
    - Add a signer, or change its weight.
    - Change the master key weight and the low, medium and high thresholds.
    - Set the home domain used for reverse federation lookup.

    ``set_flags`` and ``clear_flags`` are None when the operation did not
    touch them, which is distinct from a Flag with both bits off.
    """

    type_code: ClassVar[OperationType] = OperationType.SET_OPTIONS

    signer_key: PublicKey
    signer_weight: Weight
    master_key_weight: Weight
    low_threshold: Threshold
    med_threshold: Threshold
    high_threshold: Threshold
    home_domain: str
    set_flags: Flag | None = None
    clear_flags: Flag | None = None
