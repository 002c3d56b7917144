"""Typed views of JSON-RPC results.

Field names follow the server's JSON. Fields the server adds later are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

import libraclient.constants as C


class _Result(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Amount(_Result):
    amount: int
    currency: str


class CurrencyInfo(_Result):
    code: str
    scaling_factor: int
    fractional_part: int
    to_lbr_exchange_rate: float = 0.0
    mint_events_key: str = ""
    burn_events_key: str = ""
    preburn_events_key: str = ""
    cancel_burn_events_key: str = ""
    exchange_rate_update_events_key: str = ""


class Metadata(_Result):
    version: int
    timestamp: int
    chain_id: int
    script_hash_allow_list: list[str] | None = None
    module_publishing_allowed: bool | None = None
    libra_version: int | None = None


class Account(_Result):
    address: str
    balances: list[Amount] = Field(default_factory=list)
    sequence_number: int
    authentication_key: str
    sent_events_key: str
    received_events_key: str
    delegated_key_rotation_capability: bool = False
    delegated_withdrawal_capability: bool = False
    is_frozen: bool = False
    role: dict[str, Any] = Field(default_factory=dict)

    def balance(self, currency: str) -> int:
        return next((b.amount for b in self.balances if b.currency == currency), 0)


class Event(_Result):
    key: str
    sequence_number: int
    transaction_version: int
    data: dict[str, Any] = Field(default_factory=dict)


class VMStatus(_Result):
    type: str
    location: str | None = None
    abort_code: int | None = None
    function_index: int | None = None
    code_offset: int | None = None
    explanation: dict[str, Any] | None = None

    def __str__(self):
        if self.type == C.VMStatusType.MOVE_ABORT:
            return f"{self.type}(location={self.location}, abort_code={self.abort_code})"
        return self.type


class TransactionData(_Result):
    type: str
    sender: str | None = None
    signature_scheme: str | None = None
    signature: str | None = None
    public_key: str | None = None
    sequence_number: int | None = None
    chain_id: int | None = None
    max_gas_amount: int | None = None
    gas_unit_price: int | None = None
    gas_currency: str | None = None
    expiration_timestamp_secs: int | None = None
    script_hash: str | None = None
    script_bytes: str | None = None
    script: dict[str, Any] | None = None


class Transaction(_Result):
    version: int
    transaction: TransactionData
    hash: str
    bytes: str | None = None
    events: list[Event] = Field(default_factory=list)
    vm_status: VMStatus
    gas_used: int = 0

    @property
    def is_executed(self) -> bool:
        return self.vm_status.type == C.VM_STATUS_EXECUTED

    def __str__(self):
        t = self.transaction
        return f"{t.type} -- {t.sender} -- seq={t.sequence_number} -- {self.vm_status}"
