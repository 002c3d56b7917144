"""Tracking of the server's ledger clock as seen by one client."""

import logging
import threading
from dataclasses import dataclass

import libraclient.constants as C
from libraclient.errors import ChainIdMismatchError, StaleResponseError

log = logging.getLogger("libraclient.ledger_state")


@dataclass(frozen=True, slots=True)
class LedgerState:
    """Response `libra_ledger_timestampusec` and `libra_ledger_version`."""

    timestamp_usec: int = 0
    version: int = 0

    def __post_init__(self):
        if self.timestamp_usec < 0 or self.version < 0:
            raise ValueError(f"ledger state fields are unsigned, got {self!r}")

    def __str__(self):
        return f"ledger(version={self.version}, timestamp_usec={self.timestamp_usec})"


class LedgerStateGuard:
    """Latest accepted ledger state plus the chain id every response must carry.

    The stored state is an immutable LedgerState swapped by reference. Writers
    serialize on a lock and do their compare-and-replace inside it; readers just
    load the reference, so they never block each other and never see half an update.
    """

    def __init__(self, chain_id: int, state: LedgerState | None = None) -> None:
        if not 0 <= chain_id <= C.MAX_CHAIN_ID:
            raise ValueError(f"chain id must fit in a byte, got {chain_id}")
        self.chain_id = chain_id
        self._lock = threading.Lock()
        self._state = state or LedgerState()

    def current(self) -> LedgerState:
        return self._state

    def update(self, state: LedgerState) -> None:
        """Replace the stored state without any monotonicity check."""
        with self._lock:
            self._state = state

    def validate_chain_id(self, chain_id: int) -> None:
        if chain_id != self.chain_id:
            log.warning("Chain id mismatch: expected %s, got %s", self.chain_id, chain_id)
            raise ChainIdMismatchError(self.chain_id, chain_id)

    def validate_and_advance(self, chain_id: int, candidate: LedgerState) -> None:
        """Check a response's chain id and ledger state, then record the state.

        Raises:
            ChainIdMismatchError: before any staleness check, whatever the candidate.
            StaleResponseError: candidate version or timestamp went backwards;
                the stored state is left untouched.
        """
        self.validate_chain_id(chain_id)

        with self._lock:
            last = self._state
            if candidate == last:
                return
            if candidate.version < last.version:
                log.warning("Stale response: version %s < %s", candidate.version, last.version)
                raise StaleResponseError("version", last.version, candidate.version)
            if candidate.timestamp_usec < last.timestamp_usec:
                log.warning("Stale response: timestamp %s < %s", candidate.timestamp_usec, last.timestamp_usec)
                raise StaleResponseError("timestamp(usec)", last.timestamp_usec, candidate.timestamp_usec)
            self._state = candidate
        log.debug("Advanced %s -> %s", last, candidate)
