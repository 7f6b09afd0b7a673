"""In-memory storage for transactions and the assessment audit log.

Transactions are indexed by sender id for quick history lookups. The
store is seeded from the fixture dataset at startup; all data lives in
memory and is lost on restart.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from app.models import AuditEntry, Transaction


class MemoryStore:
    """In-memory store for transactions and audit entries."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        # Transactions indexed by sender id, in insertion order
        self._transactions: Dict[str, List[Transaction]] = {}
        self._order: List[Transaction] = []
        # Chronological audit log
        self._audit_log: List[AuditEntry] = []
        for tx in transactions or []:
            self.add(tx)

    def add(self, tx: Transaction) -> None:
        """Store a transaction, indexed by sender id."""
        self._transactions.setdefault(tx.sender_id, []).append(tx)
        self._order.append(tx)

    def add_audit(self, entry: AuditEntry) -> None:
        """Append an entry to the audit log."""
        self._audit_log.append(entry)

    def get_all(self) -> List[Transaction]:
        """Return every transaction in insertion order."""
        return list(self._order)

    def get_by_sender(self, sender_id: str) -> List[Transaction]:
        """Return the transactions sent by a user."""
        return list(self._transactions.get(sender_id, []))

    def get_by_user(self, user_id: str) -> List[Transaction]:
        """Return transactions where the user is sender or receiver."""
        return [
            t for t in self._order
            if t.sender_id == user_id or t.receiver_id == user_id
        ]

    def get_flagged(self) -> List[Transaction]:
        """Return transactions awaiting review: HIGH risk or FLAGGED status."""
        return [
            t for t in self._order
            if t.risk_score == "HIGH" or t.status == "FLAGGED"
        ]

    def get_audit_log(
        self,
        transaction_id: Optional[str] = None,
        risk_score: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[AuditEntry]:
        """Return audit entries, optionally filtered by id, tier and/or time range."""
        results: List[AuditEntry] = []
        for entry in self._audit_log:
            if transaction_id is not None and entry.transaction_id != transaction_id:
                continue
            if risk_score is not None and entry.verdict.risk_score != risk_score:
                continue
            if since is not None and entry.assessed_at < since:
                continue
            if until is not None and entry.assessed_at > until:
                continue
            results.append(entry)
        return results
