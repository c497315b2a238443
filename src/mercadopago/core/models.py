"""
Typed records for the responses returned by the MercadoPago API.

Each record keeps the untouched response under ``raw`` so callers never lose
fields that are not modelled here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

__all__ = ["Payment", "Preference", "SearchResult"]


@dataclass(frozen=True)
class Preference:
    id: Optional[str]
    init_point: Optional[str]
    sandbox_init_point: Optional[str]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Preference":
        return cls(
            id=payload.get("id"),
            init_point=payload.get("init_point"),
            sandbox_init_point=payload.get("sandbox_init_point"),
            raw=payload,
        )


@dataclass(frozen=True)
class Payment:
    """A collection record, i.e. a single payment received by the account."""

    id: Optional[Any]
    status: Optional[str]
    status_detail: Optional[str]
    external_reference: Optional[str]
    transaction_amount: Optional[Any]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Payment":
        # notifications wrap the record under "collection"
        data = payload.get("collection", payload)
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            id=data.get("id"),
            status=data.get("status"),
            status_detail=data.get("status_detail"),
            external_reference=data.get("external_reference"),
            transaction_amount=data.get("transaction_amount"),
            raw=payload,
        )


@dataclass(frozen=True)
class SearchResult:
    results: Tuple[Payment, ...]
    paging: Dict[str, Any]
    raw: Dict[str, Any]

    @property
    def total(self) -> Optional[int]:
        return self.paging.get("total")

    def __iter__(self) -> Iterator[Payment]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "SearchResult":
        return cls(
            results=tuple(
                Payment.from_response(item) for item in payload.get("results") or ()
            ),
            paging=dict(payload.get("paging") or {}),
            raw=payload,
        )
