"""
Account-related models for Walutomat client.

Amounts are kept as the decimal strings the API returns.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AccountId:
    """v1 account identifier."""
    client_id: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AccountId":
        return cls(client_id=str(data["clientId"]))


@dataclass(frozen=True)
class AccountBalance:
    """v1 balance of a single currency."""
    currency: str
    balance_all: str
    balance_available: str
    balance_reserved: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AccountBalance":
        return cls(
            currency=data["currency"],
            balance_all=data["balanceAll"],
            balance_available=data["balanceAvailable"],
            balance_reserved=data["balanceReserved"],
        )


@dataclass(frozen=True)
class Balance:
    """v2 balance of a single currency."""
    currency: str
    balance_total: str
    balance_available: str
    balance_reserved: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Balance":
        return cls(
            currency=data["currency"],
            balance_total=data["balanceTotal"],
            balance_available=data["balanceAvailable"],
            balance_reserved=data["balanceReserved"],
        )
