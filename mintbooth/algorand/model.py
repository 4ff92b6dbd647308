"""
Algorand domain model

https://developer.algorand.org/docs/get-details/accounts/
"""

from dataclasses import dataclass
from typing import NewType, Any

from algosdk import mnemonic

# Algorand account address. The address is 58 characters long
# https://developer.algorand.org/docs/get-details/accounts/#transformation-public-key-to-algorand-address
Address = NewType("Address", str)

MicroAlgos = NewType("MicroAlgos", int)

TxnId = NewType("TxnId", str)


@dataclass(slots=True, frozen=True)
class AccountBalance:
    """
    Account ALGO balance info
    """

    address: Address
    # total ALGO balance
    amount: MicroAlgos
    # balance the account must maintain
    min_balance: MicroAlgos

    @property
    def available(self) -> int:
        """
        Balance headroom above the minimum balance.

        NOTE: can be negative when the account's minimum balance requirement exceeds its balance,
        e.g., a brand new account that has never been funded.
        """
        return self.amount - self.min_balance

    @classmethod
    def from_account_info(cls, data: dict[str, Any]) -> "AccountBalance":
        """
        :param data: algod account info - required keys: 'address', 'amount', 'min-balance'
        """
        return cls(
            address=Address(data["address"]),
            amount=MicroAlgos(data["amount"]),
            min_balance=MicroAlgos(data["min-balance"]),
        )


@dataclass(slots=True)
class Mnemonic:
    """Mnemonics are 25 word lists that represent private keys.

    PrivateKey <-> Mnemonic

    https://developer.algorand.org/docs/get-details/accounts/#transformation-private-key-to-25-word-mnemonic
    """

    word_list: tuple[str, ...]

    @classmethod
    def from_word_list(cls, word_list: str) -> "Mnemonic":
        """
        :param word_list: 25 word whitespace delimited list
        """
        return cls(tuple(word_list.strip().split()))

    def __post_init__(self):
        """
        Check that the mnemonic is a 25 word list.

        :exception ValueError: if the mnemonic does not consist of 25 words
        """
        if len(self.word_list) != 25:
            raise ValueError("mnemonic must consist of 25 words")

    def to_private_key(self) -> str:
        """Converts the word list to the base64 encoded account private key"""
        return mnemonic.to_private_key(str(self))

    def __str__(self) -> str:
        return " ".join(self.word_list)

    def __repr__(self) -> str:
        # never leak the secret words into logs
        return "Mnemonic(word_list=<redacted>)"
