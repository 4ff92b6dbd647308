"""
Payment transactions
"""
from algosdk.transaction import PaymentTxn, SuggestedParams

from mintbooth.algorand.model import Address, MicroAlgos
from mintbooth.algorand.transactions import create_lease

# Format: app/method
FREE_MINT_NOTE = "mintbooth/free-mint"


def sponsor_payment(
    *,
    sponsor: Address,
    receiver: Address,
    amount: MicroAlgos,
    suggested_params: SuggestedParams,
    note: str = FREE_MINT_NOTE,
) -> PaymentTxn:
    """
    Builds the payment that funds a user's mint.

    The payment is configured with a lease to protect against it being sent twice.
    Because every lease is unique, two payments built from the same params produce different transaction IDs.

    :exception ValueError: if the amount is negative
    """
    if amount < 0:
        raise ValueError("payment amount must not be negative")

    return PaymentTxn(
        sender=sponsor,
        receiver=receiver,
        amt=amount,
        sp=suggested_params,
        lease=create_lease(),
        note=note.encode(),
    )
