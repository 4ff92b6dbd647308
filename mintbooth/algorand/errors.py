"""
Algorand client related errors
"""

import functools
from typing import Callable, Any

from algosdk.error import AlgodHTTPError, IndexerHTTPError


class AlgorandRequestError(Exception):
    """
    Base exception for failed requests to the Algorand node or indexer
    """


class AlgodRequestError(AlgorandRequestError):
    """
    Algod request failed
    """


class IndexerRequestError(AlgorandRequestError):
    """
    Indexer request failed
    """


class AccountDoesNotExist(AlgodRequestError):
    """
    Raised if the Algorand account does not exist on-chain.
    """


class TransactionConfirmationTimeout(AlgodRequestError):
    """
    The submitted transaction was not confirmed within the allotted number of rounds
    """


def handle_algod_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator function that is used to map algod client errors to AlgodRequestError exceptions.

    - algosdk.error.AlgodHTTPError
        - if the HTTP error was a 'Not Found' (404), then AccountDoesNotExist is raised
        - otherwise an AlgodRequestError is raised
    - OSError (includes urllib.error.URLError) - the node is unreachable, raises an AlgodRequestError
    """

    @functools.wraps(func)
    def wrapped_func(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AlgodHTTPError as err:
            if err.code == 404:
                raise AccountDoesNotExist(str(err)) from err
            raise AlgodRequestError(str(err)) from err
        except OSError as err:  # URLError, connection refused, socket timeouts
            raise AlgodRequestError(str(err)) from err

    return wrapped_func


def handle_indexer_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator function that is used to map indexer client errors to IndexerRequestError exceptions.
    """

    @functools.wraps(func)
    def wrapped_func(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IndexerHTTPError as err:
            raise IndexerRequestError(str(err)) from err
        except OSError as err:  # URLError, connection refused, socket timeouts
            raise IndexerRequestError(str(err)) from err

    return wrapped_func
