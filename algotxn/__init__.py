from algotxn import sdk  # noqa F401
from algotxn.provider import AlgoTxnProvider  # noqa F401

__version__ = "0.1.0"
