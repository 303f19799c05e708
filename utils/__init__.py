"""
Utilities Package
RPC connection and output persistence
"""

from .rpc_manager import RPCManager
from .artifact_writer import store_contract_data

__all__ = [
    'RPCManager',
    'store_contract_data'
]
