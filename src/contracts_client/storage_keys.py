"""Child-trie key derivation for contract storage.

A contract's storage lives in a child trie identified by its ``trie_id``.
The RPC addresses it by the full trie id plus the trie id without the
``:child_storage:`` prefix, which for the default trie id layout is its
last 32 bytes. Storage keys are hashed with blake2b-256 before lookup.
"""

from __future__ import annotations

import hashlib

CHILD_INFO_LENGTH = 32
STORAGE_KEY_DIGEST_SIZE = 32
# ChildType::CryptoUniqueId, the only child trie type the node supports
DEFAULT_CHILD_TYPE = 1


def child_info_from_trie_id(trie_id: bytes) -> bytes:
    """Strip the fixed-length prefix, keeping the trailing unique id."""
    return trie_id[-CHILD_INFO_LENGTH:]


def hash_storage_key(storage_key: bytes) -> str:
    """blake2b-256 of the raw key, 0x-prefixed hex."""
    digest = hashlib.blake2b(storage_key, digest_size=STORAGE_KEY_DIGEST_SIZE)
    return "0x" + digest.hexdigest()
