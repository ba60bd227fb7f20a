"""
Vector database boundary layer.

Provides index store clients for chunk fetch, query, upsert and delete.
- PineconeIndexStore: default backend
- S3VectorsIndexStore: Amazon S3 Vectors backend

Dependencies: pinecone, boto3
System role: Vector store adapter for chunk administration
"""

from backend.boundary.vdb.base_index_store import BaseIndexStore
from backend.boundary.vdb.index_store_factory import get_index_store
from backend.boundary.vdb.vector_schemas import IndexMatch, IndexRecord

__all__ = [
    "BaseIndexStore",
    "IndexMatch",
    "IndexRecord",
    "get_index_store",
]
