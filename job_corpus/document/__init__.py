"""Tagged document format shared by extraction and reprocessing.

Public API:
    - TaggedDocument: Pydantic model of one extracted posting
    - encode: Serialize a TaggedDocument to its on-disk text form
    - decode: Parse on-disk text into a queryable DecodedDocument
    - DecodedDocument: Parsed document with tag lookup/removal and DOM queries
"""

from job_corpus.document.codec import DecodedDocument, decode, encode, read_document
from job_corpus.document.models import TaggedDocument

__all__ = [
    "TaggedDocument",
    "DecodedDocument",
    "decode",
    "encode",
    "read_document",
]
