"""Writing query descriptors."""

from .writer import QUERY_FILENAME, Writer, encode_client_data, query_dir

__all__ = ["QUERY_FILENAME", "Writer", "encode_client_data", "query_dir"]
