"""Upload fixtures and the accepted file-type catalog."""

from ideoz_e2e.files.file_types import (
    DEFAULT_MIME_TYPE,
    SUPPORTED_FILE_TYPES,
    UNSUPPORTED_FILE_TYPES,
    FileType,
    get_supported_file_types,
    get_unsupported_file_types,
    is_supported,
    mime_type_for,
)
from ideoz_e2e.files.upload_fixtures import cleanup_test_files, create_test_file, validate_file_size

__all__ = [
    "DEFAULT_MIME_TYPE",
    "FileType",
    "SUPPORTED_FILE_TYPES",
    "UNSUPPORTED_FILE_TYPES",
    "get_supported_file_types",
    "get_unsupported_file_types",
    "is_supported",
    "mime_type_for",
    "create_test_file",
    "validate_file_size",
    "cleanup_test_files",
]
