"""File types the chat upload accepts and rejects."""

from pathlib import PurePath

from pydantic import BaseModel

DEFAULT_MIME_TYPE = "application/octet-stream"


class FileType(BaseModel):
    """Extension and MIME type of an upload candidate."""

    model_config = {"frozen": True}

    ext: str
    mime_type: str


SUPPORTED_FILE_TYPES: tuple[FileType, ...] = (
    FileType(ext="txt", mime_type="text/plain"),
    FileType(ext="md", mime_type="text/markdown"),
    FileType(ext="pdf", mime_type="application/pdf"),
    FileType(
        ext="docx",
        mime_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ),
    FileType(ext="doc", mime_type="application/msword"),
    FileType(
        ext="pptx",
        mime_type="application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ),
    FileType(ext="ppt", mime_type="application/vnd.ms-powerpoint"),
    FileType(
        ext="xlsx",
        mime_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ),
    FileType(ext="xls", mime_type="application/vnd.ms-excel"),
    FileType(ext="jpg", mime_type="image/jpeg"),
    FileType(ext="jpeg", mime_type="image/jpeg"),
    FileType(ext="png", mime_type="image/png"),
    FileType(ext="gif", mime_type="image/gif"),
    FileType(ext="webp", mime_type="image/webp"),
    FileType(ext="svg", mime_type="image/svg+xml"),
)

UNSUPPORTED_FILE_TYPES: tuple[FileType, ...] = (
    FileType(ext="exe", mime_type="application/x-executable"),
    FileType(ext="zip", mime_type="application/zip"),
    FileType(ext="rar", mime_type="application/x-rar-compressed"),
    FileType(ext="mp4", mime_type="video/mp4"),
    FileType(ext="mp3", mime_type="audio/mp3"),
    FileType(ext="avi", mime_type="video/avi"),
)


def get_supported_file_types() -> list[FileType]:
    return list(SUPPORTED_FILE_TYPES)


def get_unsupported_file_types() -> list[FileType]:
    return list(UNSUPPORTED_FILE_TYPES)


def _extension(filename: str) -> str:
    return PurePath(filename).suffix.lstrip(".").lower()


def mime_type_for(filename: str) -> str:
    """MIME type of a supported file name, octet-stream otherwise."""
    ext = _extension(filename)
    for file_type in SUPPORTED_FILE_TYPES:
        if file_type.ext == ext:
            return file_type.mime_type
    return DEFAULT_MIME_TYPE


def is_supported(filename: str) -> bool:
    ext = _extension(filename)
    return any(file_type.ext == ext for file_type in SUPPORTED_FILE_TYPES)
