"""Path-based scope classification and folder-type detection."""

from gluadoc.scope.classifier import classify
from gluadoc.scope.filesystem import FileSystem, LocalFileSystem, uri_to_path
from gluadoc.scope.folder_detector import FolderDetector
from gluadoc.scope.schemas import ClassificationResult, FolderBaseInfo, FolderInfo

__all__ = [
    "ClassificationResult",
    "FileSystem",
    "FolderBaseInfo",
    "FolderDetector",
    "FolderInfo",
    "LocalFileSystem",
    "classify",
    "uri_to_path",
]
