# kbsearch/errors.py
"""
Error kinds raised by the search and ingestion code.

InvalidArgument  -> the caller sent something unusable (400)
ProcessingError  -> a valid request failed while being served (500)
StorageError     -> the article store could not reach its medium; callers
                    wrap it into ProcessingError before it leaves the core
"""


class KnowledgeBaseError(Exception):
    """Base class for every error this package raises on purpose."""


class InvalidArgument(KnowledgeBaseError, ValueError):
    pass


class ProcessingError(KnowledgeBaseError, RuntimeError):
    pass


class StorageError(KnowledgeBaseError, RuntimeError):
    pass
