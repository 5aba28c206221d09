class DocfillError(Exception):
    """Base class for document-level failures."""


class DocumentDecodeError(DocfillError):
    pass


class DocumentEncodeError(DocfillError):
    pass


class EmptyUploadError(DocfillError, ValueError):
    pass
