from enums.document import DocumentType

__all__ = ["DocumentType"]
