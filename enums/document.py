from enum import StrEnum


class DocumentType(StrEnum):
    TXT = "text/plain"
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @classmethod
    def from_content_type(cls, content_type: str | None) -> "DocumentType | None":
        """Resolve a declared content type.

        Args:
            content_type: The declared MIME type, possibly with parameters.

        Returns:
            The matching document type, or None when it is not supported.

        """
        if not content_type:
            return None

        media_type = content_type.split(";", maxsplit=1)[0].strip().lower()
        try:
            return cls(media_type)
        except ValueError:
            return None

    @property
    def suffix(self) -> str:
        return f".{self.name.lower()}"
