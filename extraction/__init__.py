from extraction.document import extract_text

__all__ = ["extract_text"]
