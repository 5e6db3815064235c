from .document_loader import DOCUMENT_SUFFIXES, DocumentLoader, document_loader, is_json_document

__all__ = ["DOCUMENT_SUFFIXES", "DocumentLoader", "document_loader", "is_json_document"]
