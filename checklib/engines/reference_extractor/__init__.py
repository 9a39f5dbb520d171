"""Reference extractor engine — find CDN script/link references in HTML text."""

from checklib.engines.reference_extractor.extractor import cdn_tokens, extract, scan_document
from checklib.engines.reference_extractor.models import ExtractionResult, Reference, SkippedUrl

__all__ = ["ExtractionResult", "Reference", "SkippedUrl", "cdn_tokens", "extract", "scan_document"]
