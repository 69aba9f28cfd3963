"""Form rendering for translated records.

Exposes the markup primitives, the in-memory record types, the nested
attributes form builder and the locale-tab renderer.
"""

from .builder import FormBuilder
from .markup import SafeBuffer, Template
from .records import Errors, FieldSpec, TranslatedRecord, Translation
from .renderer import LocaleFormRenderer, TranslationInput, fields_block
from .translate import TranslateFormBuilder

__all__ = [
    "Errors",
    "FieldSpec",
    "FormBuilder",
    "LocaleFormRenderer",
    "SafeBuffer",
    "Template",
    "TranslateFormBuilder",
    "TranslatedRecord",
    "Translation",
    "TranslationInput",
    "fields_block",
]
