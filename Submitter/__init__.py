from Submitter.Submitter import (
    FormSubmitter,
    TextInput,
    build_fields,
    normalize_texts,
    submit,
)

__all__ = ["FormSubmitter", "TextInput", "build_fields", "normalize_texts", "submit"]
