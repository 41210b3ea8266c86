from Extractor.Extractor import (
    IMAGE_SELECTORS,
    RULES,
    ResultExtractor,
    extract,
    from_image_anchor,
    from_image_selectors,
    from_json_body,
    from_meta_image,
    from_raw_text,
    from_serving_url,
    looks_like_image,
)

__all__ = [
    "IMAGE_SELECTORS",
    "RULES",
    "ResultExtractor",
    "extract",
    "from_image_anchor",
    "from_image_selectors",
    "from_json_body",
    "from_meta_image",
    "from_raw_text",
    "from_serving_url",
    "looks_like_image",
]
