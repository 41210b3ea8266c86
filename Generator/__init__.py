from Generator.Config import DEFAULT_USER_AGENT, GeneratorOptions
from Generator.Generator import (
    EFFECT_SERVICES,
    fetch_page,
    generate,
    generate_effect,
    generate_ephoto,
    generate_photooxy,
    generate_textpro,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "EFFECT_SERVICES",
    "GeneratorOptions",
    "fetch_page",
    "generate",
    "generate_effect",
    "generate_ephoto",
    "generate_photooxy",
    "generate_textpro",
]
