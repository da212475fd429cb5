from design_copier.verify.compiler import (
    Compiler,
    TailwindCompiler,
    check_version_compatibility,
)
from design_copier.verify.verification import (
    VerificationResult,
    build_synthetic_stylesheet,
    extract_class_names,
    verify,
)

__all__ = [
    "Compiler",
    "TailwindCompiler",
    "VerificationResult",
    "build_synthetic_stylesheet",
    "check_version_compatibility",
    "extract_class_names",
    "verify",
]
