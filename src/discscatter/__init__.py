"""discscatter top-level API.

External users can simply ``from discscatter import generate``.
"""

from . import logging as _logging  # noqa: F401  # side effect: NullHandler
from .api import SampleResult, generate, generate_domain, generate_from_config
from .contracts import Domain, InvalidParameter
from .preview import PreviewCache, take

__all__ = [
    "generate",
    "generate_domain",
    "generate_from_config",
    "SampleResult",
    "Domain",
    "InvalidParameter",
    "PreviewCache",
    "take",
]
