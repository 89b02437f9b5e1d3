"""qir-constants — named, grouped, read-only string constants.

Holds the fixture identifiers of the quantum workspace client test
suite and the labels used by the QIR compiler/controller, behind a
strictly read-only registry.
"""

from qir_constants.core.groups import ErrorCode, FileExtension, TestConstants
from qir_constants.core.registry import REGISTRY, ConstantRegistry, get
from qir_constants.version import __version__

__all__: list[str] = [
    "REGISTRY",
    "ConstantRegistry",
    "ErrorCode",
    "FileExtension",
    "TestConstants",
    "__version__",
    "get",
]
