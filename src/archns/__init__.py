'''
archns: registro de nombres de registros e instrucciones por arquitectura
'''

from .numrange import NumericRange
from .diagnostics import ConfigDefect, Diagnostic, UnknownName
from .names import NameTable, FrozenNameTable, placeholder
from .registrar import Architecture, ArchitectureRegistrar, ArchSpec, RegisterBank
from .namespace import FrozenNamespace, GlobalNamespace
from .bootstrap import BUILTIN_REGISTRARS, bootstrap
from .logging_config import setup_logging

__all__ = [
    "NumericRange",
    "ConfigDefect",
    "Diagnostic",
    "UnknownName",
    "NameTable",
    "FrozenNameTable",
    "placeholder",
    "Architecture",
    "ArchitectureRegistrar",
    "ArchSpec",
    "RegisterBank",
    "FrozenNamespace",
    "GlobalNamespace",
    "BUILTIN_REGISTRARS",
    "bootstrap",
    "setup_logging",
]
