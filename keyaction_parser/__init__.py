"""Library for lexing keybinding actions into sequences of operations.

You should start with the `lexer` module.

Re-exports every member in all modules directly part of this package.  The
`cli` subpackage as well as modules under it need to be imported explicitly.
"""
# mypy: implicit-reexport
from ._package import *
from .errors import *
from .lexer import *
from .quoting import *
from .util import *
