# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvkit -- parse, expand, load and write .env files."""

from dotenvkit.errors import CoercionError, DotenvError, EnvError, MissingVariableError, ParseError
from dotenvkit.marshal import marshal
from dotenvkit.parser import parse, parse_entries
from dotenvkit.sdk import dotenv_values, load_dotenv, load_into, write_dotenv

__all__ = [
    "__version__",
    "CoercionError",
    "DotenvError",
    "EnvError",
    "MissingVariableError",
    "ParseError",
    "dotenv_values",
    "load_dotenv",
    "load_into",
    "marshal",
    "parse",
    "parse_entries",
    "write_dotenv",
]
__version__ = "0.1.0"
