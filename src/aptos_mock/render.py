"""
Move stub rendering from module ABIs.

The ABI only carries type strings, so generic parameters become T0, T1, ...
and function parameters become arg0, arg1, ... Every function is declared
`native` because no body is available.
"""

from __future__ import annotations

from aptos_mock.constants import PADDING_FIELD_NAME
from aptos_mock.schema import FunctionAbi, ModuleAbi, StructAbi


def generic_params(count: int) -> str:
    if count <= 0:
        return ""
    return "<" + ", ".join(f"T{i}" for i in range(count)) + ">"


def render_struct(struct: StructAbi) -> str:
    abilities = f" has {', '.join(struct.abilities)}" if struct.abilities else ""
    generics = generic_params(len(struct.generic_type_params))
    fields = "\n".join(f"    {f.name}: {f.type}," for f in struct.fields if f.name != PADDING_FIELD_NAME)
    return f"struct {struct.name}{generics}{abilities} {{\n{fields}\n}}"


def render_function(fn: FunctionAbi) -> str:
    entry = "entry " if fn.is_entry else ""
    visibility = "public " if fn.is_public else ""
    generics = generic_params(len(fn.generic_type_params))
    params = ", ".join(f"arg{i}: {t}" for i, t in enumerate(fn.params))
    returns = f": ({', '.join(fn.return_types)})" if fn.return_types else ""
    return f"native {entry}{visibility}fun {fn.name}{generics}({params}){returns} ;"


def render_module(abi: ModuleAbi) -> str:
    structs = "\n".join(f"{render_struct(s)}\n" for s in abi.structs)
    functions = "\n".join(f"{render_function(f)}\n" for f in abi.exposed_functions)
    return f"module {abi.address}::{abi.name} {{\n{structs}\n{functions}\n}}"
