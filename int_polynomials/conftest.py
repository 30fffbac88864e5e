# (C) 2024 Irreducible Inc.

import functools
import pathlib
import types
from typing import Callable, Dict, Iterable

import pytest


def pytest_pycollect_makemodule(module_path: pathlib.Path, parent) -> pytest.Module:
    """
    Builds the collector for a test module and expands its @pytest.mark.parametrize_hypothesis tests.

    Args:
        module_path (pathlib.Path): path of the module being collected
        parent: the parent collector

    Returns:
        pytest.Module: Created module.
    """
    mod: pytest.Module = pytest.Module.from_parent(parent, path=module_path)
    expand_parametrize_hypothesis(mod)
    return mod


def expand_parametrize_hypothesis(mod: pytest.Module) -> None:
    """
    Replaces every test marked @pytest.mark.parametrize_hypothesis(name=decorators, ...) with one variant per
    keyword. The variant for `name` is called `<test>_<name>`, has the given hypothesis decorators applied to a fresh
    copy of the test, and carries @pytest.mark.<name>, so that e.g. `-m fast` selects a cheap run of the property
    tests and `-m slow` the exhaustive one.

    Args:
        mod (pytest.Module): pytest module
    """
    marked: Dict[str, Callable] = {
        name: obj
        for name, obj in getattr(mod.obj, "__dict__", {}).items()
        if callable(obj) and any(mark.name == "parametrize_hypothesis" for mark in getattr(obj, "pytestmark", []))
    }

    for test_name, test_func in marked.items():
        delattr(mod.obj, test_name)
        mark: pytest.Mark = next(m for m in test_func.pytestmark if m.name == "parametrize_hypothesis")
        if mark.args:
            raise ValueError(
                f"@pytest.mark.parametrize_hypothesis on '{mod.name}.{test_name}' only accepts keyword arguments"
            )

        for variant, decorators in mark.kwargs.items():
            if not isinstance(decorators, (list, tuple, set)):
                raise ValueError(
                    f"@pytest.mark.parametrize_hypothesis on '{mod.name}.{test_name}': "
                    + f"value for {variant} is not a sequence of decorators: {decorators}"
                )
            variant_name = f"{test_name}_{variant}"
            variant_func = clone_with_decorators(test_func, variant_name, decorators)
            setattr(mod.obj, variant_name, getattr(pytest.mark, variant)(variant_func))


def clone_with_decorators(test_func: Callable, new_name: str, decorators: Iterable[Callable]) -> Callable:
    """
    Copies a test function under a new name and decorates the copy.

    The remaining marks of the original (e.g. @pytest.mark.parametrize) are carried over by functools.update_wrapper.
    """
    clone: Callable = types.FunctionType(
        code=test_func.__code__,
        globals=test_func.__globals__,
        name=new_name,
        argdefs=test_func.__defaults__,
        closure=test_func.__closure__,
    )
    clone = functools.update_wrapper(clone, test_func)
    # update_wrapper copies pytestmark too; the expanded variant must not be expanded again
    clone.pytestmark = [m for m in getattr(clone, "pytestmark", []) if m.name != "parametrize_hypothesis"]
    for decorator in decorators:
        if not callable(decorator):
            raise ValueError(f"failed to create test function {new_name}, this is not a decorator: {decorator}")
        clone = decorator(clone)
    return clone
