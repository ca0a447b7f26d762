import functools
import inspect
import os
from inspect import Parameter, Signature


class TypeCheck(object):
    """Class-based decorator to optionally check the argument types of a
    function against its annotations before the function is invoked, and
    its return value afterwards.

    Supported annotations:
    - types (including abstract base classes such as
      ``collections.abc.Sequence``)
    - strings, evaluated with the function's globals and the bound
      arguments as locals. The result must be a boolean (the check passes
      if it is True) or a type (the value must be an instance of it).
    - tuples of types and strings, which pass if any member passes.

    Checks only run when python is in debug mode (i.e. not started with
    -O) and the environment variable DISABLE_TYPECHECKING is not set.
    Passing force=True always checks. A failed check raises an
    AssertionError naming the offending argument.

    For sample usage, please see tests/utils/test_typecheck.py
    """

    def __init__(self, force=False):
        self._check_types = force
        if "DISABLE_TYPECHECKING" not in os.environ:
            self._check_types = self._check_types or __debug__

    def _check_string_annotation(self, value, annotation, local_dict):
        try:
            t_eval = eval(annotation, self._func.__globals__, dict(local_dict))
        except Exception as e:
            raise AssertionError(
                f"Evaluating string annotation {{{annotation}}} "
                f"raised the exception: {e}"
            )

        if isinstance(t_eval, bool):
            return t_eval
        if isinstance(t_eval, type):
            return isinstance(value, t_eval)
        return False

    def _validate_argument(self, name, value, annotation, local_dict):
        """Raise an AssertionError if ``value`` does not satisfy ``annotation``."""
        if annotation in (Parameter.empty, Signature.empty):
            return True

        options = annotation if isinstance(annotation, tuple) else (annotation,)
        for option in options:
            assert isinstance(option, (type, str)), (
                f"Type annotation for {name} must be a type, a string, "
                f"or a tuple of types and strings ({annotation})"
            )

        valid = any(
            isinstance(value, option)
            if isinstance(option, type)
            else self._check_string_annotation(value, option, local_dict)
            for option in options
        )

        assert valid, (
            f"Expected {name} to be of type {annotation}, "
            f"but found ({value}) of type ({type(value)})"
        )
        return True

    def _wrap_func(self, func):
        self._func = func
        signature = inspect.signature(func)

        @functools.wraps(func)
        def checked_wrapper(*args, **kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            for arg_name, arg_value in bound.arguments.items():
                parameter = signature.parameters[arg_name]
                if parameter.kind in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD):
                    continue
                self._validate_argument(
                    arg_name, arg_value, parameter.annotation, bound.arguments
                )

            return_value = func(*args, **kwargs)
            self._validate_argument(
                "return value",
                return_value,
                signature.return_annotation,
                bound.arguments,
            )
            return return_value

        return checked_wrapper

    def __call__(self, func):
        """Returns ``func`` with type checking added, if checking is enabled."""
        if self._check_types:
            return self._wrap_func(func)

        return func
