from .typecheck import TypeCheck  # noqa: F401
