"""Exercise auto-discovery and registration.

Scans style_checker/exercises/ for modules that define an `exercise` object
of type Exercise. Collects them into a dict keyed by name, built once and
never mutated afterwards.
"""

import importlib
import pkgutil

from style_checker.core.types import Exercise

_registry: dict[str, Exercise] = {}
_modules: dict[str, str] = {}


def discover() -> dict[str, Exercise]:
    """Import all exercise modules and return the registry."""
    if _registry:
        return _registry

    import style_checker.exercises as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'style_checker.exercises.{modname}')
        ex = getattr(module, 'exercise', None)
        if isinstance(ex, Exercise):
            if ex.name in _registry:
                raise RuntimeError(f'Duplicate exercise name: {ex.name}')
            _registry[ex.name] = ex
            _modules[ex.name] = module.__name__

    return _registry


def get(name: str) -> Exercise:
    """Get an exercise by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown exercise: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_exercises() -> dict[str, Exercise]:
    """Return all registered exercises."""
    return discover()


def module_for(name: str) -> object:
    """The module an exercise was defined in (its docstring is the exercise docs)."""
    get(name)
    return importlib.import_module(_modules[name])
