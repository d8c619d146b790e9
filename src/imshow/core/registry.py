"""
Registro de demos. Cada módulo dXX_*.py de imshow.demos se marca con
@register("dXX", "título") y load_demos() los importa para que se registren.
"""
import importlib
import pkgutil
from typing import Callable, Dict, List, Optional, Tuple

DemoFn = Callable[[], None]
_DEMOS: Dict[str, Tuple[str, DemoFn]] = {}


def register(did: str, title: str):
    def deco(fn: DemoFn):
        if did in _DEMOS and _DEMOS[did][1] is not fn:
            raise ValueError(f"id de demo repetido: {did}")
        _DEMOS[did] = (title, fn)
        return fn
    return deco


def get_demo(did: str) -> Optional[DemoFn]:
    entry = _DEMOS.get(did)
    return entry[1] if entry else None


def all_demos() -> List[Tuple[str, str, DemoFn]]:
    return [(did, title, fn) for did, (title, fn) in sorted(_DEMOS.items())]


def load_demos(package: str = "imshow.demos") -> List[Tuple[str, str, DemoFn]]:
    pkg = importlib.import_module(package)
    for info in pkgutil.iter_modules(pkg.__path__):
        if info.name.startswith("d"):
            importlib.import_module(f"{package}.{info.name}")
    return all_demos()
