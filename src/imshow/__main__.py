"""
Lanzador de demos.
  python -m imshow          lista las demos y muestra d01
  python -m imshow d03      muestra la demo d03
  imshow-demo d03           lo mismo, instalado como script
Variables: IMSHOW_LOG, IMSHOW_DEF_W/H, IMSHOW_RESAMPLE (ver imshow.config)
"""
import sys

from imshow.config import log_level
from imshow.core.registry import get_demo, load_demos
from imshow.core.window import wait
from imshow.logging_config import setup_logging


def _run(argv) -> int:
    setup_logging(level=log_level())

    demos = load_demos()
    if not argv:
        for did, title, _ in demos:
            print(f"  {did} — {title}")
    did = argv[0] if argv else "d01"
    fn = get_demo(did)
    if fn is None:
        opciones = ", ".join(d for d, _, _ in demos)
        print(f"[ERR] demo desconocida: {did} (opciones: {opciones})", file=sys.stderr)
        return 2

    fn()
    wait()
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        return _run(argv)
    except Exception as e:
        print(f"[FATAL] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
