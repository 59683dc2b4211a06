from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (qbscript package directory)
_QBSCRIPT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIRS = [_QBSCRIPT_DIR / 'prelude']
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 100000
_DEFAULT_STACK_SIZE = 512 * 1024 * 1024

PRELUDE_SUFFIX = '.qb'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_roots() -> List[Path]:
    return paths_from_env('QBSCRIPT_PRELUDE_PATH', _DEFAULT_PRELUDE_DIRS)


def get_prelude_files() -> List[Path]:
    """Prelude scripts in load order: roots in the order given, files sorted by name."""
    files: List[Path] = []
    for root in get_prelude_roots():
        if root.is_file():
            files.append(root)
        elif root.is_dir():
            files.extend(sorted(root.glob(f'*{PRELUDE_SUFFIX}')))
    return files


def get_log_level() -> str:
    return os.environ.get('QBSCRIPT_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def _int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_recursion_limit() -> int:
    """Python recursion limit for a run; each qbscript call level costs several frames."""
    return _int_from_env('QBSCRIPT_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_stack_size() -> int:
    """Stack size in bytes for the thread a run evaluates on."""
    return _int_from_env('QBSCRIPT_STACK_SIZE', _DEFAULT_STACK_SIZE)
