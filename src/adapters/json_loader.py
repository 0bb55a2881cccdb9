"""Carga de listas JSON hacia modelos del dominio.

Por qué un adaptador:
- El Core no conoce archivos; la CLI necesita leer `RatedItem`/`Product`
  desde disco con validación estricta en el borde.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.domain.models import Product, RatedItem
from core.errors import InputFileError
from core.logging_setup import get_logger

M = TypeVar("M", bound=BaseModel)

logger = get_logger(__name__)


def _load_list(path: Path, model: type[M]) -> list[M]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InputFileError(path, f"cannot read file ({exc.strerror or exc})") from exc
    except UnicodeDecodeError as exc:
        raise InputFileError(path, f"invalid UTF-8 ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise InputFileError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(raw, list):
        raise InputFileError(path, "expected a JSON array")

    try:
        items = TypeAdapter(list[model]).validate_python(raw)
    except ValidationError as exc:
        raise InputFileError(path, f"{exc.error_count()} invalid item(s)") from exc

    logger.debug("Loaded %d %s item(s) from %s", len(items), model.__name__, path)
    return items


def load_rated_items(path: Path) -> list[RatedItem]:
    """Lee un array JSON de `{title, rating}`."""

    return _load_list(path, RatedItem)


def load_products(path: Path) -> list[Product]:
    """Lee un array JSON de `{name, price}`."""

    return _load_list(path, Product)
