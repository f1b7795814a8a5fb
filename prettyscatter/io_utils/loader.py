from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Mapping

from prettyscatter.core.models import ElementBox, Rect
from prettyscatter.layout import ScatterElement, ScatterScene


def _number(data: Mapping[str, Any], key: str) -> float:
    value = float(data[key])
    if not math.isfinite(value):
        raise ValueError(f"Campo '{key}' deve ser um número finito: {data[key]!r}")
    return value


def box_from_dict(data: Mapping[str, Any]) -> ElementBox:
    """
    Constrói uma `ElementBox` a partir de um dicionário.

    Aceita tanto o formato `left, top, width, height` quanto o formato
    `left, top, right, bottom` (como o de `getBoundingClientRect`). Se
    ambos estiverem presentes, `width`/`height` têm precedência.
    """
    left = _number(data, "left")
    top = _number(data, "top")
    if "width" in data:
        width = _number(data, "width")
    else:
        width = _number(data, "right") - left
    if "height" in data:
        height = _number(data, "height")
    else:
        height = _number(data, "bottom") - top

    if width < 0.0 or height < 0.0:
        raise ValueError(f"Caixa com dimensões negativas: {dict(data)}")

    return ElementBox(left=left, top=top, width=width, height=height)


def rect_from_dict(data: Mapping[str, Any]) -> Rect:
    """Constrói um `Rect` a partir de `left, right, top, bottom`."""
    return Rect(
        left=_number(data, "left"),
        right=_number(data, "right"),
        top=_number(data, "top"),
        bottom=_number(data, "bottom"),
    )


def scene_from_dict(data: Mapping[str, Any]) -> ScatterScene:
    """
    Constrói uma `ScatterScene` a partir de um dicionário (por exemplo,
    o corpo JSON de uma requisição).

    Formato esperado:

        {
            "viewport_width": 1280,            (opcional)
            "container": {"left": 0, "top": 0, "width": 800, "height": 600},
            "elements": [{"id": "a", "width": 40, "height": 40}, ...],
            "exclusion_zones": [{"left": 0, "top": 0, "width": 200, "height": 80}, ...]
        }

    Elementos sem `id` recebem o índice na lista como identificador.

    Raises:
        KeyError:
            Se um campo obrigatório estiver ausente.
        ValueError:
            Se algum valor numérico for inválido.
    """
    container = box_from_dict(data["container"])

    elements: List[ScatterElement] = []
    for idx, raw in enumerate(data.get("elements", [])):
        elements.append(
            ScatterElement(
                id=str(raw.get("id", idx)),
                width=_number(raw, "width"),
                height=_number(raw, "height"),
            )
        )

    zones = [box_from_dict(raw) for raw in data.get("exclusion_zones", [])]

    viewport_width = math.inf
    if data.get("viewport_width") is not None:
        viewport_width = float(data["viewport_width"])
        if math.isnan(viewport_width):
            raise ValueError("viewport_width não pode ser NaN.")

    return ScatterScene(
        container=container,
        elements=elements,
        exclusion_zones=zones,
        viewport_width=viewport_width,
    )


def load_scene_from_file(scene_path: str) -> ScatterScene:
    """
    Carrega uma cena a partir de um arquivo JSON no formato aceito por
    `scene_from_dict`.
    """
    with open(scene_path, "r", encoding="utf-8") as f_scene:
        data: Dict[str, Any] = json.load(f_scene)
    return scene_from_dict(data)


__all__ = ["box_from_dict", "rect_from_dict", "scene_from_dict", "load_scene_from_file"]
